"""
Builders for Day One Classic bundles used across the test suite.
"""
from .bundle import (
    DEFAULT_CREATION_DATE,
    DEFAULT_TEXT,
    DEFAULT_UUID,
    TEST_DEVICE,
    doentry_xml,
    make_bundle,
    write_entry,
    write_photo,
)

__all__ = [
    "DEFAULT_CREATION_DATE",
    "DEFAULT_TEXT",
    "DEFAULT_UUID",
    "TEST_DEVICE",
    "doentry_xml",
    "make_bundle",
    "write_entry",
    "write_photo",
]
