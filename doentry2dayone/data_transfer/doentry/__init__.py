"""
Day One Classic import module.

Handles walking and parsing Day One Classic (.doentry) bundles.
"""
from .bundle import DoEntryBundle
from .mappers import DoEntryToDayOneMapper
from .plist_parser import DoEntryParser, DoEntryRecord

__all__ = [
    "DoEntryBundle",
    "DoEntryParser",
    "DoEntryRecord",
    "DoEntryToDayOneMapper",
]
