"""
Day One JSON output.

Models and writer for the Day One import document.
"""
from .models import DayOneEntry, DayOneExport, DayOneExportMetadata, DayOnePhoto
from .serializer import dump_export, write_export

__all__ = [
    "DayOneEntry",
    "DayOneExport",
    "DayOneExportMetadata",
    "DayOnePhoto",
    "dump_export",
    "write_export",
]
