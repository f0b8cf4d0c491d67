"""
Data Transfer Objects (DTOs) for conversion results.
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class SkippedEntry(BaseModel):
    """An entry file that could not be converted."""
    path: str = Field(..., description="Source file path")
    error: str = Field(..., description="Why the file was skipped")


class ConversionSummary(BaseModel):
    """
    Summary of a conversion run.
    """
    files_found: int = Field(default=0, description="Files found under entries/")
    entries_converted: int = Field(default=0, description="Entries written to the output")
    entries_skipped: int = Field(default=0, description="Files skipped because of errors")
    photos_attached: int = Field(default=0, description="Entries that got a photo record")
    photos_copied: int = Field(default=0, description="Photo files copied next to the output")
    output_path: Optional[str] = Field(default=None, description="Written Day One JSON file")
    output_bytes: int = Field(default=0, description="Size of the written file")
    skipped: List[SkippedEntry] = Field(default_factory=list, description="Skipped files with reasons")
    warnings: List[str] = Field(default_factory=list, description="Non-fatal problems")
