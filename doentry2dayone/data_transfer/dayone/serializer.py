"""
Day One JSON writer.
"""
import json
from pathlib import Path
from typing import Any, Dict

from doentry2dayone.core.exceptions import OutputWriteError

from .models import DayOneExport

DEFAULT_INDENT = 1


def export_to_dict(export: DayOneExport) -> Dict[str, Any]:
    return export.model_dump(mode="json", by_alias=True)


def dump_export(export: DayOneExport, indent: int = DEFAULT_INDENT) -> str:
    """Render the export exactly as write_export puts it on disk."""
    return json.dumps(export_to_dict(export), indent=indent, ensure_ascii=False) + "\n"


def write_export(export: DayOneExport, destination: Path, indent: int = DEFAULT_INDENT) -> int:
    """
    Write the export as UTF-8 JSON, replacing any existing file.

    The destination directory is created when missing.

    Args:
        export: Aggregate to write
        destination: Output file path
        indent: Spaces per indentation level

    Returns:
        Number of bytes written

    Raises:
        OutputWriteError: If the directory or file cannot be written, or the
            data cannot be encoded
    """
    destination = Path(destination)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with open(destination, "w", encoding="utf-8") as f:
            json.dump(export_to_dict(export), f, indent=indent, ensure_ascii=False)
            f.write("\n")
    except (OSError, TypeError, ValueError) as e:
        raise OutputWriteError(f"Failed to write {destination}: {e}") from e

    return destination.stat().st_size
