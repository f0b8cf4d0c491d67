"""
Streaming JSON reader for generated Journal.json files.

Uses ijson to parse large files one entry at a time,
so verifying a multi-GB conversion doesn't exhaust memory.
"""
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Tuple

import ijson
from ijson.common import IncompleteJSONError, JSONError

STREAMING_THRESHOLD_MB = 100

# ijson events allowed directly at the top level and at the "entries" prefix.
DOCUMENT_EVENTS = {"start_map", "map_key", "end_map"}
ENTRIES_EVENTS = {"start_array", "end_array"}


def stream_parse_dayone_entries(file_path: Path) -> Iterator[Dict[str, Any]]:
    """
    Stream-parse a Day One import document.

    Yields entries one at a time instead of loading entire file into memory.

    For files < 100MB, uses standard json.load() for simplicity.
    For files >= 100MB, uses ijson streaming parser.

    A missing "entries" key means no entries. Any other non-list value is
    rejected the same way on both paths.

    Args:
        file_path: Path to Journal.json

    Yields:
        Entry dictionaries one at a time

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is malformed, truncated or not a Day One document
        IOError: If file read fails
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    file_size = file_path.stat().st_size
    file_size_mb = file_size / (1024 * 1024)

    if file_size_mb < STREAMING_THRESHOLD_MB:
        data = parse_dayone_export_standard(file_path)
        if not isinstance(data, dict):
            raise ValueError("Invalid Day One document: top level is not an object")
        entries = data.get('entries', [])
        if not isinstance(entries, list):
            raise ValueError("Invalid Day One document: entries is not a list")
        for entry in entries:
            yield entry
    else:
        try:
            with open(file_path, 'rb') as f:
                # Floats stay floats so validation sees what the file holds.
                events = _checked_events(ijson.parse(f, use_float=True))
                for entry in ijson.items(events, 'entries.item'):
                    yield entry
        except IncompleteJSONError as e:
            raise ValueError(f"Incomplete JSON (truncated file): {e}") from e
        except JSONError as e:
            raise ValueError(f"Invalid JSON: {e}") from e
        except OSError as e:
            raise IOError(f"Failed to stream JSON file: {e}") from e


def _checked_events(events: Iterable[Tuple[str, str, Any]]) -> Iterator[Tuple[str, str, Any]]:
    """Pass ijson events through, rejecting documents json.load would reject."""
    for prefix, event, value in events:
        if prefix == '' and event not in DOCUMENT_EVENTS:
            raise ValueError("Invalid Day One document: top level is not an object")
        if prefix == 'entries' and event not in ENTRIES_EVENTS:
            raise ValueError("Invalid Day One document: entries is not a list")
        yield prefix, event, value


def parse_dayone_export_standard(file_path: Path) -> Dict[str, Any]:
    """
    Standard (non-streaming) JSON parser for small files.

    Loads entire file into memory. Use only for files < 100MB.

    Args:
        file_path: Path to Journal.json

    Returns:
        Parsed document

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is malformed
        IOError: If file read fails
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ValueError(f"File is not valid UTF-8: {e}") from e
    except OSError as e:
        raise IOError(f"Failed to read JSON file: {e}") from e
