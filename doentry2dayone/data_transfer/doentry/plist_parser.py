"""
Day One Classic entry parser.

Each ``.doentry`` file is an Apple property list::

    <plist version="1.0">
    <dict>
        <key>Creation Date</key>
        <date>2023-08-01T10:00:00Z</date>
        <key>Entry Text</key>
        <string>Hello</string>
        <key>Starred</key>
        <true/>
        <key>UUID</key>
        <string>ABC123</string>
    </dict>
    </plist>

Only three keys and the boolean "starred" marker are read. The file is
streamed through a pull parser, so memory stays flat regardless of how much
other structure (tags, location, weather) an entry carries.
"""
from __future__ import annotations

import dataclasses
import xml.etree.ElementTree as ET
from enum import Enum
from pathlib import Path
from typing import Optional
from xml.parsers import expat

from doentry2dayone.core.exceptions import EntryParseError

KEY_CREATION_DATE = "Creation Date"
KEY_ENTRY_TEXT = "Entry Text"
KEY_UUID = "UUID"

READ_CHUNK_SIZE = 64 * 1024

# expat's "no element found", raised when input ends outside any element.
NO_ELEMENT_CODE = expat.errors.codes[expat.errors.XML_ERROR_NO_ELEMENTS]


@dataclasses.dataclass(frozen=True)
class DoEntryRecord:
    """Fields extracted from one entry file."""
    uuid: str = ""
    creation_date: str = ""
    text: str = ""
    starred: bool = False


class ParserState(str, Enum):
    IDLE = "idle"
    AWAITING_KEY = "awaiting_key"
    AWAITING_VALUE = "awaiting_value"


# Start tags that arm the parser.
START_TRANSITIONS: dict[str, ParserState] = {
    "key": ParserState.AWAITING_KEY,
    "date": ParserState.AWAITING_VALUE,
    "string": ParserState.AWAITING_VALUE,
}

BOOLEAN_TAGS: dict[str, bool] = {"true": True, "false": False}

# plist key -> DoEntryRecord fields receiving the value.
FIELDS_BY_KEY: dict[str, tuple[str, ...]] = {
    KEY_CREATION_DATE: ("creation_date",),
    KEY_ENTRY_TEXT: ("text",),
    KEY_UUID: ("uuid",),
}


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


class DoEntryParser:
    """
    Streaming parser for Day One Classic entry files.

    ``starred_key`` controls how boolean markers are read:

    - ``None``: every ``<true/>``/``<false/>`` in the file sets starred, the
      last one wins. The key the marker belongs to is not checked.
    - a key name (usually ``"Starred"``): only a marker directly following
      that key counts.
    """

    def __init__(self, starred_key: Optional[str] = None, chunk_size: int = READ_CHUNK_SIZE):
        self.starred_key = starred_key
        self.chunk_size = chunk_size

    def parse_file(self, path: Path) -> DoEntryRecord:
        """
        Parse one entry file.

        A file that ends before any element starts (empty, whitespace,
        comments or processing instructions only) gives an empty record.

        Raises:
            EntryParseError: If the XML is malformed or truncated
            OSError: If the file cannot be read
        """
        path = Path(path)
        machine = _EntryStateMachine(self.starred_key)
        pull_parser = ET.XMLPullParser(events=("start", "end"))

        with open(path, "rb") as f:
            try:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    pull_parser.feed(chunk)
                    machine.consume(pull_parser.read_events())
                pull_parser.close()
                machine.consume(pull_parser.read_events())
            except ET.ParseError as e:
                if not machine.started and _is_missing_root(e):
                    return machine.record()
                raise _entry_parse_error(path, e) from e

        return machine.record()

    def parse_bytes(self, data: bytes, source: str = "<bytes>") -> DoEntryRecord:
        """Parse an in-memory entry document."""
        machine = _EntryStateMachine(self.starred_key)
        pull_parser = ET.XMLPullParser(events=("start", "end"))
        try:
            pull_parser.feed(data)
            machine.consume(pull_parser.read_events())
            pull_parser.close()
            machine.consume(pull_parser.read_events())
        except ET.ParseError as e:
            if not machine.started and _is_missing_root(e):
                return machine.record()
            raise _entry_parse_error(source, e) from e
        return machine.record()


def _is_missing_root(error: ET.ParseError) -> bool:
    return getattr(error, "code", None) == NO_ELEMENT_CODE


def _entry_parse_error(source, error: ET.ParseError) -> EntryParseError:
    # str(error) repeats the position; expat's own message does not.
    code = getattr(error, "code", None)
    reason = expat.ErrorString(code) if code else str(error)
    return EntryParseError(source, reason, getattr(error, "position", None))


class _EntryStateMachine:
    """Turns start/end events into a DoEntryRecord."""

    def __init__(self, starred_key: Optional[str]):
        self.starred_key = starred_key
        self.state = ParserState.IDLE
        self.armed_tag: Optional[str] = None
        self.pending_key: Optional[str] = None
        self.fields: dict[str, object] = {}
        self.started = False

    def consume(self, events) -> None:
        for event, elem in events:
            tag = _local_name(elem.tag)
            if event == "start":
                self.started = True
                self._on_start(tag)
            else:
                self._on_end(tag, elem.text or "")
                # Finished elements are not needed again.
                elem.clear()

    def _on_start(self, tag: str) -> None:
        next_state = START_TRANSITIONS.get(tag)
        if next_state is not None:
            self.state = next_state
            self.armed_tag = tag
            return
        if tag in BOOLEAN_TAGS:
            self._on_boolean(BOOLEAN_TAGS[tag])

    def _on_end(self, tag: str, text: str) -> None:
        if self.state is ParserState.IDLE or tag != self.armed_tag:
            return
        if self.state is ParserState.AWAITING_KEY:
            self.pending_key = text
        else:
            self._on_value(text)
        self.state = ParserState.IDLE
        self.armed_tag = None

    def _on_value(self, value: str) -> None:
        for field_name in FIELDS_BY_KEY.get(self.pending_key or "", ()):
            self.fields[field_name] = value

    def _on_boolean(self, value: bool) -> None:
        if self.starred_key is None or self.pending_key == self.starred_key:
            self.fields["starred"] = value

    def record(self) -> DoEntryRecord:
        return DoEntryRecord(**self.fields)  # type: ignore[arg-type]
