"""
Unit tests for the Day One JSON writer and models.
"""
import json
from unittest.mock import patch

import pytest

from doentry2dayone.core.exceptions import OutputWriteError
from doentry2dayone.data_transfer.dayone import (
    DayOneEntry,
    DayOneExport,
    DayOneExportMetadata,
    DayOnePhoto,
    dump_export,
    write_export,
)

ENTRY_KEYS = [
    "starred",
    "editingTime",
    "creationDeviceModel",
    "creationDate",
    "uuid",
    "creationOSName",
    "creationDevice",
    "modifiedDate",
    "isPinned",
    "isAllDay",
    "timeZone",
    "creationDeviceType",
    "duration",
    "text",
    "creationOSVersion",
    "photos",
]

PHOTO_KEYS = [
    "fileSize",
    "orderInEntry",
    "creationDevice",
    "duration",
    "favorite",
    "type",
    "identifier",
    "date",
    "exposureBiasValue",
    "height",
    "width",
    "md5",
    "isSketch",
]


def _export() -> DayOneExport:
    photo = DayOnePhoto(
        file_size=2048,
        creation_device="Андрей’s MacBook Pro",
        identifier="ABC123",
        date="2023-08-01T10:00:00Z",
        height=350,
        width=480,
        md5="ABC123",
    )
    entries = [
        DayOneEntry(
            starred=True,
            uuid="ABC123",
            creation_date="2023-08-01T10:00:00Z",
            modified_date="2023-08-01T10:00:00Z",
            text="Hello <b> & \"quotes\"\nПривет",
            creation_device="Андрей’s MacBook Pro",
            time_zone="Europe/Moscow",
            photos=[photo],
        ),
        DayOneEntry(uuid="DEF456", text="No photo"),
    ]
    return DayOneExport(entries=entries)


class TestDumpExport:
    """Test the JSON rendering."""

    def test_key_order_matches_dayone(self):
        data = json.loads(dump_export(_export()))

        assert list(data) == ["metadata", "entries"]
        assert data["metadata"] == {"version": "1.0"}
        assert list(data["entries"][0]) == ENTRY_KEYS
        assert list(data["entries"][0]["photos"][0]) == PHOTO_KEYS

    def test_entry_without_photo_has_empty_list(self):
        data = json.loads(dump_export(_export()))

        assert data["entries"][1]["photos"] == []

    def test_photo_values(self):
        photo = json.loads(dump_export(_export()))["entries"][0]["photos"][0]

        assert photo == {
            "fileSize": 2048,
            "orderInEntry": 0,
            "creationDevice": "Андрей’s MacBook Pro",
            "duration": 0,
            "favorite": False,
            "type": "jpeg",
            "identifier": "ABC123",
            "date": "2023-08-01T10:00:00Z",
            "exposureBiasValue": 0,
            "height": 350,
            "width": 480,
            "md5": "ABC123",
            "isSketch": False,
        }

    def test_non_ascii_is_written_literally(self):
        content = dump_export(_export())

        assert "Привет" in content
        assert "\\u" not in content

    def test_indentation(self):
        content = dump_export(_export(), indent=1)

        assert content.startswith('{\n "metadata": {\n  "version": "1.0"\n }')
        assert content.endswith("}\n")

    def test_reencoding_is_byte_identical(self):
        content = dump_export(_export())

        reencoded = json.dumps(json.loads(content), indent=1, ensure_ascii=False) + "\n"

        assert reencoded == content

    def test_custom_version(self):
        export = DayOneExport(metadata=DayOneExportMetadata(version="2.0"))

        assert json.loads(dump_export(export)) == {"metadata": {"version": "2.0"}, "entries": []}


class TestWriteExport:
    """Test writing to disk."""

    def test_write_creates_missing_directories(self, tmp_path):
        destination = tmp_path / "a" / "b" / "Journal.json"

        written = write_export(_export(), destination)

        assert destination.read_text(encoding="utf-8") == dump_export(_export())
        assert written == destination.stat().st_size

    def test_write_overwrites_existing_file(self, tmp_path):
        destination = tmp_path / "Journal.json"
        destination.write_text("x" * 100_000)

        write_export(DayOneExport(), destination)

        assert json.loads(destination.read_text(encoding="utf-8")) == {
            "metadata": {"version": "1.0"},
            "entries": [],
        }

    def test_write_to_directory_path_fails(self, tmp_path):
        destination = tmp_path / "Journal.json"
        destination.mkdir()

        with pytest.raises(OutputWriteError, match="Failed to write"):
            write_export(_export(), destination)

    def test_encoding_failure_is_reported(self, tmp_path):
        destination = tmp_path / "Journal.json"

        with patch(
            "doentry2dayone.data_transfer.dayone.serializer.json.dump",
            side_effect=TypeError("boom"),
        ):
            with pytest.raises(OutputWriteError, match="boom"):
                write_export(_export(), destination)


class TestModels:
    """Test model parsing from Day One JSON."""

    def test_entry_accepts_camel_case(self):
        entry = DayOneEntry.model_validate(
            {"uuid": "X", "creationDate": "d", "photos": [{"identifier": "X", "fileSize": 5}]}
        )

        assert entry.creation_date == "d"
        assert entry.photos[0].file_size == 5

    def test_photo_requires_identifier(self):
        with pytest.raises(ValueError):
            DayOnePhoto.model_validate({"fileSize": 5})

    def test_negative_file_size_rejected(self):
        with pytest.raises(ValueError):
            DayOnePhoto(identifier="X", file_size=-1)
