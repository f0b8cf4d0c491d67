"""
Convert service for turning Day One Classic bundles into Day One imports.

Handles the business logic of a conversion run: walk, parse, map, write.
"""
import shutil
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from doentry2dayone.core.config import Settings
from doentry2dayone.core.exceptions import ConversionError
from doentry2dayone.core.logging_config import log_debug, log_error, log_info, log_warning
from doentry2dayone.data_transfer.dayone import (
    DayOneEntry,
    DayOneExport,
    DayOneExportMetadata,
    write_export,
)
from doentry2dayone.data_transfer.doentry import (
    DoEntryBundle,
    DoEntryParser,
    DoEntryToDayOneMapper,
)
from doentry2dayone.schemas.dto import ConversionSummary, SkippedEntry

ProgressCallback = Callable[[int, int], None]

OUTPUT_PHOTOS_DIR_NAME = "photos"


class ConvertService:
    """Service for converting a Day One Classic bundle."""

    def __init__(self, settings: Settings):
        """
        Initialize convert service.

        Args:
            settings: Converter settings (paths, device profile, parser options)
        """
        self.settings = settings
        self.bundle = DoEntryBundle(
            settings.source_root,
            entries_dir=settings.entries_dir,
            photos_dir=settings.photos_dir,
        )
        self.parser = DoEntryParser(starred_key=settings.starred_key)
        self.mapper = DoEntryToDayOneMapper(settings.device, self.bundle)

    def convert_file(self, path: Path) -> DayOneEntry:
        """Parse and map a single entry file."""
        record = self.parser.parse_file(path)
        return self.mapper.map_entry(record)

    def collect_entries(
        self,
        files: Iterable[Path],
        summary: ConversionSummary,
        total: int = 0,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> List[DayOneEntry]:
        """
        Convert every file, skipping the ones that fail.

        Args:
            files: Entry files in walk order
            summary: Summary receiving counts and skipped files
            total: Number of files, for progress reporting
            progress_callback: Called with (processed, total) after each file

        Returns:
            Converted entries in the order of ``files``
        """
        entries: List[DayOneEntry] = []
        processed = 0

        for path in files:
            try:
                entry = self.convert_file(path)
            except (ConversionError, OSError, ValueError) as entry_error:
                warning_msg = f"Skipped entry file {path}: {entry_error}"
                summary.skipped.append(SkippedEntry(path=str(path), error=str(entry_error)))
                summary.entries_skipped += 1
                log_warning(warning_msg, file=str(path))
            else:
                entries.append(entry)
                summary.entries_converted += 1
                if entry.photos:
                    summary.photos_attached += 1
                log_debug(f"Converted entry {entry.uuid}", file=str(path))

            processed += 1
            if progress_callback:
                progress_callback(processed, total)

        return entries

    def build_export(self, entries: List[DayOneEntry]) -> DayOneExport:
        return DayOneExport(
            metadata=DayOneExportMetadata(version=self.settings.export_version),
            entries=entries,
        )

    def convert(self, progress_callback: Optional[ProgressCallback] = None) -> ConversionSummary:
        """
        Run a full conversion and write the output document.

        Args:
            progress_callback: Called with (processed, total) after each file

        Returns:
            ConversionSummary for the run

        Raises:
            SourceBundleError: If the entries directory cannot be walked
            OutputWriteError: If the output cannot be written
        """
        log_info(
            "Starting Day One Classic conversion",
            source=str(self.settings.source_root),
            output=str(self.settings.output_path),
        )
        summary = ConversionSummary()

        try:
            files = self.bundle.list_entry_files()
            summary.files_found = len(files)

            entries = self.collect_entries(
                files, summary, total=len(files), progress_callback=progress_callback
            )
            export = self.build_export(entries)

            summary.output_bytes = write_export(
                export, self.settings.output_path, indent=self.settings.json_indent
            )
            summary.output_path = str(self.settings.output_path)
        except ConversionError as e:
            log_error(e, source=str(self.settings.source_root), output=str(self.settings.output_path))
            raise

        if self.settings.copy_photos:
            self.copy_photos(entries, summary)

        log_info(
            f"Conversion completed: {summary.entries_converted} converted, "
            f"{summary.entries_skipped} skipped",
            output=summary.output_path,
        )
        if summary.warnings:
            log_info(
                f"Conversion completed with {len(summary.warnings)} warnings",
                warning_count=len(summary.warnings),
            )
        return summary

    def copy_photos(self, entries: List[DayOneEntry], summary: ConversionSummary) -> None:
        """
        Copy attached photos to <output dir>/photos/<md5>.<type>.

        Failures become summary warnings; the JSON is already written.
        """
        photos_dir = self.settings.output_path.parent / OUTPUT_PHOTOS_DIR_NAME
        for entry in entries:
            for photo in entry.photos:
                source = self.bundle.photo_path(photo.identifier)
                target = photos_dir / f"{photo.md5}.{photo.type}"
                try:
                    photos_dir.mkdir(parents=True, exist_ok=True)
                    shutil.copy2(source, target)
                except OSError as copy_error:
                    warning_msg = f"Failed to copy photo {source}: {copy_error}"
                    summary.warnings.append(warning_msg)
                    log_warning(warning_msg, entry_uuid=entry.uuid)
                else:
                    summary.photos_copied += 1
