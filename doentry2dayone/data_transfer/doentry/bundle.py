"""
Day One Classic bundle layout.

A bundle is a directory with ``entries/`` (one plist XML file per entry, at
any depth) and ``photos/`` (``<uuid>.jpg`` per entry that has a photo).
"""
import os
from pathlib import Path
from typing import Iterator, List, Optional

from doentry2dayone.core.config import ENTRIES_DIR_NAME, PHOTOS_DIR_NAME
from doentry2dayone.core.exceptions import SourceBundleError
from doentry2dayone.core.logging_config import log_warning

PHOTO_EXTENSION = ".jpg"


class DoEntryBundle:
    """Read-only view of a Day One Classic export directory."""

    def __init__(self, root: Path, entries_dir: Optional[Path] = None, photos_dir: Optional[Path] = None):
        self.root = Path(root)
        self.entries_dir = Path(entries_dir) if entries_dir else self.root / ENTRIES_DIR_NAME
        self.photos_dir = Path(photos_dir) if photos_dir else self.root / PHOTOS_DIR_NAME

    def iter_entry_files(self) -> Iterator[Path]:
        """
        Yield every file below the entries directory.

        Each directory's files are yielded in lexical order before its
        subdirectories, which are also visited in lexical order. Symlinked
        directories are neither listed nor descended into. A subdirectory
        that cannot be read is logged and skipped.

        Raises:
            SourceBundleError: If the entries directory is missing or cannot
                be read
        """
        if not self.entries_dir.is_dir():
            raise SourceBundleError(f"Entries directory not found: {self.entries_dir}")

        def _on_walk_error(error: OSError):
            if error.filename is None or Path(error.filename) == self.entries_dir:
                raise SourceBundleError(f"Cannot read {self.entries_dir}: {error.strerror}") from error
            log_warning(f"Skipped unreadable directory {error.filename}: {error.strerror}")

        for dirpath, dirnames, filenames in os.walk(self.entries_dir, onerror=_on_walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                yield Path(dirpath) / filename

    def list_entry_files(self) -> List[Path]:
        return list(self.iter_entry_files())

    def photo_path(self, uuid: str) -> Path:
        return self.photos_dir / f"{uuid}{PHOTO_EXTENSION}"

    def photo_size(self, uuid: str) -> Optional[int]:
        """
        Return the byte size of the entry's photo, or None if there is none.

        Only a missing file means "no photo"; other filesystem errors
        propagate.
        """
        try:
            return self.photo_path(uuid).stat().st_size
        except FileNotFoundError:
            return None
