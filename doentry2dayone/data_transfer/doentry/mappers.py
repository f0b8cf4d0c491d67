"""
Day One Classic to Day One mappers.

Converts parsed .doentry records to Day One JSON entries.
"""
from typing import List

from doentry2dayone.core.config import DeviceProfile
from doentry2dayone.data_transfer.dayone.models import (
    PHOTO_TYPE_JPEG,
    DayOneEntry,
    DayOnePhoto,
)

from .bundle import DoEntryBundle
from .plist_parser import DoEntryRecord

# Day One Classic bundles don't record image dimensions.
PHOTO_HEIGHT = 350
PHOTO_WIDTH = 480


class DoEntryToDayOneMapper:
    """
    Maps Day One Classic records to Day One entries.

    Handles:
    - Text, UUID and creation date (copied verbatim)
    - Starred flag
    - Device provenance from the configured device profile
    - The single optional photo stored as photos/<uuid>.jpg
    """

    def __init__(self, device: DeviceProfile, bundle: DoEntryBundle):
        self.device = device
        self.bundle = bundle

    def map_entry(self, record: DoEntryRecord) -> DayOneEntry:
        """
        Map a parsed record to a Day One entry.

        Args:
            record: Record produced by DoEntryParser

        Returns:
            DayOneEntry with zero or one photo

        Raises:
            OSError: If the photo exists but cannot be inspected
        """
        return DayOneEntry(
            starred=record.starred,
            creation_device_model=self.device.creation_device_model,
            creation_date=record.creation_date,
            uuid=record.uuid,
            creation_os_name=self.device.creation_os_name,
            creation_device=self.device.creation_device,
            modified_date=record.creation_date,
            time_zone=self.device.time_zone,
            creation_device_type=self.device.creation_device_type,
            text=record.text,
            creation_os_version=self.device.creation_os_version,
            photos=self.map_photos(record),
        )

    def map_photos(self, record: DoEntryRecord) -> List[DayOnePhoto]:
        file_size = self.bundle.photo_size(record.uuid)
        if file_size is None:
            return []

        # md5 reuses the uuid: photos are copied as <uuid>.jpeg, and Day One
        # resolves photo files by this value.
        return [
            DayOnePhoto(
                file_size=file_size,
                creation_device=self.device.creation_device,
                type=PHOTO_TYPE_JPEG,
                identifier=record.uuid,
                date=record.creation_date,
                height=PHOTO_HEIGHT,
                width=PHOTO_WIDTH,
                md5=record.uuid,
            )
        ]
