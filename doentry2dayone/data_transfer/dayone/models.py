"""
Day One JSON import models.

Field order matches the order Day One itself writes, which is also the key
order of the generated ``Journal.json``.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

PHOTO_TYPE_JPEG = "jpeg"
EXPORT_VERSION = "1.0"


class DayOnePhoto(BaseModel):
    """
    Day One photo metadata.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_size: int = Field(0, alias="fileSize", ge=0)
    order_in_entry: int = Field(0, alias="orderInEntry", ge=0)
    creation_device: str = Field("", alias="creationDevice")
    duration: int = Field(0, alias="duration", ge=0)
    favorite: bool = Field(False, alias="favorite")
    type: str = Field(PHOTO_TYPE_JPEG, alias="type")
    identifier: str = Field(..., alias="identifier")
    date: str = Field("", alias="date")
    exposure_bias_value: int = Field(0, alias="exposureBiasValue")
    height: int = Field(0, alias="height", ge=0)
    width: int = Field(0, alias="width", ge=0)
    md5: str = Field("", alias="md5")
    is_sketch: bool = Field(False, alias="isSketch")


class DayOneEntry(BaseModel):
    """
    Day One journal entry.

    Dates are kept as the strings found in the source so nothing is lost to
    re-formatting.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    starred: bool = Field(False, alias="starred")
    editing_time: int = Field(0, alias="editingTime", ge=0)
    creation_device_model: str = Field("", alias="creationDeviceModel")
    creation_date: str = Field("", alias="creationDate")
    uuid: str = Field("", alias="uuid")
    creation_os_name: str = Field("", alias="creationOSName")
    creation_device: str = Field("", alias="creationDevice")
    modified_date: str = Field("", alias="modifiedDate")
    is_pinned: bool = Field(False, alias="isPinned")
    is_all_day: bool = Field(False, alias="isAllDay")
    time_zone: str = Field("", alias="timeZone")
    creation_device_type: str = Field("", alias="creationDeviceType")
    duration: int = Field(0, alias="duration", ge=0)
    text: str = Field("", alias="text")
    creation_os_version: str = Field("", alias="creationOSVersion")
    photos: List[DayOnePhoto] = Field(default_factory=list, alias="photos")


class DayOneExportMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str = EXPORT_VERSION


class DayOneExport(BaseModel):
    """
    Day One import root: metadata header plus a flat entries array.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    metadata: DayOneExportMetadata = Field(default_factory=DayOneExportMetadata)
    entries: List[DayOneEntry] = Field(default_factory=list)
