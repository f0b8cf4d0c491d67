"""
Converter settings.

Values come from (highest priority first): CLI overrides, environment
variables prefixed with ``DOENTRY2DAYONE_``, a local ``.env`` file, defaults.
Nested device fields use ``__`` as delimiter, e.g.
``DOENTRY2DAYONE_DEVICE__CREATION_DEVICE="Jane's MacBook Pro"``.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENTRIES_DIR_NAME = "entries"
PHOTOS_DIR_NAME = "photos"


class DeviceProfile(BaseModel):
    """
    Device identity stamped on every converted entry.

    Day One Classic entries carry no reliable device metadata, so the
    operator's own device is used for all of them.
    """
    model_config = ConfigDict(frozen=True)

    creation_device: str = Field("MacBook Pro", description="Device name shown in Day One")
    creation_device_model: str = Field("Mac14,7", description="Hardware model identifier")
    creation_device_type: str = Field("MacBook Pro", description="Device family")
    creation_os_name: str = Field("macOS", description="Operating system name")
    creation_os_version: str = Field("13.5.1", description="Operating system version")
    time_zone: str = Field("Europe/Moscow", description="IANA time zone for all entries")


class Settings(BaseSettings):
    """Converter settings."""
    model_config = SettingsConfigDict(
        env_prefix="DOENTRY2DAYONE_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    source_root: Path = Field(Path("Journal_dayone"), description="Day One Classic bundle root")
    output_path: Path = Field(
        Path("import_journal") / "Journal.json",
        description="Destination of the Day One JSON document",
    )
    export_version: str = Field("1.0", description="metadata.version written to the output")
    json_indent: int = Field(1, ge=0, description="Spaces per indentation level in the output")
    starred_key: Optional[str] = Field(
        None,
        description="Bind the starred flag to this plist key; unset means any boolean marker counts",
    )
    copy_photos: bool = Field(False, description="Copy attached photos next to the output JSON")
    log_level: str = Field("INFO", description="Log level for the package logger")
    device: DeviceProfile = Field(default_factory=DeviceProfile)

    @field_validator("starred_key")
    @classmethod
    def blank_starred_key_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def entries_dir(self) -> Path:
        return self.source_root / ENTRIES_DIR_NAME

    @property
    def photos_dir(self) -> Path:
        return self.source_root / PHOTOS_DIR_NAME


@lru_cache
def get_settings() -> Settings:
    return Settings()
