"""Configuration schema for the localization sync tool using nested Pydantic models."""

from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from .locales import SOURCE_LOCALE


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class TransifexConfig(BaseModel):
    """Transifex service configuration."""

    api_url: str = Field(
        default="https://rest.api.transifex.com",
        description="Base URL for the Transifex REST API",
        pattern=r"^https?://.*",
    )
    organization: str = Field(
        default="turbowarp",
        description="Transifex organization slug",
        min_length=1,
    )
    project: str = Field(
        default="turbowarp",
        description="Transifex project slug",
        min_length=1,
    )
    token: SecretStr | None = Field(
        default=None,
        description="Transifex API token (normally supplied via TX_TOKEN)",
    )
    timeout: Annotated[float, Field(gt=0, le=600)] = Field(
        default=30.0,
        description="HTTP request timeout in seconds",
    )
    poll_interval: Annotated[float, Field(ge=0, le=60)] = Field(
        default=1.0,
        description="Seconds between status checks of an async download or upload",
    )
    poll_attempts: Annotated[int, Field(ge=1, le=10000)] = Field(
        default=120,
        description="Maximum status checks before an async job is abandoned",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Normalize the API URL."""
        return v.rstrip("/")


class PathsConfig(BaseModel):
    """Locations of the sibling checkouts and generated artifacts."""

    workspace: Path = Field(
        default_factory=lambda: Path.cwd().parent,
        description="Directory containing the sibling repository checkouts",
    )
    scratch_gui: str = Field(default="scratch-gui", min_length=1)
    packager: str = Field(default="packager", min_length=1)
    desktop: str = Field(default="turbowarp-desktop", min_length=1)
    scratch_vm: str = Field(default="scratch-vm", min_length=1)
    all_used_ids_file: Path = Field(
        default=Path("tw-all-used-ids.json"),
        description="Where push writes the sorted list of every id found in scratch-gui",
    )

    def sibling(self, name: str) -> Path:
        """Resolve a sibling checkout directory by name."""
        return self.workspace / name


class SyncConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    transifex: TransifexConfig = Field(default_factory=TransifexConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    concurrency_limit: Annotated[int, Field(ge=1, le=256)] = Field(
        default=36,
        description="Maximum number of locales fetched concurrently",
    )
    source_locale: str = Field(
        default=SOURCE_LOCALE,
        description="Locale whose strings are the diff baseline",
        min_length=1,
    )
    log_level: LogLevel = Field(default=LogLevel.INFO)
