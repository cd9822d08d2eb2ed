"""Configuration management using pydantic-settings."""

import tomllib
from enum import Enum
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OUTBOX = "~/.local/share/filesender/outbox"
DEFAULT_URL = "http://localhost:8080/documents"
DEFAULT_FORMATS = ["4.0", "3.1"]
CONFIG_PATH = Path("~/.config/filesender/config.toml").expanduser()


class DeliveryChannel(str, Enum):
    """Available delivery channels."""

    OUTBOX = "outbox"
    HTTP = "http"


class ValidationConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FILESENDER_VALIDATION_")

    accepted_formats: list[str] = DEFAULT_FORMATS
    freshness_months: int = 1


class DeliveryConfig(BaseSettings):
    """Delivery channel configuration."""

    model_config = SettingsConfigDict(env_prefix="FILESENDER_DELIVERY_")

    channel: DeliveryChannel = DeliveryChannel.OUTBOX
    outbox_dir: Path = Path(DEFAULT_OUTBOX).expanduser()
    url: str = DEFAULT_URL
    timeout: float = 30.0

    @field_validator("outbox_dir", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser()


class PipelineConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FILESENDER_PIPELINE_")

    max_workers: int = 1


class CredentialConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FILESENDER_CREDENTIAL_")

    path: Path | None = None

    @field_validator("path", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        return Path(v).expanduser() if v else None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FILESENDER_")

    validation: ValidationConfig = ValidationConfig()
    delivery: DeliveryConfig = DeliveryConfig()
    pipeline: PipelineConfig = PipelineConfig()
    credential: CredentialConfig = CredentialConfig()


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from TOML file, falling back to defaults."""
    path = config_path or CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)

        validation = ValidationConfig(**data.get("validation", {}))
        delivery = DeliveryConfig(**data.get("delivery", {}))
        pipeline = PipelineConfig(**data.get("pipeline", {}))
        credential = CredentialConfig(**data.get("credential", {}))
        return Settings(
            validation=validation,
            delivery=delivery,
            pipeline=pipeline,
            credential=credential,
        )

    return Settings()
