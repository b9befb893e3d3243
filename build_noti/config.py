"""Environment-driven settings and project config resolution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal, Optional, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from build_noti.logging_config import configure_logging
from build_noti.schemas import NO_COMMIT_MESSAGE, UNKNOWN_PROJECT, ProjectConfig, sanitize_line

logger = configure_logging().getChild("config")

MANIFEST_FILENAME = "package.json"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Environment-driven settings container.

    Built once at startup and handed to each component, so nothing below the
    CLI reads the process environment directly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    project_name: str = UNKNOWN_PROJECT
    discord_build_noti_url: str = ""
    cf_pages_commit_message: str = NO_COMMIT_MESSAGE
    log_level: LogLevel = "INFO"
    # None waits for the webhook as long as the OS allows.
    webhook_timeout: Optional[float] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in get_args(LogLevel):
            logger.warning("Unknown LOG_LEVEL %r; using INFO", value)
            return "INFO"
        return level


def get_settings() -> Settings:
    return Settings()


def _read_manifest(path: Path) -> dict:
    """Parse the manifest; valid JSON that is not an object counts as empty."""
    manifest = json.loads(path.read_text(encoding="utf-8"))
    return manifest if isinstance(manifest, dict) else {}


def _webhook_from_manifest(manifest: dict) -> object:
    config = manifest.get("config")
    if isinstance(config, dict):
        return config.get("discord_build_noti_url")
    return None


def load_project_config(settings: Settings, manifest_path: str | Path = MANIFEST_FILENAME) -> ProjectConfig:
    """Resolve the project name and webhook URL.

    The manifest wins when it can be read; its missing fields fall back to the
    literal default (name) or the settings value (webhook URL). When the
    manifest cannot be read or parsed, both fields come from settings.
    """
    path = Path(manifest_path)
    try:
        manifest = _read_manifest(path)
    except (OSError, ValueError) as exc:
        logger.debug("Manifest unavailable (%s); using environment settings", exc)
        return ProjectConfig(
            name=sanitize_line(settings.project_name or UNKNOWN_PROJECT),
            webhook_url=sanitize_line(settings.discord_build_noti_url or ""),
        )

    name = manifest.get("name") or UNKNOWN_PROJECT
    webhook_url = _webhook_from_manifest(manifest) or settings.discord_build_noti_url or ""
    return ProjectConfig(name=sanitize_line(name), webhook_url=sanitize_line(webhook_url))
