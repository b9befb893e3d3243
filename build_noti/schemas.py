"""Pydantic models for project metadata and formatted build messages."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

UNKNOWN_PROJECT = "Unknown Project"
NO_COMMIT_MESSAGE = "No commit message"


class NotificationStatus(str, Enum):
    START = "start"
    SUCCESS = "success"
    FAIL = "fail"


class ProjectConfig(BaseModel):
    """Project name and webhook endpoint resolved once per invocation."""

    model_config = ConfigDict(frozen=True)

    name: str = UNKNOWN_PROJECT
    # Empty means the webhook is not configured.
    webhook_url: str = ""


class BuildMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: NotificationStatus
    icon: str
    status_text: str
    name: str
    commit_message: str

    @property
    def display(self) -> str:
        """Markdown text posted to the webhook."""
        return f"{self.icon} **{self.name}** - {self.commit_message} - {self.status_text}"

    @property
    def console_line(self) -> str:
        return f"{self.icon} {self.name} - {self.commit_message} - {self.status_text}"


def sanitize_line(value: object) -> str:
    """Drop CR/LF characters and surrounding whitespace."""
    return str(value).replace("\r", "").replace("\n", "").strip()
