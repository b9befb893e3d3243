"""Status keyword to message mapping."""

from __future__ import annotations

from build_noti.schemas import BuildMessage, NotificationStatus

USAGE = "Usage: noti <start|success|fail>"

STATUS_DISPLAY = {
    NotificationStatus.START: ("🚢", "Build Started"),
    NotificationStatus.SUCCESS: ("✨", "Build Succeeded"),
    NotificationStatus.FAIL: ("🚨", "Build Failed"),
}


class InvalidStatusError(ValueError):
    """Raised for a status keyword outside start/success/fail."""


def parse_status(value: str | None) -> NotificationStatus:
    try:
        return NotificationStatus(value)
    except ValueError:
        raise InvalidStatusError(f"Unsupported status: {value!r}") from None


def format_message(status: NotificationStatus | str, name: str, commit_message: str) -> BuildMessage:
    """Build the icon, label and display text for one notification."""
    if not isinstance(status, NotificationStatus):
        status = parse_status(status)
    icon, status_text = STATUS_DISPLAY[status]
    return BuildMessage(
        status=status,
        icon=icon,
        status_text=status_text,
        name=name,
        commit_message=commit_message,
    )
