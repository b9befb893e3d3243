"""Latest commit subject lookup via the git CLI."""

from __future__ import annotations

import subprocess
from pathlib import Path

from build_noti.config import Settings
from build_noti.logging_config import configure_logging
from build_noti.schemas import NO_COMMIT_MESSAGE, sanitize_line

logger = configure_logging().getChild("git")

GIT_LOG_CMD = ["git", "log", "-1", "--pretty=%s"]


def describe_latest_commit(settings: Settings, cwd: str | Path | None = None) -> str:
    """Return the latest commit subject as a single line; never raises."""
    try:
        result = subprocess.run(
            GIT_LOG_CMD,
            cwd=cwd,
            capture_output=True,
            # Subjects are not guaranteed to be UTF-8 (i18n.commitEncoding).
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.debug("git log failed (%s); using CF_PAGES_COMMIT_MESSAGE", exc)
        return sanitize_line(settings.cf_pages_commit_message or NO_COMMIT_MESSAGE)

    return sanitize_line(result.stdout) or NO_COMMIT_MESSAGE
