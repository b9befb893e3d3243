"""Discord webhook helper for build status events."""

from __future__ import annotations

from typing import Optional

import requests

from build_noti.logging_config import configure_logging

logger = configure_logging().getChild("notifications.discord")

MISSING_URL_WARNING = (
    "⚠️ Discord Webhook URL is not configured. To receive notifications, set "
    "config.discord_build_noti_url in package.json or define DISCORD_BUILD_NOTI_URL "
    "environment variable."
)


def notify_discord(message: str, webhook_url: str, timeout: Optional[float] = None) -> bool:
    """Post ``message`` to the webhook; best-effort.

    Returns True when the POST went out, False when it was skipped or failed.
    The response status is not inspected.
    """
    if not webhook_url:
        logger.warning(MISSING_URL_WARNING)
        return False
    try:
        requests.post(
            webhook_url,
            json={"content": message.strip()},
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        # Delivery problems never fail the build step
        logger.error("Failed to send Discord notification: %s", exc)
        return False
    return True
