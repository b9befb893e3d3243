"""Notification delivery (Discord webhook)."""

from __future__ import annotations

from .discord import notify_discord  # re-export

__all__ = ["notify_discord"]
