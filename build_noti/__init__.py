"""Build-status notifier posting to a Discord webhook."""

__version__ = "0.1.0"
