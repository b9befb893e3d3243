"""Command-line entry point: noti <start|success|fail>."""

from __future__ import annotations

import argparse
import io
import sys

from build_noti.config import MANIFEST_FILENAME, get_settings, load_project_config
from build_noti.git import describe_latest_commit
from build_noti.logging_config import configure_logging
from build_noti.messages import USAGE, InvalidStatusError, format_message, parse_status
from build_noti.notifications import notify_discord

logger = configure_logging().getChild("cli")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        print(USAGE, file=sys.stderr)
        self.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(prog="noti", description="Send a build status notification to Discord")
    p.add_argument("status", nargs="?", help="One of start, success, fail")
    p.add_argument("--manifest", default=MANIFEST_FILENAME, help="Project manifest (JSON)")
    return p


def _tolerate_console_encoding() -> None:
    # Icons must not abort the run on a non-UTF-8 console.
    for stream in (sys.stdout, sys.stderr):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(errors="replace")


def main(argv: list[str] | None = None) -> int:
    # Anything after the status is ignored.
    args, _ = _build_parser().parse_known_args(argv)
    try:
        status = parse_status(args.status)
    except InvalidStatusError:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        settings = get_settings()
        configure_logging(settings.log_level)
        _tolerate_console_encoding()

        project = load_project_config(settings, args.manifest)
        commit_message = describe_latest_commit(settings)
        message = format_message(status, project.name, commit_message)

        print(message.console_line)
        notify_discord(message.display, project.webhook_url, timeout=settings.webhook_timeout)
    except Exception:
        logger.exception("Build notification failed")
        return 1
    return 0


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
