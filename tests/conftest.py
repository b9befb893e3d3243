import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

ENV_VARS = (
    "PROJECT_NAME",
    "DISCORD_BUILD_NOTI_URL",
    "CF_PAGES_COMMIT_MESSAGE",
    "LOG_LEVEL",
    "WEBHOOK_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a stray .env or package.json in the checkout out of the picture.
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def propagate_logs(monkeypatch):
    # The package logger does not propagate; caplog listens on the root logger.
    logger = logging.getLogger("build_noti")
    monkeypatch.setattr(logger, "propagate", True)
    logger.setLevel(logging.INFO)
    yield


@pytest.fixture
def settings():
    from build_noti.config import Settings

    return Settings()
