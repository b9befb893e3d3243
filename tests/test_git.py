import subprocess
import sys

from build_noti import git
from build_noti.config import Settings
from build_noti.git import describe_latest_commit


def _fake_run(stdout):
    def run(cmd, **kwargs):
        assert cmd == ["git", "log", "-1", "--pretty=%s"]
        return subprocess.CompletedProcess(cmd, 0, stdout=stdout, stderr="")

    return run


def test_commit_subject_is_single_line(monkeypatch, settings):
    monkeypatch.setattr(git.subprocess, "run", _fake_run("Fix build\r\nscript\n"))
    assert describe_latest_commit(settings) == "Fix buildscript"


def test_empty_subject_uses_placeholder(monkeypatch, settings):
    monkeypatch.setattr(git.subprocess, "run", _fake_run("  \n"))
    assert describe_latest_commit(settings) == "No commit message"


def test_non_repository_uses_env_fallback(monkeypatch, tmp_path):
    # Stop git from discovering a repository above tmp_path.
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    monkeypatch.setenv("CF_PAGES_COMMIT_MESSAGE", "abc")
    assert describe_latest_commit(Settings(), cwd=tmp_path) == "abc"


def test_missing_git_binary_uses_default(monkeypatch, settings):
    def run(cmd, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(git.subprocess, "run", run)
    assert describe_latest_commit(settings) == "No commit message"


def test_env_fallback_is_sanitized(monkeypatch):
    def run(cmd, **kwargs):
        raise subprocess.CalledProcessError(128, cmd)

    monkeypatch.setattr(git.subprocess, "run", run)
    monkeypatch.setenv("CF_PAGES_COMMIT_MESSAGE", " Deploy\nhotfix ")
    assert describe_latest_commit(Settings()) == "Deployhotfix"


def test_undecodable_subject_is_replaced(monkeypatch, settings):
    # Emits "caf\xe9 fix" as raw Latin-1 bytes, the way git does for legacy commits.
    script = "import sys; sys.stdout.buffer.write(b'caf\\xe9 fix\\n')"
    monkeypatch.setattr(git, "GIT_LOG_CMD", [sys.executable, "-c", script])
    assert describe_latest_commit(settings) == "caf\ufffd fix"
