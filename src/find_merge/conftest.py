import logging
import os
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from find_merge import __version__
from find_merge.tests.mocks import HistoryQueryDouble

# Commit timestamps, so the order of `git rev-list` output doesn't depend on how
# fast the fixture runs.
BASE_TIMESTAMP = 1_700_000_000


@pytest.fixture
def find_merge_version() -> str:
    return __version__


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any logging configuration done by the command line during a test."""
    logger = logging.getLogger("find_merge")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def history_double() -> Callable[..., HistoryQueryDouble]:
    return HistoryQueryDouble


def _run_commands(commands: list[list[str]], cwd: Path, env: dict | None = None):
    for c in commands:
        subprocess.run(c, check=True, cwd=cwd, env=env)


def _git_setup_user(repo_dir: Path):
    """Configure the git user locally to repo_dir so as not to mess with the real user's configuration."""
    _run_commands(
        [
            ["git", "config", "user.name", "Py Test"],
            ["git", "config", "user.email", "pytest@find-merge.example.net"],
            ["git", "config", "commit.gpgsign", "false"],
        ],
        repo_dir,
    )


def _git_init(repo_dir: Path):
    subprocess.run(["git", "init", str(repo_dir)], check=True)
    subprocess.run(
        ["git", "symbolic-ref", "HEAD", "refs/heads/main"], check=True, cwd=repo_dir
    )
    _git_setup_user(repo_dir)


def _rev_parse(repo_dir: Path, ref: str) -> str:
    return subprocess.run(
        ["git", "rev-parse", ref],
        cwd=repo_dir,
        capture_output=True,
        check=True,
        encoding="utf-8",
    ).stdout.strip()


@pytest.fixture
def empty_git_repo(tmp_path: Path) -> Path:
    """Creates a temporary Git repository without any commit."""
    repo_dir = tmp_path / "empty_repo"
    _git_init(repo_dir)
    return repo_dir


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """
    Creates a temporary Git repository with a merged and an unmerged branch.

    On `main`: base, m1, a `--no-ff` merge of `feature`, then m2.
    On `feature`, branched from base: f1, f2.
    On `unmerged`, branched from m1 and never merged: u1.

    Args:
        tmp_path (pathlib.Path): The base temporary directory path (pytest fixture)

    Returns:
        pathlib.Path: The path to the created Git repository.
    """
    repo_dir = tmp_path / "git_repo"
    _git_init(repo_dir)

    steps = [
        ["git", "commit", "--allow-empty", "-m", "base"],
        ["git", "checkout", "-b", "feature"],
        ["git", "commit", "--allow-empty", "-m", "f1"],
        ["git", "commit", "--allow-empty", "-m", "f2"],
        ["git", "checkout", "main"],
        ["git", "commit", "--allow-empty", "-m", "m1"],
        [
            "git",
            "merge",
            "--no-ff",
            "--no-edit",
            "-m",
            "Merge feature into main",
            "feature",
        ],
        ["git", "commit", "--allow-empty", "-m", "m2"],
        ["git", "checkout", "-b", "unmerged", "main~1^1"],
        ["git", "commit", "--allow-empty", "-m", "u1"],
        ["git", "checkout", "main"],
    ]
    for offset, step in enumerate(steps):
        date = f"@{BASE_TIMESTAMP + offset * 60} +0000"
        env = dict(os.environ, GIT_AUTHOR_DATE=date, GIT_COMMITTER_DATE=date)
        _run_commands([step], repo_dir, env=env)

    return repo_dir


@pytest.fixture
def git_commits(git_repo: Path) -> dict[str, str]:
    """Return the SHAs of the commits in `git_repo`, keyed by commit message."""
    refs = {
        "base": "main~3",
        "f1": "feature~1",
        "f2": "feature",
        "m1": "main~1^1",
        "merge": "main~1",
        "m2": "main",
        "u1": "unmerged",
    }
    return {name: _rev_parse(git_repo, ref) for name, ref in refs.items()}
