"""Local git working copy adapter.

Talks to the `git` executable through `subprocess`; only `git remote` and
`git remote add` are used.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from core.config import DEFAULT_REMOTE_NAME
from core.errors import CliError

logger = logging.getLogger(__name__)


def error_from_git(exc: subprocess.CalledProcessError | OSError) -> CliError:
    """Map a failed git invocation onto a `CliError`."""

    if isinstance(exc, subprocess.CalledProcessError):
        detail = (exc.stderr or "").strip()
        if detail:
            return CliError(detail)
        return CliError(f"git exited with status {exc.returncode}")
    return CliError(f"could not run git: {exc}")


def _git(directory: str | Path, *args: str) -> str:
    try:
        completed = subprocess.run(
            ["git", "-C", str(directory), *args],
            check=True,
            capture_output=True,
            text=True,
        )
    except (subprocess.CalledProcessError, OSError) as exc:
        raise error_from_git(exc) from exc
    return completed.stdout


def is_git_repository(directory: str | Path) -> bool:
    """True when `directory` directly contains a `.git` entry."""

    return (Path(directory) / ".git").exists()


def list_remotes(directory: str | Path) -> list[str]:
    return [line.strip() for line in _git(directory, "remote").splitlines() if line.strip()]


def add_remote(directory: str | Path, name: str, url: str) -> None:
    _git(directory, "remote", "add", "--", name, url)


def ensure_remote(
    directory: str | Path,
    remote_url: str,
    *,
    name: str = DEFAULT_REMOTE_NAME,
) -> bool:
    """Register `name -> remote_url` unless the remote already exists.

    Returns True only when a remote was added. Not a git working copy means
    nothing to do; an existing remote keeps its URL.
    """

    if not is_git_repository(directory):
        logger.debug("%s is not a git repository, skipping remote setup", directory)
        return False

    if name in list_remotes(directory):
        logger.debug("Remote %s already present in %s", name, directory)
        return False

    add_remote(directory, name, remote_url)
    return True
