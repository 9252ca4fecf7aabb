"""Shared fixtures for capsule-cli tests."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from unittest.mock import Mock

import pytest

from core.domain.models import ApplicationCreateResponse
from core.interfaces.capsule_api import CapsuleApi

APPLICATION_NAME = "first_capsule_application"
APPLICATION_URL = "https://first-capsule-application.capsuleapp.cyou"
APPLICATION_GIT_REPO = "https://git.capsuleapp.cyou/first_capsule_user/first-capsule-application.git"

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep settings independent from the developer's environment and `.env`."""

    for key in list(os.environ):
        if key.upper().startswith("CAPSULE_"):
            monkeypatch.delenv(key, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def application_response() -> ApplicationCreateResponse:
    return ApplicationCreateResponse(
        name=APPLICATION_NAME,
        url=APPLICATION_URL,
        git_repo=APPLICATION_GIT_REPO,
    )


@pytest.fixture
def mock_api(application_response) -> Mock:
    api = Mock(spec=CapsuleApi)
    api.create_application.return_value = application_response
    return api


@pytest.fixture
def application_directory(tmp_path) -> Path:
    directory = tmp_path / "application"
    directory.mkdir()
    return directory


@pytest.fixture
def git_repository(application_directory) -> Path:
    subprocess.run(
        ["git", "init", str(application_directory)],
        check=True,
        capture_output=True,
        text=True,
    )
    return application_directory


def git_remote_url(directory: Path, name: str) -> str:
    completed = subprocess.run(
        ["git", "-C", str(directory), "remote", "get-url", name],
        check=True,
        capture_output=True,
        text=True,
    )
    return completed.stdout.strip()


def git_remote_names(directory: Path) -> list[str]:
    completed = subprocess.run(
        ["git", "-C", str(directory), "remote"],
        check=True,
        capture_output=True,
        text=True,
    )
    return completed.stdout.split()
