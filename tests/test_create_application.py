"""Tests for the create-application workflow."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from adapters.git_remote import add_remote
from conftest import (
    APPLICATION_GIT_REPO,
    APPLICATION_NAME,
    APPLICATION_URL,
    git_remote_names,
    git_remote_url,
    requires_git,
)
from core.errors import CliError
from core.services.create_application import handle


def test_creates_application_if_directory_is_not_a_git_repository(application_directory, mock_api):
    response = handle(application_directory, None, mock_api)

    assert response.name == APPLICATION_NAME
    assert response.url == APPLICATION_URL
    assert response.git_repo == APPLICATION_GIT_REPO
    assert not (application_directory / ".git").exists()
    mock_api.create_application.assert_called_once_with(None)


def test_passes_application_name_to_api(application_directory, mock_api):
    handle(application_directory, "my-app", mock_api)

    mock_api.create_application.assert_called_once_with("my-app")


def test_returns_response_unchanged(application_directory, mock_api, application_response):
    assert handle(application_directory, None, mock_api) is application_response


def test_api_failure_skips_local_repository(application_directory, mock_api):
    mock_api.create_application.side_effect = CliError("The server response status 500.")

    with patch("core.services.create_application.ensure_remote") as ensure_remote:
        with pytest.raises(CliError) as excinfo:
            handle(application_directory, None, mock_api)

    assert excinfo.value.message == "The server response status 500."
    ensure_remote.assert_not_called()


def test_repository_failure_fails_the_workflow(application_directory, mock_api):
    with patch(
        "core.services.create_application.ensure_remote",
        side_effect=CliError("fatal: not a git repository"),
    ):
        with pytest.raises(CliError) as excinfo:
            handle(application_directory, None, mock_api)

    assert excinfo.value.message == "fatal: not a git repository"


def test_uses_configured_remote_name(application_directory, mock_api):
    with patch("core.services.create_application.ensure_remote", return_value=True) as ensure_remote:
        handle(application_directory, None, mock_api, remote_name="deploy")

    ensure_remote.assert_called_once_with(application_directory, APPLICATION_GIT_REPO, name="deploy")


@requires_git
class TestGitRepositoryDirectory:
    def test_creates_application_if_directory_is_a_git_repository(self, git_repository, mock_api):
        response = handle(git_repository, None, mock_api)

        assert response.name == APPLICATION_NAME
        assert response.url == APPLICATION_URL
        assert response.git_repo == APPLICATION_GIT_REPO

    def test_adds_capsule_remote(self, git_repository, mock_api):
        handle(git_repository, None, mock_api)

        assert git_remote_names(git_repository) == ["capsule"]
        assert git_remote_url(git_repository, "capsule") == APPLICATION_GIT_REPO

    def test_succeeds_if_capsule_remote_was_present(self, git_repository, mock_api):
        existing = "https://git.capsuleapp.cyou/first_capsule_user/first_capsule_application"
        add_remote(git_repository, "capsule", existing)

        response = handle(git_repository, None, mock_api)

        assert response.name == APPLICATION_NAME
        assert git_remote_url(git_repository, "capsule") == existing
