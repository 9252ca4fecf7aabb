"""Create-application workflow.

Two sequential steps: create the application remotely, then register the
`capsule` remote in the local working copy. The CLI delegates here so the flow
stays free of printing and can be reused from tests or other entry points.
"""

from __future__ import annotations

import logging
from pathlib import Path

from adapters.git_remote import ensure_remote
from core.config import DEFAULT_REMOTE_NAME
from core.domain.models import ApplicationCreateResponse
from core.interfaces.capsule_api import CapsuleApi

logger = logging.getLogger(__name__)


def handle(
    directory: str | Path,
    name: str | None,
    api: CapsuleApi,
    *,
    remote_name: str = DEFAULT_REMOTE_NAME,
) -> ApplicationCreateResponse:
    """Create an application and register its git remote in `directory`.

    A `CliError` from the API propagates before the local repository is
    touched. A directory that is not a git working copy is left alone.
    """

    response = api.create_application(name)
    logger.info("Application %s created at %s", response.name, response.url)

    added = ensure_remote(directory, response.git_repo, name=remote_name)
    if added:
        logger.info("Added git remote %s -> %s", remote_name, response.git_repo)

    return response
