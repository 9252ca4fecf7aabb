"""Domain models and entities.

Pure data structures (Pydantic v2). The domain knows nothing about HTTP,
git or the CLI.
"""

from core.domain.models import ApplicationCreateResponse, CreateApplicationRequest

__all__ = ["ApplicationCreateResponse", "CreateApplicationRequest"]
