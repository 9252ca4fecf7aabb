"""Domain models (Pydantic v2).

These models describe *what* goes over the wire, not *how* it is sent.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class CreateApplicationRequest(BaseModel):
    """Body of `POST /applications`.

    `name` is always serialized; `null` lets the server pick one.
    """

    name: str | None = Field(
        default=None,
        description="Requested application name (optional).",
    )


class ApplicationCreateResponse(BaseModel):
    """Application created by the server (`201 Created` body)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(
        ...,
        description="Application name assigned by the server.",
    )
    url: str = Field(
        ...,
        description="Public URL where the application is hosted.",
    )
    git_repo: str = Field(
        ...,
        description="Remote git repository URL to push the application source to.",
    )
