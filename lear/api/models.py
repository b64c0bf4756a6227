"""Request and response models for the limerick HTTP API.

The request model accepts any JSON value for its three fields: loosely
typed input is normalized by the generator (letters are filtered, the
count is clamped) rather than rejected with a validation error.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    """Body of ``POST /api/generate``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    letters: Any = Field(default="", description="Free-form letter key, e.g. 'ARCHE'.")
    count: Any = Field(default=None, description="Number of limericks, clamped to 1-10.")
    translate: Any = Field(
        default=False,
        validation_alias=AliasChoices("translate", "jpWanted"),
        description="Add a Japanese translation after each English line.",
    )


class GenerateResponse(BaseModel):
    """Successful generation: the final poem text."""

    text: str


class ErrorResponse(BaseModel):
    """Failure payload returned with HTTP 500."""

    error: str


class HealthResponse(BaseModel):
    """Liveness plus the configured model identifier."""

    ok: bool = True
    model: str
