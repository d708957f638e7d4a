"""Reusable, strict base models for the package."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Unknown fields are rejected and instances cannot be modified after
    validation. Field names are accepted either by name or by alias.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_default=True,
        extra="forbid",
        frozen=True,
    )
