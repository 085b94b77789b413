"""Base models for genrepo-tool."""

from pydantic import BaseModel, ConfigDict


class GenericRepoBaseModel(BaseModel):
    """Base model for all genrepo-tool domain models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,  # Allow modification (can be changed per model)
        validate_assignment=True,  # Validate on attribute assignment
    )


__all__ = ["GenericRepoBaseModel"]
