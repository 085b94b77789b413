"""
Pydantic models for generic repository API responses.

These models are purely structural: every optional wire field stays ``None``
when the server omits it, and the components consuming the models decide on
defaults.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.path_utils import join_remote_path

# Fallback for records without a usable timestamp
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ============================================================================
# Helpers
# ============================================================================


def parse_timestamp(raw: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Values without an offset are taken as UTC.

    Args:
        raw: Timestamp string from the API

    Returns:
        Parsed datetime, or None if absent or unparsable
    """
    if not raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw.strip())
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def _number_as_string(value: Any) -> Any:
    """Keep numeric size fields as their decimal string."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(int(value))
    return value


# ============================================================================
# Base Models
# ============================================================================


class GenericApiModel(BaseModel):
    """Base model for all generic repository API responses."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)  # Allow extra fields from API


# ============================================================================
# Listing Models
# ============================================================================


class ListingRecord(GenericApiModel):
    """One entry of a directory listing."""

    name: str = Field(min_length=1)
    path: Optional[str] = None
    folder: Optional[bool] = None
    last_modified_date: Optional[str] = Field(default=None, alias="lastModifiedDate")
    created_date: Optional[str] = Field(default=None, alias="createdDate")
    size: Optional[str] = None
    md5: Optional[str] = None
    sha256: Optional[str] = None

    @field_validator("size", mode="before")
    @classmethod
    def normalize_size(cls, value: Any) -> Any:
        """Keep numeric sizes as their decimal string."""
        return _number_as_string(value)

    @property
    def is_folder(self) -> bool:
        """Whether the entry is a directory."""
        return self.folder is True

    def timestamp(self) -> datetime:
        """
        Resolve the record's timestamp.

        Last-modified wins over created; a missing or unparsable value falls
        through to the next one and finally to the Unix epoch.
        """
        for raw in (self.last_modified_date, self.created_date):
            parsed = parse_timestamp(raw)
            if parsed is not None:
                return parsed
        return EPOCH

    def relative_path(self) -> str:
        """Path of the entry inside its repository."""
        return join_remote_path(self.path, self.name)


class ListingPage(GenericApiModel):
    """Payload of a listing response."""

    records: Optional[List[ListingRecord]] = None
    pagination: Optional[bool] = None
    total_pages: Optional[int] = None
    page_number: Optional[int] = None


class ListResponse(GenericApiModel):
    """Envelope returned by the listing endpoint."""

    code: int
    msg: Optional[str] = None
    data: Optional[ListingPage] = None

    @property
    def is_successful(self) -> bool:
        """Check if the envelope reports success."""
        return self.code == 0


# ============================================================================
# Upload Models
# ============================================================================


class RemoteChecksums(GenericApiModel):
    """Checksums computed by the server for an uploaded file."""

    md5: Optional[str] = None
    sha256: Optional[str] = None


class UploadResponse(GenericApiModel):
    """Confirmation body returned after an upload."""

    download_uri: Optional[str] = Field(default=None, alias="downloadUri")
    uri: Optional[str] = None
    size: Optional[str] = None
    checksums: Optional[RemoteChecksums] = None

    @field_validator("size", mode="before")
    @classmethod
    def normalize_size(cls, value: Any) -> Any:
        """Keep numeric sizes as their decimal string."""
        return _number_as_string(value)


__all__ = [
    "EPOCH",
    "parse_timestamp",
    "GenericApiModel",
    "ListingRecord",
    "ListingPage",
    "ListResponse",
    "RemoteChecksums",
    "UploadResponse",
]
