"""Artifact-related models for genrepo-tool."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .api import ListingRecord
from .base import GenericRepoBaseModel


class Candidate(GenericRepoBaseModel):
    """
    A downloadable file found during discovery.

    Attributes:
        record: Listing entry the candidate was built from (never a folder)
        timestamp: Resolved timestamp used for ranking
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    record: ListingRecord
    timestamp: datetime

    @classmethod
    def from_record(cls, record: ListingRecord) -> "Candidate":
        """Build a candidate, resolving the record's timestamp."""
        if record.is_folder:
            raise ValueError(f"Folder entries cannot be download candidates: {record.name}")
        return cls(record=record, timestamp=record.timestamp())

    @property
    def name(self) -> str:
        """File name of the artifact."""
        return self.record.name

    @property
    def size(self) -> Optional[str]:
        """Size reported by the server, display only."""
        return self.record.size

    @property
    def md5(self) -> Optional[str]:
        """MD5 asserted by the server."""
        return self.record.md5

    @property
    def sha256(self) -> Optional[str]:
        """SHA256 asserted by the server."""
        return self.record.sha256

    @property
    def relative_path(self) -> str:
        """Path of the artifact inside its repository."""
        return self.record.relative_path()


class FileDigestResult(GenericRepoBaseModel):
    """
    Size and digests of a local file.

    Attributes:
        size_bytes: File size taken from the file's metadata
        md5_hex: Lowercase hex MD5 digest
        sha256_hex: Lowercase hex SHA256 digest
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    size_bytes: int = Field(ge=0)
    md5_hex: str
    sha256_hex: str


__all__ = ["Candidate", "FileDigestResult"]
