"""Result models for download and upload operations."""

from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field

from .artifacts import Candidate, FileDigestResult
from .base import GenericRepoBaseModel


class TransferState(str, Enum):
    """States of the download and upload pipelines."""

    IDLE = "idle"
    LISTING = "listing"
    RANKING = "ranking"
    SELECTING = "selecting"
    HASHING = "hashing"
    DRY_RUN_REPORTED = "dry-run-reported"
    TRANSFERRING = "transferring"
    COMPLETE = "complete"
    FAILED = "failed"


def _compare(local: str, remote: Optional[str]) -> Optional[bool]:
    """Compare a local and a remote hex digest, None when the remote is unknown."""
    if not remote:
        return None
    return local.lower() == remote.strip().lower()


class ChecksumComparison(GenericRepoBaseModel):
    """
    Local digests next to the values reported by the server.

    Attributes:
        local: Digests computed from the local file
        remote_md5: MD5 reported by the server, if any
        remote_sha256: SHA256 reported by the server, if any
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    local: FileDigestResult
    remote_md5: Optional[str] = None
    remote_sha256: Optional[str] = None

    @property
    def md5_matches(self) -> Optional[bool]:
        """True/False when the server reported an MD5, otherwise None."""
        return _compare(self.local.md5_hex, self.remote_md5)

    @property
    def sha256_matches(self) -> Optional[bool]:
        """True/False when the server reported a SHA256, otherwise None."""
        return _compare(self.local.sha256_hex, self.remote_sha256)

    @property
    def has_mismatch(self) -> bool:
        """Whether any reported checksum disagrees with the local one."""
        return self.md5_matches is False or self.sha256_matches is False


class DownloadResult(GenericRepoBaseModel):
    """
    Result of downloading one artifact.

    Attributes:
        candidate: The artifact that was downloaded
        local_path: Where the file was written
        url: URL the file was fetched from
        bytes_written: Number of bytes streamed to disk
        content_length: Content-Length announced by the server, 0 if unknown
    """

    candidate: Candidate
    local_path: str
    url: str
    bytes_written: int = Field(default=0, ge=0)
    content_length: int = Field(default=0, ge=0)

    @property
    def expected_md5(self) -> Optional[str]:
        """MD5 asserted by the listing, not verified."""
        return self.candidate.md5

    @property
    def expected_sha256(self) -> Optional[str]:
        """SHA256 asserted by the listing, not verified."""
        return self.candidate.sha256


class UploadReport(GenericRepoBaseModel):
    """
    Result of an upload (or of a dry run).

    Attributes:
        local_path: Uploaded file
        remote_url: URL the file was (or would be) uploaded to
        final_path: Repository-rooted path of the file
        expires_days: Retention in days, 0 keeps the file forever
        local_digest: Digests of the local file
        dry_run: True when nothing was sent
        download_uri: Download location reported by the server
        remote_size: Size reported by the server
        remote_md5: MD5 reported by the server
        remote_sha256: SHA256 reported by the server
        raw_response: Response text when it could not be decoded
    """

    local_path: str
    remote_url: str
    final_path: str
    expires_days: int = 0
    local_digest: FileDigestResult
    dry_run: bool = False
    download_uri: Optional[str] = None
    remote_size: Optional[str] = None
    remote_md5: Optional[str] = None
    remote_sha256: Optional[str] = None
    raw_response: Optional[str] = None

    @property
    def checksums(self) -> ChecksumComparison:
        """Local digests compared with whatever the server reported."""
        return ChecksumComparison(
            local=self.local_digest, remote_md5=self.remote_md5, remote_sha256=self.remote_sha256
        )

    @property
    def size_matches(self) -> Optional[bool]:
        """Compare the reported size with the local size, None when unknown."""
        if self.remote_size is None:
            return None
        try:
            return int(self.remote_size) == self.local_digest.size_bytes
        except ValueError:
            return False


__all__ = [
    "TransferState",
    "ChecksumComparison",
    "DownloadResult",
    "UploadReport",
]
