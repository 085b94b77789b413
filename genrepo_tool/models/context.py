"""Context and request models for genrepo-tool operations."""

import os
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from ..utils.constants import (
    DEFAULT_DOWNLOAD_DIR,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
    TRANSFER_PREFIX,
)
from ..utils.path_utils import build_artifact_url, join_remote_path, trim_slashes
from .base import GenericRepoBaseModel


def clamp_page_size(page_size: int) -> int:
    """Clamp a page size into the range accepted by the listing API."""
    return max(MIN_PAGE_SIZE, min(MAX_PAGE_SIZE, page_size))


class DownloadRequest(GenericRepoBaseModel):
    """
    Context information for download operations.

    Attributes:
        repo: Repository name
        name_filter: Substring the file name must contain
        remote_dir: Directory inside the repository (empty means root)
        download_dir: Local directory to save the file in
        page_size: Listing page size, clamped to [1, 1024]
        interactive: Let the user pick the file instead of taking the newest
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    repo: str = Field(min_length=1)
    name_filter: str
    remote_dir: str = ""
    download_dir: str = DEFAULT_DOWNLOAD_DIR
    page_size: int = DEFAULT_PAGE_SIZE
    interactive: bool = False

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, value: int) -> int:
        """Clamp the page size instead of rejecting it."""
        return clamp_page_size(value)


class UploadPlan(GenericRepoBaseModel):
    """
    Resolved description of one upload.

    Attributes:
        local_path: File to upload
        repo: Target repository name
        remote_path: Target directory inside the repository
        remote_filename: Target file name
        expires_days: Retention in days, 0 keeps the file forever
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    local_path: str
    repo: str = Field(min_length=1)
    remote_path: str = ""
    remote_filename: str = Field(min_length=1)
    expires_days: int = Field(default=0, ge=0)

    @classmethod
    def from_local_file(
        cls,
        local_path: str,
        repo: str,
        remote_path: str,
        remote_filename: Optional[str] = None,
        expires_days: int = 0,
    ) -> "UploadPlan":
        """
        Build a plan, defaulting the remote file name to the local base name.

        Raises:
            ValueError: If no file name can be derived from local_path
        """
        filename = remote_filename or os.path.basename(os.path.normpath(local_path))
        if not filename or filename in (".", ".."):
            raise ValueError(f"Cannot derive a file name from {local_path}; pass a remote file name")
        return cls(
            local_path=local_path,
            repo=repo,
            remote_path=remote_path,
            remote_filename=filename,
            expires_days=expires_days,
        )

    def remote_relative_path(self) -> str:
        """Path of the uploaded file inside the repository."""
        return join_remote_path(self.remote_path, self.remote_filename)

    def remote_url(self, base_url: str) -> str:
        """Absolute URL the file is uploaded to."""
        return build_artifact_url(base_url, TRANSFER_PREFIX, self.repo, self.remote_relative_path())

    def final_path(self) -> str:
        """Repository-rooted path of the uploaded file (e.g. /repo/dir/file)."""
        return f"/{trim_slashes(self.repo)}/{self.remote_relative_path()}"


__all__ = ["clamp_page_size", "DownloadRequest", "UploadPlan"]
