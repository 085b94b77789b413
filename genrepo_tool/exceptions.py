"""
Exception types raised by genrepo-tool.

Every error carries the operation that failed and the target it was acting on
(a URL, a repository path or a local file), so the top-level handler can
report it without retrying anything.
"""

from typing import Optional


class GenericRepoError(Exception):
    """Base class for all genrepo-tool errors."""

    def __init__(self, message: str, *, operation: Optional[str] = None, target: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.target = target

    def __str__(self) -> str:
        parts = []
        if self.operation:
            parts.append(f"{self.operation} failed")
        if self.target:
            parts.append(f"({self.target})")
        prefix = " ".join(parts)
        return f"{prefix}: {self.message}" if prefix else self.message


class ConfigError(GenericRepoError):
    """Configuration file is missing, unreadable or invalid."""


class TransportError(GenericRepoError):
    """Connection, DNS or TLS failure before a response was received."""


class RemoteStatusError(GenericRepoError):
    """Server answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int, body: str, *, operation: Optional[str] = None, target: Optional[str] = None):
        super().__init__(f"HTTP {status_code}: {body}", operation=operation, target=target)
        self.status_code = status_code
        self.body = body


class RemoteApplicationError(GenericRepoError):
    """Server answered 2xx but the response envelope carries a non-zero code."""

    def __init__(self, code: int, msg: str, *, operation: Optional[str] = None, target: Optional[str] = None):
        super().__init__(f"code {code}: {msg}", operation=operation, target=target)
        self.code = code
        self.msg = msg


class DecodeError(GenericRepoError):
    """Response body is not valid JSON or does not have the expected shape."""


class MissingPayloadError(GenericRepoError):
    """Success envelope without its data payload."""


class NoMatchingArtifactError(GenericRepoError):
    """Discovery found no file matching the filter."""

    def __init__(self, repo: str, remote_dir: str, name_filter: str) -> None:
        super().__init__(
            f"no file containing '{name_filter}' found in {repo}/{remote_dir}",
            operation="artifact discovery",
            target=f"{repo}/{remote_dir}",
        )
        self.repo = repo
        self.remote_dir = remote_dir
        self.name_filter = name_filter


class SelectionAbortedError(GenericRepoError):
    """Interactive selection was cancelled or returned an invalid index."""


class TransferInterruptedError(GenericRepoError):
    """Streaming transfer failed after it had started."""


class DigestIOError(GenericRepoError):
    """Local file could not be read while computing digests."""


__all__ = [
    "GenericRepoError",
    "ConfigError",
    "TransportError",
    "RemoteStatusError",
    "RemoteApplicationError",
    "DecodeError",
    "MissingPayloadError",
    "NoMatchingArtifactError",
    "SelectionAbortedError",
    "TransferInterruptedError",
    "DigestIOError",
]
