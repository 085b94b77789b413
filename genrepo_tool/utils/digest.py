"""
Digest calculation for local files.

Size, MD5 and SHA256 are produced in a single sequential pass with a fixed
read buffer, so memory use does not depend on the file size.
"""

import hashlib
import logging
import os
from typing import BinaryIO, Optional, Tuple

from ..exceptions import DigestIOError
from ..models.artifacts import FileDigestResult
from .constants import DIGEST_CHUNK_SIZE
from .progress import NullProgress, ProgressReporter


def hash_stream(
    source: BinaryIO, chunk_size: int = DIGEST_CHUNK_SIZE, progress: Optional[ProgressReporter] = None
) -> Tuple[str, str]:
    """
    Hash a binary stream until EOF.

    Args:
        source: Readable binary stream
        chunk_size: Read buffer size in bytes
        progress: Optional reporter advanced once per chunk

    Returns:
        Tuple of (md5_hex, sha256_hex)
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive: {chunk_size}")

    reporter = progress or NullProgress()
    md5_hash = hashlib.md5(usedforsecurity=False)
    sha256_hash = hashlib.sha256()

    for chunk in iter(lambda: source.read(chunk_size), b""):
        md5_hash.update(chunk)
        sha256_hash.update(chunk)
        reporter.advance(len(chunk))

    return md5_hash.hexdigest(), sha256_hash.hexdigest()


def compute_file_digest(
    file_path: str, chunk_size: int = DIGEST_CHUNK_SIZE, progress: Optional[ProgressReporter] = None
) -> FileDigestResult:
    """
    Compute size, MD5 and SHA256 of a local file.

    The size comes from the file's metadata, not from counting bytes read.

    Args:
        file_path: Path to the file
        chunk_size: Read buffer size in bytes (default: 64 KiB)
        progress: Optional reporter receiving start/advance/finish events

    Returns:
        FileDigestResult for the file

    Raises:
        DigestIOError: If the file cannot be opened or read
    """
    reporter = progress or NullProgress()
    try:
        with open(file_path, "rb") as f:
            size = os.fstat(f.fileno()).st_size
            reporter.start(size)
            md5_hex, sha256_hex = hash_stream(f, chunk_size, reporter)
    except OSError as e:
        reporter.finish(False)
        raise DigestIOError(str(e), operation="compute digests", target=file_path) from e

    reporter.finish(True)
    logging.debug("Digests for %s: size=%d md5=%s sha256=%s", file_path, size, md5_hex, sha256_hex)
    return FileDigestResult(size_bytes=size, md5_hex=md5_hex, sha256_hex=sha256_hex)


__all__ = ["hash_stream", "compute_file_digest"]
