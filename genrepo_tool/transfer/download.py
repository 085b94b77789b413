"""
Download operations for fetching artifacts from a generic repository.

This module streams one selected artifact to disk and drives the whole
download pipeline: listing, ranking, selection and transfer.
"""

import logging
import os
from typing import Callable, Optional, Sequence

import httpx

from ..api import GenericRepoClient
from ..exceptions import GenericRepoError, TransferInterruptedError
from ..models.artifacts import Candidate
from ..models.context import DownloadRequest
from ..models.results import ChecksumComparison, DownloadResult, TransferState
from ..utils.digest import compute_file_digest
from ..utils.path_utils import ensure_directory_exists
from ..utils.progress import NullProgress, ProgressReporter
from .discovery import collect_candidates
from .selection import Chooser, rank_candidates, select_candidate


def _content_length(response: httpx.Response) -> int:
    """Content-Length of a response, 0 when absent or malformed."""
    raw = response.headers.get("content-length")
    if not raw:
        return 0
    try:
        return max(int(raw), 0)
    except ValueError:
        logging.debug("Ignoring malformed Content-Length: %s", raw)
        return 0


def _local_path(destination_dir: str, name: str, url: str) -> str:
    """Join a listed file name onto destination_dir, refusing anything but a bare name."""
    if name in (".", "..") or os.path.basename(name) != name or "\\" in name:
        raise TransferInterruptedError(
            f"Refusing to write listed name {name!r} outside {destination_dir}",
            operation="download artifact",
            target=url,
        )
    return os.path.join(destination_dir, name)


def _log_state(state: TransferState) -> None:
    logging.debug("Download state: %s", state.value)


def download_candidate(
    client: GenericRepoClient,
    repo: str,
    candidate: Candidate,
    destination_dir: str,
    progress: Optional[ProgressReporter] = None,
) -> DownloadResult:
    """
    Stream one artifact into destination_dir.

    The local file is only created once the server has answered 2xx. A
    failure while streaming leaves the partial file in place.

    Args:
        client: Client used for the request
        repo: Repository the candidate was listed in
        candidate: Artifact to download
        destination_dir: Local directory, created if missing
        progress: Optional reporter receiving one event per chunk

    Returns:
        DownloadResult describing the written file

    Raises:
        TransportError: If the server cannot be reached
        RemoteStatusError: On a non-2xx status (no file is created)
        TransferInterruptedError: If the listed name is not a plain file name, or if
            reading the body or writing the file fails midway
    """
    reporter = progress or NullProgress()
    url = client.artifact_url(repo, candidate.relative_path)
    local_path = _local_path(destination_dir, candidate.name, url)
    ensure_directory_exists(destination_dir)

    logging.info("Downloading %s to %s", url, local_path)
    with client.stream_artifact(url) as response:
        content_length = _content_length(response)
        reporter.start(content_length)
        bytes_written = 0
        try:
            with open(local_path, "wb") as f:
                for chunk in response.iter_bytes():
                    f.write(chunk)
                    bytes_written += len(chunk)
                    reporter.advance(len(chunk))
        except (httpx.HTTPError, OSError) as e:
            reporter.finish(False)
            logging.debug("Partial file left at %s (%d bytes)", local_path, bytes_written)
            raise TransferInterruptedError(
                f"{e} after {bytes_written} bytes", operation="download artifact", target=url
            ) from e

    reporter.finish(True)
    if content_length and bytes_written != content_length:
        logging.warning("Expected %d bytes for %s, received %d", content_length, candidate.name, bytes_written)

    logging.info("Downloaded %s (%d bytes)", local_path, bytes_written)
    return DownloadResult(
        candidate=candidate,
        local_path=local_path,
        url=url,
        bytes_written=bytes_written,
        content_length=content_length,
    )


def run_download(
    client: GenericRepoClient,
    request: DownloadRequest,
    chooser: Optional[Chooser] = None,
    progress: Optional[ProgressReporter] = None,
    on_ranked: Optional[Callable[[Sequence[Candidate]], None]] = None,
) -> DownloadResult:
    """
    Find, rank, select and download one artifact.

    Args:
        client: Client used for every request
        request: What to look for and where to put it
        chooser: Interactive chooser, only consulted when request.interactive is set
        progress: Optional reporter for the transfer
        on_ranked: Called with the ranked candidates before selection

    Returns:
        DownloadResult of the selected artifact

    Raises:
        GenericRepoError: Whatever stage failed; nothing is retried
    """
    _log_state(TransferState.IDLE)
    try:
        _log_state(TransferState.LISTING)
        candidates = collect_candidates(
            client, request.repo, request.remote_dir, request.name_filter, request.page_size
        )

        _log_state(TransferState.RANKING)
        ranked = rank_candidates(candidates)
        if on_ranked is not None:
            on_ranked(ranked)

        _log_state(TransferState.SELECTING)
        selected = select_candidate(ranked, chooser if request.interactive else None)
        logging.info("Selected %s", selected.name)

        _log_state(TransferState.TRANSFERRING)
        result = download_candidate(client, request.repo, selected, request.download_dir, progress)
    except GenericRepoError:
        _log_state(TransferState.FAILED)
        raise

    _log_state(TransferState.COMPLETE)
    return result


def verify_download(result: DownloadResult, progress: Optional[ProgressReporter] = None) -> ChecksumComparison:
    """
    Hash a downloaded file and compare it with the checksums from the listing.

    Args:
        result: Result of a completed download
        progress: Optional reporter for the hashing pass

    Returns:
        ChecksumComparison; match flags are None where the listing had no value

    Raises:
        DigestIOError: If the file cannot be read
    """
    digest = compute_file_digest(result.local_path, progress=progress)
    comparison = ChecksumComparison(
        local=digest, remote_md5=result.expected_md5, remote_sha256=result.expected_sha256
    )
    if comparison.has_mismatch:
        logging.warning("Checksum mismatch for %s", result.local_path)
    return comparison


__all__ = ["download_candidate", "run_download", "verify_download"]
