"""
Upload operations for pushing a local file to a generic repository.

The file is streamed from disk in fixed-size chunks with its exact size
declared up front. The confirmation body is decoded on a best-effort basis:
a successful upload is never turned into a failure because the server's
answer could not be parsed.
"""

import logging
from typing import BinaryIO, Iterator, Optional

from pydantic import ValidationError

from ..api import GenericRepoClient
from ..exceptions import GenericRepoError, TransferInterruptedError
from ..models.api import UploadResponse
from ..models.artifacts import FileDigestResult
from ..models.context import UploadPlan
from ..models.results import TransferState, UploadReport
from ..utils.constants import DIGEST_CHUNK_SIZE
from ..utils.progress import NullProgress, ProgressReporter


def iter_file_chunks(
    source: BinaryIO, url: str, progress: ProgressReporter, chunk_size: int = DIGEST_CHUNK_SIZE
) -> Iterator[bytes]:
    """
    Yield a file's content chunk by chunk, reporting each one.

    Raises:
        TransferInterruptedError: If reading the file fails midway
    """
    while True:
        try:
            chunk = source.read(chunk_size)
        except OSError as e:
            raise TransferInterruptedError(
                f"Reading the local file failed: {e}", operation="upload artifact", target=url
            ) from e
        if not chunk:
            return
        progress.advance(len(chunk))
        yield chunk


def _report(plan: UploadPlan, remote_url: str, digest: FileDigestResult, **kwargs) -> UploadReport:
    return UploadReport(
        local_path=plan.local_path,
        remote_url=remote_url,
        final_path=plan.final_path(),
        expires_days=plan.expires_days,
        local_digest=digest,
        **kwargs,
    )


def upload_file(
    client: GenericRepoClient,
    plan: UploadPlan,
    digest: FileDigestResult,
    dry_run: bool = False,
    progress: Optional[ProgressReporter] = None,
) -> UploadReport:
    """
    Upload the file described by plan.

    Args:
        client: Client used for the request
        plan: Resolved local and remote locations
        digest: Digests of the local file; its size is sent as Content-Length
        dry_run: Only report what would be uploaded, without any request
        progress: Optional reporter receiving one event per chunk

    Returns:
        UploadReport with whatever the server reported

    Raises:
        TransportError: If the server cannot be reached
        TransferInterruptedError: If the file cannot be read or the body cannot be sent
        RemoteStatusError: On a non-2xx status
    """
    remote_url = plan.remote_url(client.base_url)

    if dry_run:
        logging.debug("Upload state: %s", TransferState.DRY_RUN_REPORTED.value)
        logging.info("[dry-run] Would upload %s -> %s", plan.local_path, remote_url)
        return _report(plan, remote_url, digest, dry_run=True)

    reporter = progress or NullProgress()
    logging.debug("Upload state: %s", TransferState.TRANSFERRING.value)
    logging.info("Uploading %s -> %s (%d bytes)", plan.local_path, remote_url, digest.size_bytes)

    try:
        source = open(plan.local_path, "rb")  # pylint: disable=consider-using-with
    except OSError as e:
        logging.debug("Upload state: %s", TransferState.FAILED.value)
        raise TransferInterruptedError(
            f"Cannot open local file: {e}", operation="upload artifact", target=plan.local_path
        ) from e

    reporter.start(digest.size_bytes)
    try:
        with source:
            response = client.put_artifact(
                remote_url,
                iter_file_chunks(source, remote_url, reporter),
                content_length=digest.size_bytes,
                expires_days=plan.expires_days,
            )
    except GenericRepoError:
        reporter.finish(False)
        logging.debug("Upload state: %s", TransferState.FAILED.value)
        raise
    reporter.finish(True)

    logging.debug("Upload state: %s", TransferState.COMPLETE.value)
    logging.info("Upload succeeded: %s", remote_url)

    try:
        confirmation = UploadResponse.model_validate_json(response.content)
    except ValidationError as e:
        logging.debug("Could not decode upload response: %s", e)
        return _report(plan, remote_url, digest, raw_response=response.text)

    checksums = confirmation.checksums
    return _report(
        plan,
        remote_url,
        digest,
        download_uri=confirmation.download_uri or confirmation.uri or remote_url,
        remote_size=confirmation.size,
        remote_md5=checksums.md5 if checksums else None,
        remote_sha256=checksums.sha256 if checksums else None,
    )


__all__ = ["iter_file_chunks", "upload_file"]
