"""
Transfer pipelines for the generic repository.

This package turns a paginated listing into a ranked candidate set, streams
the selected artifact to disk, and uploads local files with their digests.

Modules:
    - discovery: Paginated listing, filtering and candidate collection
    - selection: Ranking and automatic or interactive selection
    - download: Streaming download and the download pipeline
    - upload: Streaming upload and confirmation decoding
    - reporting: Console output for results
"""

from .discovery import collect_candidates
from .selection import rank_candidates, select_candidate
from .download import download_candidate, run_download, verify_download
from .upload import upload_file

__all__ = [
    "collect_candidates",
    "rank_candidates",
    "select_candidate",
    "download_candidate",
    "run_download",
    "verify_download",
    "upload_file",
]
