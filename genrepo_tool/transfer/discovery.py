"""
Candidate discovery over a paginated directory listing.

Pages are fetched one at a time in increasing order. Folders and files whose
name does not contain the filter are skipped; every other record becomes a
Candidate.
"""

import logging
from typing import List

from ..api import GenericRepoClient
from ..exceptions import NoMatchingArtifactError
from ..models.api import ListingPage
from ..models.artifacts import Candidate
from ..models.context import clamp_page_size
from ..utils.path_utils import build_full_path


def _has_more_pages(page: ListingPage, page_number: int, page_size: int) -> bool:
    """
    Decide whether another page should be requested.

    All three must hold: pagination is active, the current page is below the
    total page count (which defaults to the current page), and the page came
    back full.
    """
    if not page.pagination:
        return False
    total_pages = page.total_pages if page.total_pages is not None else page_number
    return page_number < total_pages and len(page.records or []) >= page_size


def matching_candidates(page: ListingPage, name_filter: str) -> List[Candidate]:
    """
    Turn one listing page into candidates.

    Args:
        page: Decoded listing page
        name_filter: Case-sensitive substring the file name must contain

    Returns:
        Candidates in the order the server listed them
    """
    candidates = []
    for record in page.records or []:
        if record.is_folder:
            logging.debug("Skipping folder: %s", record.name)
            continue
        if name_filter not in record.name:
            continue
        candidates.append(Candidate.from_record(record))
    return candidates


def collect_candidates(
    client: GenericRepoClient, repo: str, remote_dir: str, name_filter: str, page_size: int
) -> List[Candidate]:
    """
    Walk the listing of repo/remote_dir and collect every matching file.

    Args:
        client: Client used for the listing requests
        repo: Repository name
        remote_dir: Directory inside the repository, empty for the root
        name_filter: Case-sensitive substring the file name must contain
        page_size: Records per page, clamped to the range the API accepts

    Returns:
        Unordered list of candidates (never empty)

    Raises:
        NoMatchingArtifactError: If no file matched
        GenericRepoError: Any listing failure, propagated unchanged
    """
    full_path = build_full_path(repo, remote_dir)
    page_size = clamp_page_size(page_size)
    logging.info("Searching %s for files containing '%s'", full_path, name_filter)

    candidates: List[Candidate] = []
    page_number = 1
    while True:
        page = client.list_directory(full_path, page_number, page_size)
        records = page.records or []
        if not records:
            logging.debug("Page %d of %s is empty, stopping", page_number, full_path)
            break

        found = matching_candidates(page, name_filter)
        logging.debug("Page %d: %d of %d record(s) matched", page_number, len(found), len(records))
        candidates.extend(found)

        if not _has_more_pages(page, page_number, page_size):
            break
        page_number += 1

    if not candidates:
        raise NoMatchingArtifactError(repo, remote_dir, name_filter)

    logging.info("Found %d matching file(s) in %s", len(candidates), full_path)
    return candidates


__all__ = ["collect_candidates", "matching_candidates"]
