"""
Test fixtures and mock data for genrepo-tool tests.

This module provides common fixtures, listing payload builders and a
recording progress reporter for testing the genrepo-tool package.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
import respx

from genrepo_tool.api import GenericRepoClient
from genrepo_tool.models import AuthCredentials, FileDigestResult, ListingRecord
from genrepo_tool.models.artifacts import Candidate

BASE_URL = "https://repo.example.com"
LIST_URL = f"{BASE_URL}/mirrors/api/generic/list"
TRANSFER_URL = f"{BASE_URL}/repository/generic"

# Digests of the empty input
EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"
EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class RecordingProgress:
    """Progress reporter that keeps every event for assertions."""

    def __init__(self) -> None:
        self.total: Optional[int] = None
        self.advances: List[int] = []
        self.finished: Optional[bool] = None

    def start(self, total_bytes: int) -> None:
        self.total = total_bytes

    def advance(self, num_bytes: int) -> None:
        self.advances.append(num_bytes)

    def finish(self, success: bool) -> None:
        self.finished = success

    @property
    def transferred(self) -> int:
        return sum(self.advances)


def file_record(
    name: str,
    path: str = "/releases/",
    last_modified: Optional[str] = "2024-01-01T00:00:00",
    folder: bool = False,
    **extra: Any,
) -> Dict[str, Any]:
    """Build one listing record as the server sends it."""
    record: Dict[str, Any] = {"name": name, "path": path, "folder": folder}
    if last_modified is not None:
        record["lastModifiedDate"] = last_modified
    record.update(extra)
    return record


def listing_payload(
    records: List[Dict[str, Any]],
    pagination: Optional[bool] = True,
    total_pages: Optional[int] = 1,
    page_number: int = 1,
    code: int = 0,
    msg: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a listing envelope."""
    data: Dict[str, Any] = {"records": records, "page_number": page_number}
    if pagination is not None:
        data["pagination"] = pagination
    if total_pages is not None:
        data["total_pages"] = total_pages
    payload: Dict[str, Any] = {"code": code, "data": data}
    if msg is not None:
        payload["msg"] = msg
    return payload


def make_candidate(name: str, last_modified: Optional[str] = "2024-01-01T00:00:00", **extra: Any) -> Candidate:
    """Build a candidate straight from record fields."""
    return Candidate.from_record(ListingRecord.model_validate(file_record(name, last_modified=last_modified, **extra)))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore root logger handlers and level changed by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def httpx_mock():
    """Provide a respx router for HTTP mocking; unused routes are allowed."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def credentials():
    """Static credential pair."""
    return AuthCredentials(username="ci-bot", token="s3cr3t-token")


@pytest.fixture
def client(credentials):
    """GenericRepoClient pointed at the test server."""
    repo_client = GenericRepoClient(credentials, base_url=BASE_URL)
    yield repo_client
    repo_client.close()


@pytest.fixture
def progress():
    """Fresh recording progress reporter."""
    return RecordingProgress()


@pytest.fixture
def temp_config(tmp_path: Path) -> str:
    """Valid configuration file pointing at the test server."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        '[auth]\nusername = "ci-bot"\ntoken = "s3cr3t-token"\n\n' f'[server]\nbase_url = "{BASE_URL}"\n'
    )
    return str(config_path)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Small local file with known content."""
    file_path = tmp_path / "tidb-v8.1.0-linux-amd64.tar.gz"
    file_path.write_bytes(b"genrepo test payload\n" * 100)
    return file_path


@pytest.fixture
def empty_digest():
    """Digest of an empty file."""
    return FileDigestResult(size_bytes=0, md5_hex=EMPTY_MD5, sha256_hex=EMPTY_SHA256)
