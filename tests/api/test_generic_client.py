"""
Tests for GenericRepoClient and its mixin components.

This module contains tests for:
- GenericRepoClient: Main client class (generic_client.py)
- ListingMixin: Paginated directory listing (listing.py)
- TransferMixin: Streaming download and upload requests (transfer.py)

All mixin functionality is tested through the integrated GenericRepoClient class.
"""

import base64
from unittest.mock import Mock, patch

import httpx
import pytest

from conftest import BASE_URL, LIST_URL, TRANSFER_URL, file_record, listing_payload
from genrepo_tool.api import GenericRepoClient
from genrepo_tool.exceptions import (
    DecodeError,
    MissingPayloadError,
    RemoteApplicationError,
    RemoteStatusError,
    TransferInterruptedError,
    TransportError,
)
from genrepo_tool.models import ServerSettings, ToolConfig


class TestGenericRepoClient:
    """Test GenericRepoClient class."""

    def test_init(self, credentials):
        """Test client initialization."""
        client = GenericRepoClient(credentials, base_url=f"{BASE_URL}/")

        assert client.base_url == BASE_URL
        assert isinstance(client.session, httpx.Client)
        assert isinstance(client.request_params["auth"], httpx.BasicAuth)
        client.close()

    def test_context_manager(self, credentials):
        """Test context manager closes the session."""
        mock_session = Mock()
        mock_session.is_closed = False

        with GenericRepoClient(credentials, session=mock_session) as client:
            assert client.session is mock_session

        mock_session.close.assert_called_once()

    def test_create_from_config(self, credentials):
        """Test creating a client from a validated config."""
        config = ToolConfig(auth=credentials, server=ServerSettings(base_url="http://mirror.local:8080/"))

        with patch("genrepo_tool.api.generic_client.create_session") as mock_create_session:
            client = GenericRepoClient.create_from_config(config)

        assert client.base_url == "http://mirror.local:8080"
        mock_create_session.assert_called_once()

    def test_create_from_config_file(self, temp_config):
        """Test creating a client from a TOML file."""
        with GenericRepoClient.create_from_config_file(temp_config) as client:
            assert client.base_url == BASE_URL
            assert client.credentials.username == "ci-bot"

    def test_artifact_url(self, client):
        """Test artifact URL building normalizes slashes."""
        url = client.artifact_url("/my_repo/", "releases//v1/pkg.tar.gz")

        assert url == f"{TRANSFER_URL}/my_repo/releases/v1/pkg.tar.gz"

    def test_check_response_error_carries_body(self, client):
        """Test non-2xx responses raise RemoteStatusError with the body."""
        response = httpx.Response(403, text="forbidden", request=httpx.Request("GET", f"{BASE_URL}/x"))

        with pytest.raises(RemoteStatusError) as exc_info:
            client._check_response(response, "fetch x")

        assert exc_info.value.status_code == 403
        assert exc_info.value.body == "forbidden"
        assert exc_info.value.operation == "fetch x"


class TestListingMixin:
    """Test ListingMixin functionality."""

    def test_list_directory_success(self, client, httpx_mock):
        """Test a successful listing request."""
        route = httpx_mock.get(LIST_URL).mock(
            return_value=httpx.Response(
                200,
                json=listing_payload(
                    [file_record("pkg-1.tar.gz", size=123), file_record("sub", folder=True)], total_pages=3
                ),
            )
        )

        page = client.list_directory("my_repo/releases", 2, 50)

        assert [record.name for record in page.records] == ["pkg-1.tar.gz", "sub"]
        assert page.records[0].size == "123"
        assert page.pagination is True
        assert page.total_pages == 3

        request = route.calls.last.request
        assert request.url.params["full_path"] == "my_repo/releases"
        assert request.url.params["pagesize"] == "50"
        assert request.url.params["page"] == "2"

    def test_list_directory_sends_basic_auth(self, client, httpx_mock):
        """Test every request carries the Basic credential."""
        route = httpx_mock.get(LIST_URL).mock(return_value=httpx.Response(200, json=listing_payload([])))

        client.list_directory("my_repo", 1, 10)

        expected = "Basic " + base64.b64encode(b"ci-bot:s3cr3t-token").decode()
        assert route.calls.last.request.headers["authorization"] == expected

    def test_list_directory_http_error(self, client, httpx_mock):
        """Test non-2xx status raises RemoteStatusError with the raw body."""
        httpx_mock.get(LIST_URL).mock(return_value=httpx.Response(401, text="bad credentials"))

        with pytest.raises(RemoteStatusError) as exc_info:
            client.list_directory("my_repo", 1, 10)

        assert exc_info.value.status_code == 401
        assert "bad credentials" in str(exc_info.value)

    def test_list_directory_application_error(self, client, httpx_mock):
        """Test a non-zero envelope code raises RemoteApplicationError."""
        httpx_mock.get(LIST_URL).mock(
            return_value=httpx.Response(200, json={"code": 250102, "msg": "repo not found"})
        )

        with pytest.raises(RemoteApplicationError) as exc_info:
            client.list_directory("missing", 1, 10)

        assert exc_info.value.code == 250102
        assert exc_info.value.msg == "repo not found"

    def test_list_directory_missing_data(self, client, httpx_mock):
        """Test a success envelope without data raises MissingPayloadError."""
        httpx_mock.get(LIST_URL).mock(return_value=httpx.Response(200, json={"code": 0}))

        with pytest.raises(MissingPayloadError):
            client.list_directory("my_repo", 1, 10)

    @pytest.mark.parametrize(
        "body",
        ["<html>gateway</html>", '{"msg": "no code"}', '{"code": 0, "data": {"records": [{"path": "/"}]}}'],
    )
    def test_list_directory_decode_error(self, client, httpx_mock, body):
        """Test malformed bodies raise DecodeError."""
        httpx_mock.get(LIST_URL).mock(return_value=httpx.Response(200, text=body))

        with pytest.raises(DecodeError):
            client.list_directory("my_repo", 1, 10)

    def test_list_directory_transport_error(self, client, httpx_mock):
        """Test connection failures raise TransportError."""
        httpx_mock.get(LIST_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(TransportError) as exc_info:
            client.list_directory("my_repo", 1, 10)

        assert "connection refused" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.parametrize("page,page_size", [(0, 10), (1, 0), (1, 1025)])
    def test_list_directory_rejects_bad_arguments(self, client, page, page_size):
        """Test out-of-range page or page size is rejected before any request."""
        with pytest.raises(ValueError):
            client.list_directory("my_repo", page, page_size)

    def test_no_retry_on_failure(self, client, httpx_mock):
        """Test a failed request is sent exactly once."""
        route = httpx_mock.get(LIST_URL).mock(return_value=httpx.Response(503, text="busy"))

        with pytest.raises(RemoteStatusError):
            client.list_directory("my_repo", 1, 10)

        assert route.call_count == 1


class TestTransferMixin:
    """Test TransferMixin functionality."""

    def test_stream_artifact_success(self, client, httpx_mock):
        """Test streaming a 2xx response."""
        url = f"{TRANSFER_URL}/my_repo/pkg.tar.gz"
        httpx_mock.get(url).mock(return_value=httpx.Response(200, content=b"abc" * 10))

        with client.stream_artifact(url) as response:
            body = b"".join(response.iter_bytes())

        assert body == b"abc" * 10

    def test_stream_artifact_error_reads_body(self, client, httpx_mock):
        """Test non-2xx streams raise with the eagerly read body."""
        url = f"{TRANSFER_URL}/my_repo/missing.tar.gz"
        httpx_mock.get(url).mock(return_value=httpx.Response(404, text="no such file"))

        with pytest.raises(RemoteStatusError) as exc_info:
            with client.stream_artifact(url):
                pytest.fail("body must not be yielded on error")

        assert exc_info.value.status_code == 404
        assert exc_info.value.body == "no such file"

    def test_put_artifact_headers(self, client, httpx_mock):
        """Test upload requests carry expiry and length headers."""
        url = f"{TRANSFER_URL}/my_repo/dir/pkg.tar.gz"
        route = httpx_mock.put(url).mock(return_value=httpx.Response(200, json={}))

        client.put_artifact(url, iter([b"hello ", b"world"]), content_length=11, expires_days=7)

        request = route.calls.last.request
        assert request.headers["X-BKREPO-EXPIRES"] == "7"
        assert request.headers["Content-Length"] == "11"
        assert "transfer-encoding" not in request.headers
        assert request.content == b"hello world"

    def test_put_artifact_server_error(self, client, httpx_mock):
        """Test non-2xx upload responses raise RemoteStatusError."""
        url = f"{TRANSFER_URL}/my_repo/pkg.tar.gz"
        httpx_mock.put(url).mock(return_value=httpx.Response(500, text="disk full"))

        with pytest.raises(RemoteStatusError) as exc_info:
            client.put_artifact(url, iter([b"x"]), content_length=1, expires_days=0)

        assert exc_info.value.body == "disk full"

    def test_put_artifact_write_error(self, client, httpx_mock):
        """Test a failure while sending the body raises TransferInterruptedError."""
        url = f"{TRANSFER_URL}/my_repo/pkg.tar.gz"
        httpx_mock.put(url).mock(side_effect=httpx.WriteError("broken pipe"))

        with pytest.raises(TransferInterruptedError):
            client.put_artifact(url, iter([b"x"]), content_length=1, expires_days=0)
