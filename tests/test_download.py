"""
Tests for the archive download step (urllib mocked).
"""

import io
import logging
import urllib.error
from pathlib import Path
from unittest.mock import patch

import pytest

from chromedriver_installer.core.services.driver_install import (
    DownloadError,
    download_archive,
)

URL = "https://chromedriver.storage.googleapis.com/85.0.4183.38/chromedriver_linux64.zip"
_URLOPEN = "chromedriver_installer.core.services.driver_install.execution.download.urllib.request.urlopen"


class FakeResponse(io.BytesIO):
    """Minimal stand-in for an ``http.client.HTTPResponse``."""

    def __init__(self, body: bytes, status: int = 200, content_length: bool = True):
        super().__init__(body)
        self.status = status
        self.headers = {"Content-Length": str(len(body))} if content_length else {}

    def getcode(self) -> int:
        return self.status


class TestDownloadArchive:
    def test_writes_body(self, tmp_path: Path):
        dest = tmp_path / "a.zip"
        body = b"PK\x03\x04" + b"x" * 50_000
        with patch(_URLOPEN, return_value=FakeResponse(body)) as mock_open:
            written = download_archive(URL, dest, timeout=12.5)

        assert written == len(body)
        assert dest.read_bytes() == body
        req = mock_open.call_args.args[0]
        assert req.full_url == URL
        assert req.get_method() == "GET"
        assert mock_open.call_args.kwargs["timeout"] == 12.5

    def test_sends_no_custom_headers(self, tmp_path: Path):
        with patch(_URLOPEN, return_value=FakeResponse(b"x")) as mock_open:
            download_archive(URL, tmp_path / "a.zip")
        req = mock_open.call_args.args[0]
        assert req.header_items() == []

    @pytest.mark.parametrize("value", ["abc", "12.5", ""])
    def test_bad_content_length_is_ignored(self, tmp_path: Path, value: str):
        dest = tmp_path / "a.zip"
        resp = FakeResponse(b"payload")
        resp.headers = {"Content-Length": value}
        with patch(_URLOPEN, return_value=resp):
            assert download_archive(URL, dest) == len(b"payload")
        assert dest.read_bytes() == b"payload"

    def test_progress_goes_to_progress_logger(self, tmp_path: Path, caplog):
        with caplog.at_level(logging.INFO):
            with patch(_URLOPEN, return_value=FakeResponse(b"z" * 40_000)):
                download_archive(URL, tmp_path / "a.zip")

        progress = [r for r in caplog.records if "Download progress" in r.getMessage()]
        assert progress
        assert all(r.name.endswith(".download.progress") for r in progress)

    def test_without_content_length(self, tmp_path: Path):
        dest = tmp_path / "a.zip"
        with patch(_URLOPEN, return_value=FakeResponse(b"abc", content_length=False)):
            assert download_archive(URL, dest) == 3

    def test_http_404_raises(self, tmp_path: Path):
        dest = tmp_path / "a.zip"
        err = urllib.error.HTTPError(URL, 404, "Not Found", hdrs={}, fp=io.BytesIO(b""))
        with patch(_URLOPEN, side_effect=err):
            with pytest.raises(DownloadError) as exc_info:
                download_archive(URL, dest)

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == URL
        assert "404" in str(exc_info.value)
        assert not dest.exists()

    def test_non_200_success_code_raises(self, tmp_path: Path):
        dest = tmp_path / "a.zip"
        with patch(_URLOPEN, return_value=FakeResponse(b"", status=204)):
            with pytest.raises(DownloadError) as exc_info:
                download_archive(URL, dest)
        assert exc_info.value.status_code == 204
        assert not dest.exists()

    def test_network_failure_has_no_status(self, tmp_path: Path):
        err = urllib.error.URLError("Name or service not known")
        with patch(_URLOPEN, side_effect=err):
            with pytest.raises(DownloadError) as exc_info:
                download_archive(URL, tmp_path / "a.zip")
        assert exc_info.value.status_code is None
        assert "Name or service not known" in str(exc_info.value)

    def test_timeout_raises_download_error(self, tmp_path: Path):
        with patch(_URLOPEN, side_effect=TimeoutError("timed out")):
            with pytest.raises(DownloadError):
                download_archive(URL, tmp_path / "a.zip")

    def test_interrupted_transfer_removes_partial_file(self, tmp_path: Path):
        dest = tmp_path / "a.zip"

        class Dropping(FakeResponse):
            def read(self, n=-1):
                if self.tell() > 0:
                    raise ConnectionResetError("reset by peer")
                return super().read(n)

        with patch(_URLOPEN, return_value=Dropping(b"y" * 20_000)):
            with pytest.raises(DownloadError, match="interrupted"):
                download_archive(URL, dest)
        assert not dest.exists()

    def test_unwritable_destination_raises_oserror(self, tmp_path: Path):
        dest = tmp_path / "missing-dir" / "a.zip"
        with patch(_URLOPEN, return_value=FakeResponse(b"x")):
            with pytest.raises(OSError):
                download_archive(URL, dest)
