from unittest.mock import MagicMock, patch

import httpx
import pytest

from chordpro2html.exceptions import FetchError, SourceReadError, UnsupportedSourceError
from chordpro2html.sources import HttpSource, LocalFileSource, get_source

TEST_URL = "https://example.com/songs/amazing-grace.cho"


# ---------------------------------------------------------------------------
# can_handle / get_source
# ---------------------------------------------------------------------------


def test_http_source_handles_urls():
    assert HttpSource.can_handle(TEST_URL)
    assert HttpSource.can_handle("http://example.com/song.cho")
    assert not HttpSource.can_handle("songs/amazing-grace.cho")


def test_local_source_handles_paths_and_stdin():
    assert LocalFileSource.can_handle("songs/amazing-grace.cho")
    assert LocalFileSource.can_handle("-")
    assert not LocalFileSource.can_handle(TEST_URL)


def test_get_source_picks_reader():
    assert isinstance(get_source(TEST_URL), HttpSource)
    assert isinstance(get_source("song.cho"), LocalFileSource)


def test_get_source_unsupported_scheme():
    with pytest.raises(UnsupportedSourceError) as exc_info:
        get_source("ftp://example.com/song.cho")
    assert exc_info.value.location == "ftp://example.com/song.cho"


# ---------------------------------------------------------------------------
# LocalFileSource
# ---------------------------------------------------------------------------


def test_local_read_file(tmp_path):
    path = tmp_path / "song.cho"
    path.write_text("{title: Über}\n[C]Hi\n", encoding="utf-8")
    assert LocalFileSource().read(str(path)) == "{title: Über}\n[C]Hi\n"


def test_local_read_missing_file(tmp_path):
    missing = str(tmp_path / "nope.cho")
    with pytest.raises(SourceReadError) as exc_info:
        LocalFileSource().read(missing)
    assert exc_info.value.path == missing


def test_local_read_stdin(monkeypatch):
    stdin = MagicMock()
    stdin.read.return_value = "[G]from stdin"
    monkeypatch.setattr("sys.stdin", stdin)
    assert LocalFileSource().read("-") == "[G]from stdin"


# ---------------------------------------------------------------------------
# HttpSource
# ---------------------------------------------------------------------------


def _response(status_code: int, text: str = "") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    return resp


def test_http_read_returns_body():
    with patch("chordpro2html.sources.remote.httpx.get", return_value=_response(200, "{t: Foo}")) as get:
        assert HttpSource().read(TEST_URL) == "{t: Foo}"
    get.assert_called_once_with(TEST_URL, follow_redirects=True, timeout=15)


def test_http_read_non_200_raises_fetch_error():
    with patch("chordpro2html.sources.remote.httpx.get", return_value=_response(404)):
        with pytest.raises(FetchError) as exc_info:
            HttpSource().read(TEST_URL)
    assert exc_info.value.status_code == 404
    assert exc_info.value.url == TEST_URL


def test_http_transport_error_raises_fetch_error():
    error = httpx.ConnectError("connection refused")
    with patch("chordpro2html.sources.remote.httpx.get", side_effect=error):
        with pytest.raises(FetchError) as exc_info:
            HttpSource().read(TEST_URL)
    assert exc_info.value.status_code == 0
