import io
import zipfile

import pytest
import responses

from wiiorganizer.covers import DISCS_URL, DownloadError, InProgress, WiiResources
from wiiorganizer.reactive import Dynamic


def _zip_bytes(entries):
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    return buf.getvalue()


class _FakeResponse:
    def __init__(self, body, status_ok=True, length=True):
        self.ok = status_ok
        self._body = body
        self.headers = {"Content-Length": str(len(body))} if length else {}

    def iter_content(self, chunk_size):
        for start in range(0, len(self._body), 7):
            yield self._body[start : start + 7]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class _FakeSession:
    def __init__(self, response):
        self.response = response
        self.urls = []

    def get(self, url, stream=False):
        self.urls.append((url, stream))
        return self.response


def test_in_progress_label():
    assert InProgress(name="x", percent=Dynamic(0.5)).label() == "50.00%"


def test_in_progress_default_label():
    assert InProgress().label() == "0.00%"


def test_cover_path(tmp_path):
    res = WiiResources(tmp_path, _FakeSession(None))
    assert res.cover_path("RMGE01") == tmp_path / "wii" / "disc" / "US" / "RMGE01.png"


def test_get_cover_missing_returns_none(tmp_path):
    res = WiiResources(tmp_path / "cache", _FakeSession(None))
    assert res.get_cover("NOPE01") is None
    assert (tmp_path / "cache").is_dir()


def test_get_cover_reads_cached_file(tmp_path):
    res = WiiResources(tmp_path, _FakeSession(None))
    path = res.cover_path("RMGE01")
    path.parent.mkdir(parents=True)
    path.write_bytes(b"png-data")
    assert res.get_cover("RMGE01") == b"png-data"


def test_download_url_extracts_and_tracks_progress(tmp_path):
    body = _zip_bytes({"wii/disc/US/ABCD01.png": b"cover", "wii/readme.txt": b"hi"})
    session = _FakeSession(_FakeResponse(body))
    res = WiiResources(tmp_path, session)
    res.download_url("http://localhost/archive.zip", "discs")
    assert res.get_cover("ABCD01") == b"cover"
    assert (tmp_path / "wii" / "readme.txt").read_bytes() == b"hi"
    assert (tmp_path / "discs.zip").read_bytes() == body
    downloads = res.downloads.get()
    assert [d.name for d in downloads] == ["discs"]
    assert downloads[0].percent.get() == 1.0
    assert session.urls == [("http://localhost/archive.zip", True)]


def test_download_without_length_has_no_progress(tmp_path):
    body = _zip_bytes({"a.txt": b"a"})
    res = WiiResources(tmp_path, _FakeSession(_FakeResponse(body, length=False)))
    res.download_url("http://localhost/a.zip", "misc")
    assert res.downloads.get() == []
    assert (tmp_path / "a.txt").read_bytes() == b"a"


def test_download_rejects_escaping_entries(tmp_path):
    body = _zip_bytes({"../evil.txt": b"x"})
    res = WiiResources(tmp_path / "cache", _FakeSession(_FakeResponse(body)))
    with pytest.raises(DownloadError):
        res.download_url("http://localhost/e.zip", "evil")
    assert not (tmp_path / "evil.txt").exists()


def test_download_rejects_non_zip(tmp_path):
    res = WiiResources(tmp_path, _FakeSession(_FakeResponse(b"not a zip at all")))
    with pytest.raises(DownloadError):
        res.download_url("http://localhost/bad.zip", "bad")


def test_download_failure_status(tmp_path):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://localhost/missing.zip", status=404)
        res = WiiResources(tmp_path)
        with pytest.raises(DownloadError, match="Failed to download covers"):
            res.download_url("http://localhost/missing.zip", "discs")


def test_download_fetches_disc_archive(tmp_path):
    body = _zip_bytes({"wii/disc/US/RSPE01.png": b"sports"})
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DISCS_URL, body=body, status=200)
        res = WiiResources(tmp_path)
        res.download()
    assert res.get_cover("RSPE01") == b"sports"
    assert (tmp_path / "discs.zip").read_bytes() == body