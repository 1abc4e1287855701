"""Downloading and caching of game cover art."""

from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import requests

from wiiorganizer.reactive import Dynamic

log = logging.getLogger(__name__)

DISCS_URL = "https://www.gametdb.com/download.php?FTP=GameTDB-wii_disc-US-2025-03-19.zip"
_CHUNK_SIZE = 64 * 1024


class DownloadError(Exception):
    """A cover archive could not be fetched or unpacked."""


@dataclass
class InProgress:
    """A running download and how far along it is (0.0 to 1.0)."""

    name: str = ""
    percent: Dynamic[float] = field(default_factory=lambda: Dynamic(0.0))

    def label(self) -> str:
        """Progress as a percentage with two decimals."""
        return f"{self.percent.get() * 100.0:.2f}%"


class WiiResources:
    """Fetches cover archives into a cache directory and reads covers from it."""

    def __init__(
        self,
        cache_dir: Union[str, Path],
        session: Optional[requests.Session] = None,
    ) -> None:
        self.cache_dir = Path(cache_dir)
        self.session = session if session is not None else requests.Session()
        self.downloads: Dynamic[List[InProgress]] = Dynamic([])

    def ensure_cache_dir(self) -> Path:
        """Create the cache directory if needed and return it."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        return self.cache_dir

    def download(self) -> None:
        """Fetch and unpack the disc cover archive."""
        self.download_url(DISCS_URL, "discs")

    def download_url(self, download_url: str, name: str) -> None:
        """Fetch a zip archive, save it as ``<name>.zip`` and unpack it into the cache."""
        log.info("Requesting %s", download_url)
        with self.session.get(download_url, stream=True) as response:
            if not response.ok:
                raise DownloadError("Failed to download covers")
            progress = self._start_progress(name, response.headers.get("Content-Length"))
            zip_path = self.ensure_cache_dir() / f"{name}.zip"
            consumed = 0
            with zip_path.open("wb") as out:
                for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                    if not chunk:
                        continue
                    out.write(chunk)
                    if progress is not None:
                        entry, size = progress
                        consumed += len(chunk)
                        entry.percent.set(consumed / size)
        self._extract(zip_path)

    def _start_progress(self, name: str, length: Optional[str]):
        if length is None:
            return None
        size = int(length)
        if size <= 0:
            return None
        entry = InProgress(name=name)
        self.downloads.map_mut(lambda downloads: downloads.append(entry))
        return entry, size

    def _extract(self, zip_path: Path) -> None:
        cache = self.ensure_cache_dir()
        root = cache.resolve()
        try:
            archive = zipfile.ZipFile(zip_path)
        except zipfile.BadZipFile as exc:
            raise DownloadError(f"Not a zip archive: {zip_path}") from exc
        with archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                target = cache / info.filename
                if root not in target.resolve().parents:
                    raise DownloadError(f"Archive entry escapes cache: {info.filename}")
                log.info("Extracting %s", target)
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(archive.read(info))

    def cover_path(self, game_id: str) -> Path:
        """Where the cover for ``game_id`` is stored once downloaded."""
        return self.cache_dir / "wii" / "disc" / "US" / f"{game_id}.png"

    def get_cover(self, game_id: str) -> Optional[bytes]:
        """Image bytes of the cached cover, or ``None`` if there is none."""
        self.ensure_cache_dir()
        try:
            return self.cover_path(game_id).read_bytes()
        except OSError:
            return None