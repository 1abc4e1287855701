"""Application state and the background loop that reacts to user actions."""

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from wiiorganizer.covers import WiiResources
from wiiorganizer.disc import read_game_id
from wiiorganizer.game import Game, parse_game_dir_name
from wiiorganizer.prefs import CachedData
from wiiorganizer.reactive import Dynamic, Outbox, connect_const

log = logging.getLogger(__name__)

DEFAULT_TITLE = "Wii Manager"


class Message:
    """A request for the background worker."""


@dataclass(frozen=True)
class WbfsDirChange(Message):
    """The WBFS folder changed: rescan it and save the preferences."""


@dataclass(frozen=True)
class AddWbfs(Message):
    """Add a single WBFS image to the game list."""

    path: Path


def window_title_for(path: Optional[Union[str, Path]]) -> Optional[str]:
    """Window title showing ``path``, or ``None`` when no folder is set."""
    if not path or not str(path):
        return None
    return f"{DEFAULT_TITLE}: {path}"


class AppData:
    """Shared state: the game list, the WBFS folder and cover resources."""

    def __init__(
        self,
        resources: WiiResources,
        cached: CachedData,
        outbox: Outbox,
        window_title: Optional[Dynamic[str]] = None,
    ) -> None:
        self.resources = resources
        self.cached = cached
        self.outbox = outbox
        self.window_title: Dynamic[str] = (
            window_title if window_title is not None else Dynamic(DEFAULT_TITLE)
        )
        self.gamelist: Dynamic[List[Game]] = Dynamic([])
        self.wbfs_folder: Dynamic[Optional[Path]] = cached.wbfs_folder
        self.wbfs_folder.for_each(self._update_title)
        connect_const(self.wbfs_folder, outbox, WbfsDirChange())

    def _update_title(self, path: Optional[Path]) -> None:
        title = window_title_for(path)
        if title is not None:
            self.window_title.set(title)

    def add_wbfs(self, path: Union[str, Path]) -> Game:
        """Read a disc image and append it to the game list."""
        path = Path(path)
        game_id = read_game_id(path)
        game = Game(path.stem, game_id, self.resources.get_cover(game_id))
        self.gamelist.map_mut(lambda games: games.append(game))
        return game

    def on_wbfs_dir_change(self) -> None:
        """Rebuild the game list from the ``Title [ID]`` folders in the WBFS folder."""
        folder = self.wbfs_folder.get()
        if folder is None:
            raise FileNotFoundError("no WBFS folder selected")
        games = []
        for entry in sorted(Path(folder).iterdir()):
            if not entry.is_dir():
                continue
            parsed = parse_game_dir_name(entry.name)
            if parsed is None:
                continue
            name, game_id = parsed
            games.append(Game(name, game_id, self.resources.get_cover(game_id)))
        self.gamelist.set(games)

    def handle(self, message: Message) -> None:
        """Carry out one message."""
        if isinstance(message, WbfsDirChange):
            self.on_wbfs_dir_change()
            self.cached.save()
        elif isinstance(message, AddWbfs):
            self.add_wbfs(message.path)
        else:
            raise TypeError(f"unknown message: {message!r}")


def run_updates(inbox: "queue.Queue[Optional[Message]]", cached: CachedData, data: AppData) -> None:
    """Handle messages from ``inbox`` until ``None`` arrives, logging failures."""
    if data.cached is not cached:
        data.cached = cached
    while True:
        message = inbox.get()
        if message is None:
            break
        try:
            data.handle(message)
        except Exception:
            log.exception("Update error")