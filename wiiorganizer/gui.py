"""Desktop window for browsing and adding WBFS games."""

from __future__ import annotations

import argparse
import logging
import os
import queue
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import platformdirs

from wiiorganizer.appdata import AddWbfs, AppData, DEFAULT_TITLE, WbfsDirChange, run_updates
from wiiorganizer.covers import WiiResources
from wiiorganizer.game import Game
from wiiorganizer.prefs import CachedData
from wiiorganizer.reactive import Dynamic

log = logging.getLogger(__name__)

APP_NAME = "wii-organizer"
_POLL_MS = 200


def normalize_wbfs_folder(folder: Union[str, Path]) -> Path:
    """Return ``folder`` if it is a ``wbfs`` folder, else its ``wbfs`` child, created."""
    folder = Path(folder)
    if folder.name != "wbfs":
        folder = folder / "wbfs"
        folder.mkdir(parents=True, exist_ok=True)
    return folder


def is_wbfs_file(path: Union[str, Path]) -> bool:
    """Whether ``path`` has the ``.wbfs`` extension."""
    return Path(path).suffix == ".wbfs"


def filter_games(games: Iterable[Game], term: str) -> List[Game]:
    """Games whose name or id contains ``term``, ignoring case."""
    needle = term.strip().casefold()
    if not needle:
        return list(games)
    return [
        game
        for game in games
        if needle in game.name.get().casefold() or needle in game.id.get().casefold()
    ]


def _download_covers(resources: WiiResources) -> None:
    try:
        resources.download()
    except Exception:
        log.exception("Cover download failed")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game library window."""
    parser = argparse.ArgumentParser(prog="wiiorganizer", description="Organize a folder of Wii games.")
    parser.add_argument("--cache-dir", type=Path, default=None, help="where covers and preferences are kept")
    args = parser.parse_args(argv)

    import tkinter as tk
    from tkinter import filedialog

    logging.basicConfig(level=logging.INFO)
    cache_dir = args.cache_dir or Path(platformdirs.user_cache_dir(APP_NAME, appauthor=False))
    cached = CachedData.load(CachedData.file(cache_dir))
    inbox: "queue.Queue" = queue.Queue()
    inbox.put(WbfsDirChange())

    title = Dynamic(DEFAULT_TITLE)
    data = AppData(WiiResources(cache_dir), cached, inbox, title)
    worker = threading.Thread(target=run_updates, args=(inbox, cached, data), daemon=True)
    worker.start()

    root = tk.Tk()
    root.title(title.get())

    def open_folder() -> None:
        chosen = filedialog.askdirectory(title="Pick your wbfs folder", initialdir=os.getcwd())
        if chosen:
            data.wbfs_folder.set(normalize_wbfs_folder(chosen))

    def download() -> None:
        threading.Thread(target=_download_covers, args=(data.resources,), daemon=True).start()

    def add_game() -> None:
        chosen = filedialog.askopenfilename(title="Select a WBFS game", initialdir=os.getcwd())
        if not chosen:
            return
        if not is_wbfs_file(chosen):
            log.warning("Invalid file extension")
            return
        inbox.put(AddWbfs(Path(chosen)))

    menu = tk.Frame(root)
    menu.pack(fill=tk.X)
    for text, command in (
        ("Open WBFS Folder...", open_folder),
        ("Download covers", download),
        ("Add WBFS game...", add_game),
    ):
        tk.Button(menu, text=text, command=command).pack(side=tk.LEFT, padx=1)

    search_var = tk.StringVar()
    tk.Entry(root, textvariable=search_var).pack(fill=tk.X, padx=4, pady=(4, 0))
    tk.Label(root, text="Search", font=("TkDefaultFont", 8)).pack(anchor=tk.W, padx=4)

    listbox = tk.Listbox(root)
    listbox.pack(fill=tk.BOTH, expand=True, padx=4, pady=4)

    def refresh() -> None:
        root.title(title.get())
        listbox.delete(0, tk.END)
        for game in filter_games(data.gamelist.get(), search_var.get()):
            listbox.insert(tk.END, f"{game.name.get()}  [{game.id.get()}]")

    dirty = threading.Event()
    data.gamelist.on_change(dirty.set)
    title.on_change(dirty.set)
    search_var.trace_add("write", lambda *_: refresh())

    def poll() -> None:
        if dirty.is_set():
            dirty.clear()
            refresh()
        root.after(_POLL_MS, poll)

    refresh()
    root.after(_POLL_MS, poll)
    root.mainloop()
    inbox.put(None)
    return 0