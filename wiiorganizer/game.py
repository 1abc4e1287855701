"""Game entries in the library and parsing of game folder names."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from wiiorganizer.reactive import Dynamic


class Game:
    """A game in the list: its title, disc id and cover image."""

    def __init__(self, name: str, id: str, cover: Any) -> None:
        self.name: Dynamic[str] = Dynamic(str(name))
        self.id: Dynamic[str] = Dynamic(str(id))
        self.cover: Dynamic[Any] = Dynamic(cover)

    def __repr__(self) -> str:
        return f"Game(name={self.name.get()!r}, id={self.id.get()!r})"


def parse_game_dir_name(dir_name: str) -> Optional[Tuple[str, str]]:
    """Split a folder name like ``"Title [ID]"`` into ``(title, id)``.

    Returns ``None`` when the name lacks either bracket.
    """
    start = dir_name.find("[")
    if start < 0:
        return None
    end = dir_name.find("]")
    if end < 0:
        return None
    if end < start + 1:
        raise ValueError(f"malformed game folder name: {dir_name!r}")
    return dir_name[:start].strip(), dir_name[start + 1 : end]