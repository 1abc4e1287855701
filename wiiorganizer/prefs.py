"""User preferences remembered between runs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from wiiorganizer.reactive import Dynamic

PREFS_FILE_NAME = "prefs.json"


@dataclass
class CachedData:
    """Preferences stored as JSON: currently the chosen WBFS folder."""

    wbfs_folder: Dynamic[Optional[Path]] = field(default_factory=lambda: Dynamic(None))
    path: Optional[Path] = None

    @staticmethod
    def file(cache_dir: Union[str, Path]) -> Path:
        """Location of the preferences file inside ``cache_dir``."""
        return Path(cache_dir) / PREFS_FILE_NAME

    @classmethod
    def load(cls, path: Union[str, Path]) -> "CachedData":
        """Read preferences from ``path``, falling back to defaults on any problem."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            folder = data["wbfs_folder"]
            if not isinstance(folder, str):
                raise TypeError("wbfs_folder must be a string")
        except (OSError, ValueError, KeyError, TypeError):
            return cls(path=path)
        return cls(wbfs_folder=Dynamic(Path(folder) if folder else None), path=path)

    def to_json(self) -> str:
        """Serialized preferences."""
        folder = self.wbfs_folder.get()
        return json.dumps({"wbfs_folder": str(folder) if folder else ""})

    def save(self) -> None:
        """Write the preferences to their file, creating its directory."""
        if self.path is None:
            raise ValueError("Invalid path")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.to_json(), encoding="utf-8")