"""Menu option sets shown in drop-down menus."""

from __future__ import annotations

import enum
from typing import Tuple, Type, TypeVar

E = TypeVar("E", bound=enum.Enum)


class FileOptions(enum.Enum):
    """Entries of the File menu."""

    OPEN = "Open"

    def label(self) -> str:
        """Text shown for this entry."""
        return self.value


def enumerate_options(options: Type[E]) -> Tuple[E, ...]:
    """Return every entry of an option set, in declaration order."""
    return tuple(options)