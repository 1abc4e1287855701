"""Reading the game id from Wii and GameCube disc images."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import BinaryIO, Union

WBFS_MAGIC = b"WBFS"
WII_MAGIC = 0x5D1C9EA3
GAMECUBE_MAGIC = 0xC2339F3D

_DISC_HEADER_LEN = 0x20
_GAME_ID_LEN = 6
_MAX_SECTOR_SHIFT = 31


class DiscError(ValueError):
    """The file is not a disc image that can be read."""


def _disc_header_offset(stream: BinaryIO) -> int:
    head = stream.read(12)
    if head[:4] != WBFS_MAGIC:
        return 0
    if len(head) < 9:
        raise DiscError("truncated WBFS header")
    shift = head[8]
    if shift > _MAX_SECTOR_SHIFT:
        raise DiscError(f"invalid WBFS sector size shift: {shift}")
    # The first disc slot starts one hard-disk sector into the file,
    # beginning with a copy of the disc header.
    return 1 << shift


def read_game_id(path: Union[str, Path]) -> str:
    """Return the six-character game id of a WBFS or ISO disc image."""
    with open(path, "rb") as stream:
        offset = _disc_header_offset(stream)
        stream.seek(offset)
        header = stream.read(_DISC_HEADER_LEN)
    if len(header) < _DISC_HEADER_LEN:
        raise DiscError(f"truncated disc header in {path}")
    wii_magic, gamecube_magic = struct.unpack_from(">II", header, 0x18)
    if wii_magic != WII_MAGIC and gamecube_magic != GAMECUBE_MAGIC:
        raise DiscError(f"not a Wii or GameCube disc: {path}")
    try:
        return header[:_GAME_ID_LEN].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DiscError(f"game id is not valid text in {path}") from exc