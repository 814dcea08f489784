"""Reading map files and scene description files."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
COLOR_KEYS = ("F", "C")
HEADER_COUNT = 6
START_MARK = "P"
DESCRIPTION_SUFFIX = ".cub"

_SPACES = " \t\n\v\f\r"


class MapError(Exception):
    """Raised when a map or scene description cannot be used."""


@dataclass
class GameMap:
    """A map grid with its size and the player's start cell (row, column)."""

    grid: list[str]
    width: int
    height: int
    start: tuple[int, int]


@dataclass
class SceneDescription:
    """The contents of a scene description file."""

    textures: dict[str, str] = field(default_factory=dict)
    floor: tuple[int, int, int] | None = None
    ceiling: tuple[int, int, int] | None = None
    grid: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0


def parse_int(text: str) -> int:
    """Parse an optionally signed decimal number after leading whitespace.

    Anything after the digits makes the number invalid.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = len(rest) - len(rest.lstrip("0123456789"))
    if rest[digits:]:
        raise MapError(f"invalid number: {text!r}")
    return sign * int(rest[:digits] or "0")


def split_fields(text: str, separator: str) -> list[str]:
    """Split on a separator, dropping the empty pieces between repeats."""
    return [piece for piece in text.split(separator) if piece]


def find_longest_row(rows: Sequence[str]) -> int:
    """Return the length of the longest row, or 0 for no rows."""
    return max((len(row) for row in rows), default=0)


def find_start(rows: Sequence[str]) -> tuple[int, int]:
    """Return (row, column) of the start mark; the last row holding one wins."""
    found = None
    for index, row in enumerate(rows):
        col = row.find(START_MARK)
        if col >= 0:
            found = (index, col)
    if found is None:
        raise MapError("the map has no start position")
    return found


def read_map(stream: Iterable[str]) -> GameMap:
    """Read a map from lines of text; blank lines still count towards the height."""
    lines = list(stream)
    grid = split_fields("\n" + "".join(lines), "\n")
    return GameMap(
        grid=grid,
        width=find_longest_row(grid),
        height=len(lines),
        start=find_start(grid),
    )


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read a map from a file."""
    with open(path, encoding="utf-8") as stream:
        return read_map(stream)


def check_file_name(name: str) -> bool:
    """Tell whether a name is a valid description file name ending in ``.cub``."""
    if not name or name.startswith("."):
        return False
    dot = name.find(".")
    if dot < 0:
        return False
    return name[dot:] == DESCRIPTION_SUFFIX


def _apply_header(
    fields: list[str],
    textures: dict[str, str],
    colors: dict[str, tuple[int, int, int]],
) -> bool:
    """Store one header line; return False when it is not a header."""
    if len(fields) != 2:
        return False
    ident, value = fields
    for key in TEXTURE_KEYS:
        if key.startswith(ident):
            textures[key] = value
            return True
    for key in COLOR_KEYS:
        if key.startswith(ident):
            parts = split_fields(value, ",")
            if not parts:
                return False
            if len(parts) < 3:
                raise MapError(f"colour needs three components: {value!r}")
            red, green, blue = (parse_int(part) for part in parts[:3])
            colors[key] = (red, green, blue)
            return True
    return False


def parse_description(lines: Iterable[str]) -> SceneDescription:
    """Parse the header lines and map of a scene description."""
    textures: dict[str, str] = {}
    colors: dict[str, tuple[int, int, int]] = {}
    remaining = iter(lines)
    map_lines: list[str] = []
    headers = 0
    for raw in remaining:
        fields = split_fields(raw.rstrip("\n"), " ")
        if not fields:
            continue
        if not _apply_header(fields, textures, colors):
            map_lines.append(raw)
            break
        headers += 1
    if headers < HEADER_COUNT:
        raise MapError("description file is invalid")
    map_lines.extend(remaining)
    grid = split_fields("\n" + "".join(map_lines), "\n")
    return SceneDescription(
        textures=textures,
        floor=colors.get("F"),
        ceiling=colors.get("C"),
        grid=grid,
        width=find_longest_row(grid),
        height=len(map_lines),
    )


def load_description(path: str | os.PathLike[str]) -> SceneDescription:
    """Check the file name, then read and parse a scene description file."""
    if not check_file_name(os.fspath(path)):
        raise MapError("description file is invalid")
    try:
        with open(path, encoding="utf-8") as stream:
            return parse_description(stream)
    except OSError as error:
        raise MapError("description file is invalid") from error