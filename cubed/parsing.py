"""Reading and validating ``.cub`` scene descriptions."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from cubed.linereader import LineReader
from cubed.strops import split, strtrim
from cubed.text import atoi

_WHITESPACE = " \t\n\v\f\r"
_PLAYER_CHARS = ("N", "S", "E", "W")
_CONFIG_ENTRIES = 6
_TEXTURE_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}


class ParseError(Exception):
    """Raised when a scene file is malformed.

    The message is the detail to show after an ``Error`` heading line.
    """


@dataclass
class SceneConfig:
    """Everything a scene file describes."""

    grid: list[str]
    floor_rgb: tuple[int, int, int]
    ceiling_rgb: tuple[int, int, int]
    north: str
    south: str
    west: str
    east: str
    grid_width: int
    grid_height: int
    spawn_x: int
    spawn_y: int


def is_player(char: str) -> bool:
    """True for the four player start markers N, S, E and W."""
    return char in _PLAYER_CHARS


def parse_color(text: str) -> tuple[int, int, int]:
    """Parse ``R,G,B`` with each component a decimal in 0..255.

    Whitespace around components is ignored; empty pieces between commas
    are dropped before counting.
    """
    pieces = split(text, ",")
    if len(pieces) != 3:
        raise ParseError("Invalid color format\nExpected: R,G,B (0-255)")
    values = []
    for piece in pieces:
        trimmed = strtrim(piece, _WHITESPACE)
        if not trimmed or not all("0" <= ch <= "9" for ch in trimmed):
            raise ParseError("Invalid color format\nExpected: R,G,B (0-255)")
        value = atoi(trimmed)
        if not 0 <= value <= 255:
            raise ParseError("Invalid color format\nExpected: R,G,B (0-255)")
        values.append(value)
    return values[0], values[1], values[2]


def _char_at(grid: list[str], row: int, col: int) -> str:
    """The character at (row, col), or NUL outside the row."""
    line = grid[row]
    return line[col] if 0 <= col < len(line) else "\0"


def _valid_door(grid: list[str], row: int, col: int) -> bool:
    if row == 0 or row == len(grid) - 1:
        return False
    if _char_at(grid, row, col - 1) != "1" or _char_at(grid, row, col + 1) != "1":
        return False
    if len(grid[row - 1]) < col or len(grid[row + 1]) < col:
        return False
    for neighbour in (_char_at(grid, row - 1, col), _char_at(grid, row + 1, col)):
        if neighbour != "0" and not is_player(neighbour):
            return False
    return True


def check_doors(grid: list[str]) -> int:
    """Check every door ``D`` and return how many there are.

    A door needs walls to its left and right and open floor or the player
    above and below, and may not sit on the first or last row.
    """
    doors = 0
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char != "D":
                continue
            if not _valid_door(grid, row, col):
                raise ParseError(
                    "Invalid door placement\n"
                    "Doors must have walls on sides and spaces above/below"
                )
            doors += 1
    return doors


def _touches_void(grid: list[str], row: int, col: int) -> bool:
    neighbours = (
        _char_at(grid, row - 1, col),
        _char_at(grid, row + 1, col),
        _char_at(grid, row, col + 1),
        _char_at(grid, row, col - 1),
    )
    return " " in neighbours


def validate_map(grid: list[str]) -> tuple[int, int]:
    """Check borders, enclosure, the player and doors; return the player's (col, row)."""
    if not grid:
        raise ParseError("Invalid map grid")
    if any(char not in ("1", " ") for char in grid[0]):
        raise ParseError("Invalid top border")
    height = len(grid)
    players: list[tuple[int, int]] = []
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            player = is_player(char)
            if player:
                players.append((col, row))
            if (player or char == "0") and 0 < row < height - 1:
                if _touches_void(grid, row, col):
                    raise ParseError("Map not closed")
    if len(players) != 1:
        raise ParseError("One player required")
    check_doors(grid)
    return players[0]


def _file_exists(path: str) -> bool:
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


class _Settings:
    """Configuration entries collected while reading the header."""

    def __init__(self) -> None:
        self.textures: dict[str, str] = {}
        self.floor: tuple[int, int, int] | None = None
        self.ceiling: tuple[int, int, int] | None = None

    def add_texture(self, key: str, path: str) -> None:
        direction = _TEXTURE_KEYS[key[:2]]
        if direction in self.textures:
            raise ParseError("Duplicate texture identifier")
        if not _file_exists(path):
            raise ParseError("Texture file not found")
        self.textures[direction] = path

    def add_floor(self, value: str) -> None:
        if self.floor is not None:
            raise ParseError("Duplicate floor color (F) identifier")
        try:
            self.floor = parse_color(value)
        except ParseError:
            raise ParseError(
                "Invalid floor color format\nExpected: F R,G,B (0-255)"
            ) from None

    def add_ceiling(self, value: str) -> None:
        if self.ceiling is not None:
            raise ParseError("Duplicate ceiling color (C) identifier")
        try:
            self.ceiling = parse_color(value)
        except ParseError:
            raise ParseError(
                "Invalid ceiling color format\nExpected: C R,G,B (0-255)"
            ) from None

    def add_entry(self, line: str) -> None:
        tokens = split(line, " ")
        if len(tokens) != 2:
            raise ParseError("Invalid config format")
        key, value = tokens
        if key[:2] in _TEXTURE_KEYS:
            self.add_texture(key, value)
        elif key.startswith("F"):
            self.add_floor(value)
        elif key.startswith("C"):
            self.add_ceiling(value)
        else:
            raise ParseError("Unknown identifier")


def parse_scene_lines(lines: Iterable[str]) -> SceneConfig:
    """Parse a scene from its lines, each keeping its trailing newline.

    The first six non-blank lines are the configuration entries, trimmed of
    surrounding whitespace; everything after them is the map, which may not
    contain a blank line.
    """
    settings = _Settings()
    entries = 0
    in_map = False
    content: list[str] = []
    for raw in lines:
        line = strtrim(raw, _WHITESPACE) if entries < _CONFIG_ENTRIES else raw
        if not line:
            continue
        if line.startswith("\n"):
            if in_map:
                raise ParseError("Empty line in map")
            continue
        entries += 1
        if entries <= _CONFIG_ENTRIES:
            settings.add_entry(line)
        else:
            in_map = True
            content.append(line)

    if not content:
        raise ParseError("Empty or invalid map file")
    grid = split("".join(content), "\n")
    spawn_x, spawn_y = validate_map(grid)

    assert settings.floor is not None and settings.ceiling is not None
    return SceneConfig(
        grid=grid,
        floor_rgb=settings.floor,
        ceiling_rgb=settings.ceiling,
        north=settings.textures["north"],
        south=settings.textures["south"],
        west=settings.textures["west"],
        east=settings.textures["east"],
        grid_width=max(len(line) for line in grid),
        grid_height=len(grid),
        spawn_x=spawn_x,
        spawn_y=spawn_y,
    )


def parse_scene(filepath: str | os.PathLike[str]) -> SceneConfig:
    """Read and validate the ``.cub`` file at ``filepath``."""
    path = os.fspath(filepath)
    if len(path) < 5 or not path.endswith(".cub"):
        raise ParseError("Invalid file extension\nExpected: .cub")
    try:
        stream = open(path, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError:
        raise ParseError("Cannot open file\nCheck file path and permissions") from None
    with stream:
        return parse_scene_lines(LineReader(stream))