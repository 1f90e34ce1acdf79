# src/mazegraph/core/errors.py
"""Errors raised while turning a maze file into a search problem.

Graph containers never raise for bad node ids; only reading and parsing a
maze can fail, and the CLI handles each failure per file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Tuple, Union


class MazeError(Exception):
    """Base class for every per-maze failure."""


class MazeReadError(MazeError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read maze {self.path}: {reason}")


class MalformedCharacterError(MazeError):
    def __init__(self, row: int, col: int, char: str):
        self.row = row
        self.col = col
        self.char = char
        super().__init__(f"unexpected character {char!r} at row {row}, column {col}")


class MissingMarkerError(MazeError):
    def __init__(self, missing: Iterable[str]):
        self.missing: Tuple[str, ...] = tuple(missing)
        super().__init__("maze has no " + " and no ".join(self.missing) + " marker")
