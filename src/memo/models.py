"""Defines memo details, name rules, and the errors raised by memo operations."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
import os


SEPARATOR_WIDTH = 40


class MemoError(Exception):
    """Base class for problems with a particular memo that should be reported to the user."""
    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.message = message
        self.name = name


class InvalidNameError(MemoError, ValueError):
    """Raised when a memo name cannot be mapped to a file inside the memo directory."""
    def __init__(self, name: str):
        super().__init__(f"Invalid memo name: '{name}'", name)


class MemoNotFoundError(MemoError, FileNotFoundError):
    def __init__(self, name: str):
        super().__init__(f"Memo '{name}' does not exist.", name)


class MemoExistsError(MemoError, FileExistsError):
    def __init__(self, name: str):
        super().__init__(f"Memo '{name}' already exists.", name)


def validate_name(name: str) -> str:
    """Returns the name unchanged, or raises :exc:`InvalidNameError`.

    Names are used verbatim as filename stems, so anything that would let the path escape the memo
    directory is rejected: empty names, ``.`` and ``..``, path separators, and NUL characters.
    Line breaks are rejected too, since listings and the selector take one name per line.
    """
    if not name or name in ('.', '..'):
        raise InvalidNameError(name)
    for bad in {'/', os.sep, os.altsep, '\0', '\n', '\r'}:
        if bad and bad in name:
            raise InvalidNameError(name)
    return name


def separator(name: str, width: int = SEPARATOR_WIDTH) -> str:
    """Returns the line of ``~`` that pads a memo's name out to the header width."""
    return '~' * max(0, width - len(name))


@dataclass
class MemoInfo:
    """Filesystem details about a single memo."""

    name: str
    path: str
    size: int
    """Size of the memo file in bytes."""

    modified: datetime

    @classmethod
    def for_path(cls, path: str) -> MemoInfo:
        stat = os.stat(path)
        name = os.path.splitext(os.path.basename(path))[0]
        return cls(name=name, path=path, size=stat.st_size, modified=datetime.fromtimestamp(stat.st_mtime))

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'name': self.name,
            'path': self.path,
            'size': self.size,
            'modified': self.modified.isoformat()
        }
