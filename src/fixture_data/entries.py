"""Raw directory entries and the blocking reads that produce them."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry[str]) -> EntryKind:
        # Symlinks are reported as such, never as what they point to
        if entry.is_symlink():
            return cls.SYMLINK
        if entry.is_file(follow_symlinks=False):
            return cls.FILE
        if entry.is_dir(follow_symlinks=False):
            return cls.DIRECTORY
        return cls.OTHER


@dataclass(frozen=True)
class RawEntry:
    """One entry found while reading a directory."""

    name: str
    parent_path: str
    kind: EntryKind

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry[str], parent_path: str) -> RawEntry:
        return cls(
            name=entry.name,
            parent_path=parent_path,
            kind=EntryKind.from_dir_entry(entry),
        )

    @property
    def path(self) -> str:
        return os.path.join(self.parent_path, self.name)

    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK


EntryPredicate = Callable[[RawEntry], bool]


def list_directory(directory: str) -> list[RawEntry]:
    """Read the entries of a single directory, in the order the OS reports them."""
    with os.scandir(directory) as it:
        return [RawEntry.from_dir_entry(entry, directory) for entry in it]


def scan_tree(root: str) -> list[RawEntry]:
    """Read every entry below ``root``.

    Directories are read breadth first. Symlinked directories are reported
    but not descended into. Any :class:`OSError` from reading a directory
    propagates to the caller.
    """
    entries: list[RawEntry] = []
    pending = deque([root])
    while pending:
        directory = pending.popleft()
        for entry in list_directory(directory):
            entries.append(entry)
            if entry.is_dir():
                pending.append(entry.path)
    return entries
