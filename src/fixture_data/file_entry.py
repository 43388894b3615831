from __future__ import annotations

import asyncio
import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict

from fixture_data.entries import EntryPredicate, RawEntry
from fixture_data.paths import relative_to_root


class FileEntry(BaseModel):
    """A fixture file found under a DataTestApi root.

    Content is never cached: every accessor call goes back to the filesystem
    using ``path``.
    """

    model_config = ConfigDict(frozen=True)

    # File name with extension, e.g. "d.txt"
    name: str
    # File name without extension, e.g. "d"
    basename: str
    # Extension with its leading dot, e.g. ".txt", or ""
    extension: str
    # Root joined with relative_path, e.g. "data/c/d.txt"
    path: str
    # Path relative to the root, e.g. "c/d.txt"
    relative_path: str

    def open_stream(self) -> BinaryIO:
        """Open the file for binary reading. The caller is responsible for closing it."""
        return open(self.path, "rb")

    async def read_bytes(self) -> bytes:
        return await asyncio.to_thread(Path(self.path).read_bytes)

    async def read_text(self, encoding: str = "utf-8") -> str:
        return (await self.read_bytes()).decode(encoding)


def entry_to_file(entry: RawEntry, root: str) -> FileEntry:
    path = os.path.normpath(os.path.join(entry.parent_path, entry.name))
    name = os.path.basename(path)
    basename, extension = os.path.splitext(name)
    return FileEntry(
        name=name,
        basename=basename,
        extension=extension,
        path=path,
        relative_path=relative_to_root(root, path),
    )


def entries_to_files(
    entries: Iterable[RawEntry], root: str, predicate: EntryPredicate
) -> Iterator[FileEntry]:
    """Yield a FileEntry for each raw entry accepted by ``predicate``, in input order."""
    for entry in entries:
        if not predicate(entry):
            continue
        yield entry_to_file(entry, root)
