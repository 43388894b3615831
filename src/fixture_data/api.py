from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import AsyncIterator, Iterator

from fixture_data.entries import EntryPredicate, RawEntry, list_directory, scan_tree
from fixture_data.errors import FixtureNotExistsError, FixtureNotFoundError
from fixture_data.file_entry import FileEntry, entries_to_files, entry_to_file
from fixture_data.filters import EntryFilter, is_file
from fixture_data.paths import ensure_name, join_root

logger = logging.getLogger(__name__)


class DataTestApi:
    """Locate and read fixture files below a root directory.

    The recursive listing of the root is read once, on first use, and reused
    for the lifetime of the instance. It is never refreshed.

    Usage:
        api = DataTestApi("tests/data")
        data = await api.get_data("c/d.txt")
        async for file in api:
            ...
    """

    def __init__(
        self, root: str, predicate: EntryPredicate | EntryFilter | None = None
    ) -> None:
        """Create a fixture API.

        :param root: Root directory, relative or absolute.
        :param predicate: Decides which entries the listing methods return.
            Defaults to regular files only. A custom predicate replaces the
            default entirely, so it must check ``entry.is_file()`` itself if
            it only wants files.
        """
        self._root = root
        if isinstance(predicate, EntryFilter):
            predicate = predicate.predicate
        self._predicate: EntryPredicate = predicate or is_file
        self._raw_entries: tuple[RawEntry, ...] | None = None
        self._scan: asyncio.Future[list[RawEntry]] | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._root!r})"

    @property
    def root(self) -> str:
        return self._root

    def get_path(self, relative_path: str) -> str:
        """Join ``relative_path`` onto the root.

        :raises AbsolutePathError: If ``relative_path`` is absolute.
        """
        return join_root(self._root, relative_path)

    async def raw_entries(self) -> tuple[RawEntry, ...]:
        """Return the recursive listing of the root, scanning it on first call.

        Concurrent first callers share a single scan. A failed scan is not
        cached.
        """
        if self._raw_entries is not None:
            return self._raw_entries

        scan = self._scan
        if scan is None or scan.get_loop() is not asyncio.get_running_loop():
            logger.debug("Scanning fixture directory %s", self._root)
            scan = asyncio.create_task(asyncio.to_thread(scan_tree, self._root))
            self._scan = scan

        try:
            entries = await asyncio.shield(scan)
        except Exception:
            if self._scan is scan:
                self._scan = None
            raise

        if self._raw_entries is None:
            self._raw_entries = tuple(entries)
            self._scan = None
            logger.debug(
                "Found %d entries in fixture directory %s",
                len(self._raw_entries),
                self._root,
            )
        return self._raw_entries

    async def aiter_files(self) -> AsyncIterator[FileEntry]:
        """Yield the entries below the root that match the predicate (recursive)."""
        entries = await self.raw_entries()
        for file in entries_to_files(entries, self._root, self._predicate):
            yield file

    def __aiter__(self) -> AsyncIterator[FileEntry]:
        return self.aiter_files()

    async def iter_files(self) -> Iterator[FileEntry]:
        """Return an iterator over the entries below the root that match the predicate."""
        entries = await self.raw_entries()
        return entries_to_files(entries, self._root, self._predicate)

    async def files(self) -> list[FileEntry]:
        return [file async for file in self.aiter_files()]

    async def get_file(self, relative_path: str) -> FileEntry | None:
        """Get a file by its path relative to the root.

        The predicate is not applied. Only the file's own directory is read,
        not the cached recursive listing.

        :returns: The file, or None if there is no regular file at that path.
        :raises AbsolutePathError: If ``relative_path`` is absolute.
        :raises FileNotFoundError: If the root directory does not exist.
        """
        path = self.get_path(relative_path)
        directory, name = os.path.dirname(path) or os.curdir, os.path.basename(path)
        try:
            entries = await asyncio.to_thread(list_directory, directory)
        except (FileNotFoundError, NotADirectoryError):
            # A missing root is an I/O failure, a missing subdirectory is a miss
            if not os.path.isdir(self._root):
                raise
            return None

        entry = next((e for e in entries if e.is_file() and e.name == name), None)
        if entry is None:
            return None
        return entry_to_file(entry, self._root)

    async def find_file(self, name: str) -> FileEntry | None:
        """Find a file by name anywhere below the root.

        The predicate is not applied. The first match in listing order wins.

        :returns: The file, or None if no regular file has that name.
        :raises InvalidNameError: If ``name`` contains a path separator.
        """
        ensure_name(name)
        entries = await self.raw_entries()

        entry = next((e for e in entries if e.is_file() and e.name == name), None)
        if entry is None:
            return None
        return entry_to_file(entry, self._root)

    async def get_data(self, relative_path: str) -> bytes | None:
        file = await self.get_file(relative_path)
        if file is None:
            return None
        return await file.read_bytes()

    async def find_data(self, name: str) -> bytes | None:
        file = await self.find_file(name)
        if file is None:
            return None
        return await file.read_bytes()

    async def require_file(self, relative_path: str) -> FileEntry:
        """Like :meth:`get_file`, but raise FixtureNotExistsError instead of returning None."""
        file = await self.get_file(relative_path)
        if file is None:
            raise FixtureNotExistsError(relative_path, self._root)
        return file

    async def require_named_file(self, name: str) -> FileEntry:
        """Like :meth:`find_file`, but raise FixtureNotFoundError instead of returning None."""
        file = await self.find_file(name)
        if file is None:
            raise FixtureNotFoundError(name, self._root)
        return file


def init(
    root: str, predicate: EntryPredicate | EntryFilter | None = None
) -> DataTestApi:
    """Shortcut for ``DataTestApi(root, predicate)``."""
    return DataTestApi(root, predicate)
