from enum import Enum

from fixture_data.entries import EntryPredicate, RawEntry


def is_file(entry: RawEntry) -> bool:
    return entry.is_file()


def is_dir(entry: RawEntry) -> bool:
    return entry.is_dir()


def any_entry(entry: RawEntry) -> bool:
    return True


def has_extension(*extensions: str) -> EntryPredicate:
    """Predicate accepting regular files whose name ends with one of ``extensions``."""
    suffixes = tuple(
        ext if ext.startswith(".") else f".{ext}" for ext in extensions if ext
    )

    def predicate(entry: RawEntry) -> bool:
        return entry.is_file() and entry.name.endswith(suffixes)

    return predicate


class EntryFilter(str, Enum):
    FILES = "files"
    DIRECTORIES = "directories"
    ALL = "all"

    @property
    def predicate(self) -> EntryPredicate:
        match self:
            case EntryFilter.FILES:
                return is_file
            case EntryFilter.DIRECTORIES:
                return is_dir
            case EntryFilter.ALL:
                return any_entry
