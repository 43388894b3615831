"""Path shapes used by the fixture API.

Fixture lookups take paths relative to the API root. These helpers tell
absolute and relative paths apart and do the join / relativize steps using
the platform's own path rules. Nothing here touches the filesystem.
"""

import os
from typing import NewType

from fixture_data.errors import AbsolutePathError, InvalidNameError

AbsolutePath = NewType("AbsolutePath", str)
RelativePath = NewType("RelativePath", str)


def is_absolute(path: str) -> bool:
    return os.path.isabs(path)


def parse_path(path: str) -> AbsolutePath | RelativePath:
    """Tag a plain string as either an absolute or a relative path."""
    if is_absolute(path):
        return AbsolutePath(path)
    return RelativePath(path)


def ensure_relative(path: str) -> RelativePath:
    """Return ``path`` as a :data:`RelativePath`.

    :raises AbsolutePathError: If ``path`` is absolute.
    """
    if is_absolute(path):
        raise AbsolutePathError(path)
    return RelativePath(path)


def _separators() -> set[str]:
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return separators


def ensure_name(name: str) -> str:
    """Return ``name`` if it is a bare file name.

    :raises InvalidNameError: If ``name`` is empty or contains a path separator.
    """
    if not name or any(sep in name for sep in _separators()):
        raise InvalidNameError(name)
    return name


def join_root(root: str, sub_path: str) -> str:
    """Join a relative ``sub_path`` onto ``root`` and normalize the result."""
    return os.path.normpath(os.path.join(root, ensure_relative(sub_path)))


def relative_to_root(root: str, path: str) -> RelativePath:
    """Inverse of :func:`join_root`: the normalized path of ``path`` under ``root``."""
    return RelativePath(os.path.normpath(os.path.relpath(path, root)))
