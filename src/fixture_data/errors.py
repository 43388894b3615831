class FixtureDataError(Exception):
    """Base class for errors raised by fixture_data."""


class AbsolutePathError(FixtureDataError, ValueError):
    """An absolute path was given where a root-relative path is required."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Expected a relative path, got absolute path: {path}")
        self.path = path


class InvalidNameError(FixtureDataError, ValueError):
    """A file name lookup was given something that is not a bare file name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Expected a bare file name without separators: {name!r}")
        self.name = name


class FixtureNotFoundError(FixtureDataError, LookupError):
    def __init__(self, name: str, root: str) -> None:
        super().__init__(f"File not found: {name} into {root}")
        self.name = name
        self.root = root


class FixtureNotExistsError(FixtureDataError, LookupError):
    def __init__(self, relative_path: str, root: str) -> None:
        super().__init__(f"File does not exist: {relative_path} into {root}")
        self.relative_path = relative_path
        self.root = root
