import asyncio

import typer
from rich.console import Console
from rich.table import Table

from fixture_data.api import DataTestApi
from fixture_data.errors import (
    FixtureDataError,
    FixtureNotExistsError,
    FixtureNotFoundError,
)
from fixture_data.file_entry import FileEntry
from fixture_data.filters import EntryFilter, has_extension
from fixture_data.utils.logging import configure_logging
from fixture_data.utils.typer import run_typer_app_as_main

ROOT_ENVVAR = "FIXTURE_DATA_ROOT"

console = Console()

app = typer.Typer(help="Inspect fixture data directories.")


def main() -> None:
    run_typer_app_as_main(app, prog_name="fixture-data")


def _files_table(files: list[FileEntry]) -> Table:
    table = Table("Relative path", "Name", "Extension")
    for file in files:
        table.add_row(file.relative_path, file.name, file.extension)
    return table


@app.command("ls")
def list_files(
    root: str = typer.Option(
        ".",
        "--root",
        "-r",
        envvar=ROOT_ENVVAR,
        show_default=True,
        help="Fixture root directory.",
        metavar="DIR",
    ),
    entry_filter: EntryFilter | None = typer.Option(
        None,
        "--filter",
        "-f",
        help="Which kind of entries to list. Defaults to files. Cannot be combined with --extension.",
    ),
    extension: list[str] = typer.Option(
        [],
        "--extension",
        "-e",
        help="Only list files with this extension (Can be specified multiple times)",
        metavar="EXT",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print one JSON object per entry."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """List the entries below a fixture root, sorted by relative path."""
    configure_logging(verbose)
    if extension and entry_filter is not None:
        raise typer.BadParameter(
            "--filter cannot be combined with --extension, which only lists files.",
            param_hint="--filter",
        )
    predicate = has_extension(*extension) if extension else entry_filter
    api = DataTestApi(root, predicate)

    try:
        files = asyncio.run(api.files())
    except FileNotFoundError:
        typer.echo(f"Fixture root does not exist: {root}", err=True)
        raise typer.Exit(code=1)
    files.sort(key=lambda file: file.relative_path)

    if as_json:
        for file in files:
            typer.echo(file.model_dump_json())
    else:
        console.print(_files_table(files))


@app.command("cat")
def cat_file(
    root: str = typer.Option(
        ".",
        "--root",
        "-r",
        envvar=ROOT_ENVVAR,
        show_default=True,
        help="Fixture root directory.",
        metavar="DIR",
    ),
    path: str = typer.Argument(
        ..., help="Path of the file, relative to the root.", metavar="PATH"
    ),
    by_name: bool = typer.Option(
        False,
        "--name",
        "-n",
        help="Treat PATH as a bare file name and search for it below the root.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Print the content of a fixture file."""
    configure_logging(verbose)
    api = DataTestApi(root)

    try:
        if by_name:
            file = asyncio.run(api.require_named_file(path))
        else:
            file = asyncio.run(api.require_file(path))
    except (FixtureNotFoundError, FixtureNotExistsError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    except FixtureDataError as e:
        raise typer.BadParameter(str(e), param_hint="PATH")

    typer.echo(asyncio.run(file.read_bytes()), nl=False)


if __name__ == "__main__":
    main()
