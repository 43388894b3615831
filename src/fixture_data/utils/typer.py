import typer


def run_typer_app_as_main(app: typer.Typer, prog_name: str | None = None) -> None:
    """Run a typer app the way a console script entry point would."""
    app(prog_name=prog_name)
