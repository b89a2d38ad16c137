"""Version CLI command."""

import typer

from .shared import app


@app.command()
def version() -> None:
    """Show the installed dnscewl version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("dnscewl")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    typer.echo(f"dnscewl {current_version}")
