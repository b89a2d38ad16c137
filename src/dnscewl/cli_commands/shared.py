"""Shared CLI app objects and console helpers."""

import typer
from rich.console import Console
from rich.panel import Panel

app = typer.Typer(
    name="dnscewl",
    help="Generate a wordlist of potential subdomains from a list of domain names.",
    no_args_is_help=True,
)
console = Console(stderr=True)


def make_console(no_color: bool = False) -> Console:
    """Return the stderr console for a run, honouring ``--no-color``."""
    if no_color:
        return Console(stderr=True, no_color=True)
    return console


def print_header(target_console: Console) -> None:
    """Print the startup banner."""
    target_console.print(
        Panel(
            "[green]DNS wordlist generator[/green]\n"
            "[dim]Candidates are written to standard output.[/dim]",
            title="dnscewl",
            border_style="green",
        )
    )
