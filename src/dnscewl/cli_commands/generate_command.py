"""Wordlist generation CLI command."""

from pathlib import Path
from typing import Optional

import typer

from .deps import cli_module
from .shared import app, make_console, print_header


@app.command()
def generate(
    target: Optional[str] = typer.Option(None, "-t", "--target", help="Specify a single target."),
    target_list: Optional[Path] = typer.Option(
        None, "-l", "--tL", "--target-list", help="Specify a list of targets."
    ),
    set_list: Optional[Path] = typer.Option(
        None, "--sL", "--set-list", help="Specify a list of words to substitute with each other."
    ),
    exclude_list: Optional[Path] = typer.Option(
        None, "-e", "--eL", "--exclude-list", help="Specify a list of targets to exclude."
    ),
    extension_list: Optional[Path] = typer.Option(
        None,
        "--eX",
        "--domain-extension",
        help="Specify a list of domain extensions to substitute with.",
    ),
    append_list: Optional[Path] = typer.Option(
        None, "-a", "--append-list", help="Specify a file of words to append to a host."
    ),
    prepend_list: Optional[Path] = typer.Option(
        None, "-p", "--prepend-list", help="Specify a file of words to prepend to a host."
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose_flag", help="Display debug output in the terminal."
    ),
    include_original: bool = typer.Option(
        False,
        "-i",
        "--include-original",
        help="Include original domains (from source files) in set substitutions.",
    ),
    range_string: str = typer.Option(
        "", "--range", help="Set a range for integer permutations (e.g. 20, +20, -20)."
    ),
    subs: bool = typer.Option(False, "-s", "--subs", help="Only output subdomains."),
    no_color: bool = typer.Option(
        False, "--no-color", help="Strip foreground and background colours."
    ),
    limit: Optional[int] = typer.Option(None, "--limit", help="Specify a fixed word limit to output."),
    level: Optional[int] = typer.Option(
        None, "--level", min=0, max=2, help="Specify the level of results to output (0-2)."
    ),
    no_repeats: bool = typer.Option(
        False, "--no-repeats", help="Prevent repeated structures such as one.one.com."
    ),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Hide the banner and summary."),
) -> None:
    """Generate candidate subdomains for the given targets."""
    cli = cli_module()

    err_console = make_console(no_color)
    logger = cli.configure_logging(verbose, err_console)

    try:
        if not no_color and cli.get_no_color():
            err_console = make_console(True)
        logger = cli.configure_logging(verbose or cli.get_verbose(), err_console)
        if not quiet:
            print_header(err_console)

        range_spec = cli.parse_range(range_string) if range_string else cli.RangeSpec()
        config = cli.RunConfig(
            level=level if level is not None else cli.get_level(),
            range=range_spec,
            range_requested=bool(range_string),
            include_original=include_original,
            subdomains_only=subs,
            no_repeats=no_repeats,
            limit=limit,
        )
        sources = cli.load_word_sources(
            target=target,
            target_list=target_list,
            append_list=append_list,
            prepend_list=prepend_list,
            set_list=set_list,
            exclude_list=exclude_list,
            extension_list=extension_list,
            logger=logger,
        )
    except cli.ConfigurationError as exc:
        logger.error("ERROR: %s. Exiting", exc)
        err_console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1) from exc

    if limit is not None:
        logger.debug("Word limit %d recorded; output is not capped.", limit)

    sink = cli.OutputSink(
        typer.echo,
        subdomains_only=config.subdomains_only,
        no_repeats=config.no_repeats,
        logger=logger,
    )
    results = cli.generate(sources, config, sink, logger=logger)

    if not quiet:
        err_console.print(
            f"[green]Generated {len(results)} candidate(s), printed {sink.printed}.[/green]"
        )
