from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(
    name="phoenix-check",
    help="Validate the Phoenix SharePoint theme package",
    add_completion=False,
)


@app.command()
def run(
    root: str = typer.Option(
        ".", "--root", help="Theme package directory to validate"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Append debug output to this file"
    ),
):
    """Check required files, HTML structure, brand colours and theme definitions."""
    from phoenix_check.reporter import ExitCode
    from phoenix_check.runner import ContentReadError, Runner
    from phoenix_check.verbose import setup_logger

    logger = setup_logger(
        Path(debug_log) if debug_log is not None else None,
        verbose=verbose,
    )

    runner = Runner(root=Path(root), logger=logger)

    try:
        exit_code = runner.run()
    except ContentReadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(int(ExitCode.FATAL))

    if exit_code != ExitCode.OK:
        raise typer.Exit(int(exit_code))
