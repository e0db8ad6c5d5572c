"""Console reporting of check results."""

from __future__ import annotations

from enum import IntEnum

import typer

from phoenix_check.assertions.base import AssertionResult

PASS_GLYPH = "✓"
FAIL_GLYPH = "✗"


class ExitCode(IntEnum):
    OK = 0
    FAILED = 1
    FATAL = 2


class Reporter:
    """Prints one glyph line per check and owns the failure count.

    Pass lines go to stdout, fail lines to stderr. Colour is applied with
    ``typer.style`` and stripped by click when the stream is not a terminal.
    """

    def __init__(self) -> None:
        self.failures = 0
        self.results: list[AssertionResult] = []

    def reset(self) -> None:
        """Start a new run: zero the failure count and drop recorded results."""
        self.failures = 0
        self.results = []

    def section(self, index: int, title: str) -> None:
        typer.echo("")
        typer.echo(f"{index}. {title}")

    def report_pass(self, message: str) -> None:
        glyph = typer.style(PASS_GLYPH, fg=typer.colors.GREEN)
        typer.echo(f"  {glyph} {message}")

    def report_fail(self, message: str) -> None:
        glyph = typer.style(FAIL_GLYPH, fg=typer.colors.RED)
        typer.echo(f"  {glyph} {message}", err=True)
        self.failures += 1

    def check(self, condition: bool, message: str) -> bool:
        if condition:
            self.report_pass(message)
        else:
            self.report_fail(message)
        return condition

    def record(self, result: AssertionResult) -> bool:
        self.results.append(result)
        return self.check(result.passed, result.message)

    def summary(self) -> None:
        typer.echo("")
        if self.failures == 0:
            typer.echo(typer.style("All checks passed.", fg=typer.colors.GREEN))
            typer.echo("")
        else:
            typer.echo(
                typer.style(f"{self.failures} check(s) failed.", fg=typer.colors.RED),
                err=True,
            )
            typer.echo("", err=True)

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode.OK if self.failures == 0 else ExitCode.FAILED
