"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
normalization reports, and golden-case results.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CommandStageError
from .models.datatypes import CaseOutcome, CommentNormalizationReport, GoldenReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_normalization_report(report: CommentNormalizationReport) -> None:
    """Print line-level normalization diagnostics to stderr."""

    typer.echo(f"Lines: {report.line_count}", err=True)
    typer.echo(f"Retained lines: {report.retained_line_count}", err=True)
    typer.echo(f"Collapsed final line: {_yes_no(report.collapsed_final_line)}", err=True)
    typer.echo(f"Dropped first line: {_yes_no(report.dropped_first_line)}", err=True)


def echo_case_outcome(outcome: CaseOutcome) -> None:
    """Print one status row and, for failures, actual/expected details."""

    if outcome.passed:
        typer.echo(f"[check] case={outcome.case.name} status=ok")
        return

    if outcome.error is not None:
        typer.echo(f"[check] case={outcome.case.name} status=error")
        typer.echo(f"  {outcome.error}")
        return

    typer.echo(f"[check] case={outcome.case.name} status=mismatch")
    typer.echo(f"  Actual:   {outcome.actual!r}")
    typer.echo(f"  Expected: {outcome.case.expected!r}")
    if outcome.length_mismatch:
        typer.echo(
            "  Strings have different lengths "
            f"(actual={len(outcome.actual or '')}, expected={len(outcome.case.expected)})"
        )


def echo_check_summary(report: GoldenReport) -> None:
    """Print a compact pass/fail summary of a golden-case run."""

    total = len(report.outcomes)
    failed = len(report.failures)
    typer.echo(f"Cases: {total}, passed: {total - failed}, failed: {failed}")


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"
