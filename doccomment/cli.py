"""Command-line interface for doccomment.

Responsibilities:
- Expose user-facing commands for comment normalization and golden checks.
- Convert CLI arguments into `DocCommentConfig` and a `CommentNormalizer`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_case_outcome,
    echo_check_summary,
    echo_normalization_report,
    exit_with_command_error,
)
from .config import ConfigLoader, DocCommentConfig
from .errors import CommandStageError, GoldenCaseError, InvalidCommentFormat
from .golden import load_golden_suite, verify_cases
from .telemetry.logger import RunLogger
from .text.normalizer import CommentNormalizer

app = typer.Typer(
    name="doccomment",
    no_args_is_help=True,
    help="Documentation comment extraction CLI.",
)

_STDIN_MARKER = "-"


def _load_yaml_config(config_path: Path) -> DocCommentConfig:
    """Load a YAML config file and map failures to stage errors."""

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    policy: str | None,
    fallback: DocCommentConfig | None = None,
) -> DocCommentConfig:
    """Resolve effective config: `--config`, then `fallback`, then environment."""

    if config_file is not None:
        base_config = _load_yaml_config(config_file)
    elif fallback is not None:
        base_config = fallback
    else:
        try:
            base_config = ConfigLoader.from_env()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=str(exc),
                hint="Fix or unset the `DOCCOMMENT_*` environment variables.",
            ) from exc

    config = base_config.with_policy(policy)
    try:
        config.validate()
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=str(exc),
            hint="Use `--policy default` or `--policy javadoc`.",
        ) from exc
    return config


def _read_raw_comment(input_path: Path | None) -> str:
    """Read one raw comment from a file or stdin, ignoring trailing line terminators."""

    if input_path is None or str(input_path) == _STDIN_MARKER:
        raw = typer.get_text_stream("stdin").read()
    else:
        try:
            raw = input_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise CommandStageError(
                stage="read",
                detail=f"Input file not found: `{input_path}`.",
                hint="Pass an existing file or `-` to read from stdin.",
            ) from exc
    return raw.rstrip("\r\n")


@app.command("normalize")
def normalize_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(help="File holding one raw `/** ... */` comment; `-` or omitted reads stdin."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with policy settings."),
    ] = None,
    policy: Annotated[
        str | None,
        typer.Option("--policy", help="Decoration policy preset: `default` or `javadoc`."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write normalized text to this file instead of stdout."),
    ] = None,
    report: Annotated[
        bool,
        typer.Option("--report", help="Print line-level diagnostics to stderr."),
    ] = False,
) -> None:
    """Normalize one raw documentation comment."""

    run_logger = RunLogger()
    try:
        config = _resolve_command_config(config_file, policy)
        raw = _read_raw_comment(input_path)
        run_logger.log_stage_start("normalize", policy=config.policy)
        try:
            normalization = CommentNormalizer(config.resolved_policy()).normalize_with_report(raw)
        except InvalidCommentFormat as exc:
            raise CommandStageError(
                stage="normalize",
                detail=str(exc),
                hint="Input must start with `/**` and end with `*/`.",
            ) from exc
        if out is not None:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(normalization.text, encoding="utf-8")
        run_logger.log_stage_complete("normalize", lines=normalization.line_count)
    except Exception as exc:
        run_logger.log_stage_failure("normalize", type(exc).__name__)
        exit_with_command_error("normalize", exc)

    if out is None:
        typer.echo(normalization.text, nl=False)
    if report:
        echo_normalization_report(normalization)


@app.command("check")
def check_command(
    golden_file: Annotated[Path, typer.Argument(help="YAML file with golden comment cases.")],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file (overrides the golden file policy)."),
    ] = None,
    policy: Annotated[
        str | None,
        typer.Option("--policy", help="Decoration policy preset: `default` or `javadoc`."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log one debug event per case to stderr."),
    ] = False,
) -> None:
    """Verify golden cases and exit with code 1 when any case fails."""

    run_logger = RunLogger(level="DEBUG" if verbose else "INFO")
    try:
        try:
            suite = load_golden_suite(golden_file)
        except FileNotFoundError as exc:
            raise CommandStageError(
                stage="load",
                detail=f"Golden file not found: `{golden_file}`.",
            ) from exc
        config = _resolve_command_config(config_file, policy, fallback=suite.config)
        run_logger.log_stage_start("check", cases=len(suite.cases), policy=config.policy)
        report = verify_cases(suite.cases, CommentNormalizer(config.resolved_policy()))
        for outcome in report.outcomes:
            run_logger.log_stage_detail("check", case=outcome.case.name, passed=outcome.passed)
        run_logger.log_stage_complete("check", failed=len(report.failures))
    except GoldenCaseError as exc:
        run_logger.log_stage_failure("check", type(exc).__name__)
        exit_with_command_error(
            "check",
            CommandStageError(stage="load", detail=str(exc), hint="Fix the golden file and rerun."),
        )
    except Exception as exc:
        run_logger.log_stage_failure("check", type(exc).__name__)
        exit_with_command_error("check", exc)

    for outcome in report.outcomes:
        echo_case_outcome(outcome)
    echo_check_summary(report)
    if not report.passed:
        raise typer.Exit(code=1)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
