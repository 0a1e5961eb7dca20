"""Unit tests for deterministic phase logging."""

from __future__ import annotations

import io

from doccomment.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_sanitized_context() -> None:
    """Phase lines carry level, stage, event, and sorted shell-safe context."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("check", policy="javadoc", cases=3)
    run_logger.log_stage_complete("check", failed=0, note="two words")
    run_logger.log_stage_failure("check", "GoldenCaseError")

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=check event=start cases=3 policy=javadoc",
        "[phase] level=INFO stage=check event=complete failed=0 note=two_words",
        "[phase] level=ERROR stage=check event=failure error_type=GoldenCaseError",
    ]


def test_run_logger_filters_detail_events_below_level() -> None:
    """Debug details are only written when the sink level allows them."""

    quiet_sink = io.StringIO()
    RunLogger(sink=quiet_sink).log_stage_detail("normalize", line=2)
    assert quiet_sink.getvalue() == ""

    verbose_sink = io.StringIO()
    RunLogger(sink=verbose_sink, level="DEBUG").log_stage_detail("normalize", line=2, empty="")
    assert verbose_sink.getvalue() == (
        "[phase] level=DEBUG stage=normalize event=detail empty=none line=2\n"
    )
