"""Golden-case verification of normalized documentation comments.

Responsibilities:
- Load raw comments paired with their expected documentation text from YAML.
- Normalize every case and report mismatches without stopping at the first one.

Golden file layout::

    policy:            # optional, same keys as the YAML config
      policy: javadoc
    cases:
      - name: quux
        raw: "/**   Totality */"
        expected: "Totality "
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from .config import ConfigLoader, DocCommentConfig
from .errors import GoldenCaseError, InvalidCommentFormat
from .models.datatypes import CaseOutcome, GoldenCase, GoldenReport
from .text.normalizer import CommentNormalizer


@dataclass(frozen=True, slots=True)
class GoldenSuite:
    """Golden cases plus the optional policy configuration declared with them."""

    cases: tuple[GoldenCase, ...]
    config: DocCommentConfig | None = None


def load_golden_suite(path: Path) -> GoldenSuite:
    """Load a golden-case YAML file.

    Raises:
        GoldenCaseError: If the file is malformed or declares no cases.
    """

    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise GoldenCaseError(f"Golden file `{path}` is not valid YAML: {exc}") from exc

    if not isinstance(payload, Mapping):
        raise GoldenCaseError(f"Golden file `{path}` must contain a top-level mapping.")

    unknown = sorted(set(payload).difference({"policy", "cases"}))
    if unknown:
        raise GoldenCaseError(
            f"Golden file `{path}` includes unsupported key(s): {', '.join(unknown)}."
        )

    config = None
    raw_policy = payload.get("policy")
    if raw_policy is not None:
        if not isinstance(raw_policy, Mapping):
            raise GoldenCaseError(f"Golden file `{path}` field `policy` must be a mapping.")
        try:
            config = ConfigLoader.from_mapping(raw_policy, source_label=f"Golden file `{path}`")
        except ValueError as exc:
            raise GoldenCaseError(str(exc)) from exc

    cases = _parse_cases(payload.get("cases"), path)
    return GoldenSuite(cases=cases, config=config)


def _parse_cases(raw_cases: Any, path: Path) -> tuple[GoldenCase, ...]:
    if raw_cases is None:
        raw_cases = []
    if not isinstance(raw_cases, list):
        raise GoldenCaseError(f"Golden file `{path}` field `cases` must be a list.")

    cases: list[GoldenCase] = []
    seen_names: set[str] = set()
    for position, entry in enumerate(raw_cases, start=1):
        if not isinstance(entry, Mapping):
            raise GoldenCaseError(f"Golden file `{path}` case #{position} must be a mapping.")
        name = str(entry.get("name") or f"case-{position}")
        if name in seen_names:
            raise GoldenCaseError(f"Golden file `{path}` repeats case name `{name}`.")
        seen_names.add(name)
        for field_name in ("raw", "expected"):
            if not isinstance(entry.get(field_name), str):
                raise GoldenCaseError(
                    f"Golden file `{path}` case `{name}` requires string field `{field_name}`."
                )
        cases.append(GoldenCase(name=name, raw=entry["raw"], expected=entry["expected"]))
    return tuple(cases)


def verify_cases(cases: Iterable[GoldenCase], normalizer: CommentNormalizer) -> GoldenReport:
    """Normalize every case and compare against its expected text.

    Raises:
        GoldenCaseError: If no cases were given.
    """

    outcomes: list[CaseOutcome] = []
    for case in cases:
        try:
            actual = normalizer.normalize(case.raw)
        except InvalidCommentFormat as exc:
            outcomes.append(CaseOutcome(case=case, actual=None, error=str(exc)))
            continue
        outcomes.append(CaseOutcome(case=case, actual=actual))

    if not outcomes:
        raise GoldenCaseError("No golden cases found.")
    return GoldenReport(outcomes=tuple(outcomes))
