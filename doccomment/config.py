"""Configuration models and loaders for doccomment.

Responsibilities:
- Define the decoration-policy configuration shared by library and CLI callers.
- Load and validate configuration from YAML files and environment variables.

Key public classes:
- `DocCommentConfig`: preset name plus optional per-field overrides.
- `ConfigLoader`: YAML, mapping, and environment factories.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_bounded_int, parse_permissive_boolean
from .text.decoration import DecorationPolicy, resolve_policy_preset

_DEFAULT_POLICY_NAME = "default"


@dataclass(frozen=True, slots=True)
class DocCommentConfig:
    """Decoration policy selection for comment normalization.

    Attributes:
        policy: Name of the base preset (`default` or `javadoc`).
        max_spaces_after_asterisk: Optional override of the preset value.
        tab_width: Optional override; tabs expand to this column stop.
        drop_blank_first_line: Optional override of the preset value.
    """

    policy: str = _DEFAULT_POLICY_NAME
    max_spaces_after_asterisk: int | None = None
    tab_width: int | None = None
    drop_blank_first_line: bool | None = None

    def validate(self) -> None:
        """Validate the preset name and overrides, raising `ValueError` when invalid."""

        self.resolved_policy().validate()

    def resolved_policy(self) -> DecorationPolicy:
        """Return the base preset with configured overrides applied."""

        policy = resolve_policy_preset(self.policy)
        overrides: dict[str, Any] = {}
        if self.max_spaces_after_asterisk is not None:
            overrides["max_spaces_after_asterisk"] = self.max_spaces_after_asterisk
        if self.tab_width is not None:
            overrides["tab_width"] = self.tab_width
        if self.drop_blank_first_line is not None:
            overrides["drop_blank_first_line"] = self.drop_blank_first_line
        if not overrides:
            return policy
        return replace(policy, **overrides)

    def with_policy(self, policy: str | None) -> DocCommentConfig:
        """Return a copy using `policy` as preset name when one is given."""

        if policy is None:
            return self
        return replace(self, policy=policy)


class ConfigLoader:
    """Factory methods for creating `DocCommentConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset(
        {
            "policy",
            "max_spaces_after_asterisk",
            "tab_width",
            "drop_blank_first_line",
        }
    )
    _ENV_PREFIX = "DOCCOMMENT_"

    @staticmethod
    def from_yaml(path: Path) -> DocCommentConfig:
        """Create a validated config from a YAML file."""

        payload = ConfigLoader._parse_yaml_payload(path.read_text(encoding="utf-8"), path)
        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str) -> DocCommentConfig:
        """Create a validated config from an already parsed mapping."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        try:
            config = DocCommentConfig(
                policy=normalize_optional_string(payload.get("policy")) or _DEFAULT_POLICY_NAME,
                max_spaces_after_asterisk=ConfigLoader._optional_int(
                    payload.get("max_spaces_after_asterisk"), "max_spaces_after_asterisk", 0
                ),
                tab_width=ConfigLoader._optional_int(payload.get("tab_width"), "tab_width", 1),
                drop_blank_first_line=ConfigLoader._optional_boolean(
                    payload.get("drop_blank_first_line"), "drop_blank_first_line"
                ),
            )
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> DocCommentConfig:
        """Create a validated config from `DOCCOMMENT_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload: dict[str, Any] = {}
        for key in ConfigLoader._SUPPORTED_KEYS:
            value = normalize_optional_string(env_map.get(ConfigLoader._ENV_PREFIX + key.upper()))
            if value is not None:
                payload[key] = value
        return ConfigLoader.from_mapping(payload, source_label="Environment")

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            return {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _optional_int(value: object, field_name: str, minimum: int) -> int | None:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return parse_bounded_int(value, field_name, minimum)

    @staticmethod
    def _optional_boolean(value: object, field_name: str) -> bool | None:
        if value is None:
            return None
        parsed = parse_permissive_boolean(value)
        if parsed is None:
            raise ValueError(
                f"`{field_name}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
