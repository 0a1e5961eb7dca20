"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from doccomment.config import ConfigLoader, DocCommentConfig
from doccomment.text.decoration import DEFAULT_POLICY, JAVADOC_POLICY, DecorationPolicy


def test_config_loader_from_yaml_applies_overrides_to_preset(tmp_path: Path) -> None:
    """YAML loader should parse valid payloads and normalize typed values."""

    config_path = tmp_path / "doccomment.yml"
    config_path.write_text(
        """
policy: " javadoc "
tab_width: " 4 "
drop_blank_first_line: "no"
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.policy == "javadoc"
    assert config.tab_width == 4
    assert config.max_spaces_after_asterisk is None
    assert config.resolved_policy() == DecorationPolicy(
        max_spaces_after_asterisk=0,
        tab_width=4,
        drop_blank_first_line=False,
    )


def test_config_loader_from_empty_yaml_uses_default_policy(tmp_path: Path) -> None:
    """An empty YAML document selects the default preset unchanged."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    config = ConfigLoader.from_yaml(config_path)

    assert config == DocCommentConfig()
    assert config.resolved_policy() is DEFAULT_POLICY


def test_config_loader_rejects_unsupported_keys(tmp_path: Path) -> None:
    """Unknown keys are reported with the source label."""

    config_path = tmp_path / "extra.yml"
    config_path.write_text("policy: default\nindent: 3\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"includes unsupported key\(s\): indent"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_rejects_non_mapping_root(tmp_path: Path) -> None:
    """A YAML list is not a valid config document."""

    config_path = tmp_path / "list.yml"
    config_path.write_text("- javadoc\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(config_path)


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"policy": "doxygen"}, "Unknown decoration policy `doxygen`"),
        ({"max_spaces_after_asterisk": -1}, "must be a non-negative integer"),
        ({"tab_width": 0}, "must be a positive integer"),
        ({"tab_width": "wide"}, "must be a positive integer"),
        ({"drop_blank_first_line": "maybe"}, "must be a boolean value"),
    ],
)
def test_config_loader_rejects_invalid_values(payload: dict[str, object], message: str) -> None:
    """Invalid values raise actionable `ValueError` messages."""

    with pytest.raises(ValueError, match=message):
        ConfigLoader.from_mapping(payload, source_label="Test payload")


def test_config_loader_from_env_reads_prefixed_variables() -> None:
    """Environment loader reads `DOCCOMMENT_*` variables and ignores blanks."""

    config = ConfigLoader.from_env(
        {
            "DOCCOMMENT_POLICY": "javadoc",
            "DOCCOMMENT_MAX_SPACES_AFTER_ASTERISK": "2",
            "DOCCOMMENT_TAB_WIDTH": "  ",
            "UNRELATED": "value",
        }
    )

    assert config.policy == "javadoc"
    assert config.tab_width is None
    assert config.resolved_policy().max_spaces_after_asterisk == 2
    assert config.resolved_policy().drop_blank_first_line is True


def test_config_loader_from_env_defaults_without_variables() -> None:
    """No variables means the default preset."""

    assert ConfigLoader.from_env({}).resolved_policy() is DEFAULT_POLICY


def test_with_policy_replaces_preset_name_only() -> None:
    """CLI preset overrides keep field overrides intact."""

    config = DocCommentConfig(tab_width=8).with_policy("javadoc")

    assert config.policy == "javadoc"
    assert config.resolved_policy() == DecorationPolicy(
        max_spaces_after_asterisk=JAVADOC_POLICY.max_spaces_after_asterisk,
        tab_width=8,
        drop_blank_first_line=True,
    )
    assert DocCommentConfig().with_policy(None) == DocCommentConfig()
