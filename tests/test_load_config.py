"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from wordcase.deep_merge import deep_merge
from wordcase.load_config import DEFAULT_CONFIG, load_config


def test_user_style_overrides_default_style() -> None:
    """Verify a top-level override replaces the default and adds new keys."""
    merged = deep_merge({"default_style": "kebab"}, {"default_style": "dot", "x": 1})
    assert merged == {"default_style": "dot", "x": 1}


def test_sections_combine_key_by_key() -> None:
    """Verify keys missing from an overriding section keep their defaults."""
    defaults = {"batch": {"skip_blank_lines": True, "limit": 10}}
    merged = deep_merge(defaults, {"batch": {"skip_blank_lines": False}})
    assert merged == {"batch": {"skip_blank_lines": False, "limit": 10}}
    assert defaults["batch"]["skip_blank_lines"] is True


def test_non_mapping_override_wins() -> None:
    """Verify a list or scalar override replaces the default section outright."""
    assert deep_merge({"styles": ["camel", "dot"]}, {"styles": ["snake"]}) == {
        "styles": ["snake"]
    }
    assert deep_merge({"batch": {"a": 1}}, {"batch": None}) == {"batch": None}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config["default_style"] == "kebab"
    assert config["normalization"]["strip_diacritics"] is True


def test_load_config_does_not_share_defaults() -> None:
    """Verify that mutating a loaded config leaves the defaults intact."""
    config = load_config(None)
    config["normalization"]["strip_diacritics"] = False
    assert DEFAULT_CONFIG["normalization"]["strip_diacritics"] is True


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "wordcase.yml"
    config_data = {"default_style": "camel", "batch": {"skip_blank_lines": False}}
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["default_style"] == "camel"
    assert loaded["batch"]["skip_blank_lines"] is False
    assert loaded["normalization"]["strip_diacritics"] is True  # Default


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Verify that an empty YAML document is treated as no overrides."""
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")
    assert load_config(str(config_file)) == DEFAULT_CONFIG


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a YAML list is rejected as a config document."""
    config_file = tmp_path / "list.yml"
    config_file.write_text("- camel\n- kebab\n")
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_config(str(config_file))


@pytest.mark.parametrize(
    ("document", "message"),
    [
        ("default_style: 5\n", "default_style must be a string"),
        ("normalization: null\n", "normalization must be a mapping"),
        ("batch: [1, 2]\n", "batch must be a mapping"),
        (
            "normalization:\n  strip_diacritics: maybe\n",
            "normalization.strip_diacritics must be true or false",
        ),
    ],
)
def test_load_config_rejects_wrong_types(
    tmp_path: Path, document: str, message: str
) -> None:
    """Verify values of the wrong type are reported instead of loaded."""
    config_file = tmp_path / "wordcase.yml"
    config_file.write_text(document, encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_config(str(config_file))
