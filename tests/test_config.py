"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from root_simplifier.deep_merge import deep_merge
from root_simplifier.load_config import load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    base = {"arr": [1, 2]}
    update = {"arr": [3, 4]}
    merged = deep_merge(base, update)
    assert merged == {"arr": [3, 4]}


def test_deep_merge_path_lists_additive() -> None:
    """Verify that namespace path lists are merged additively."""
    base = {"namespace": {"path_elements": ["src", "java"], "path_prefixes": []}}
    update = {
        "namespace": {"path_elements": ["java", "kotlin"], "path_prefixes": ["x/"]}
    }
    merged = deep_merge(base, update)
    assert merged["namespace"]["path_elements"] == ["java", "kotlin", "src"]
    assert merged["namespace"]["path_prefixes"] == ["x/"]


def test_deep_merge_leaves_base_untouched() -> None:
    """Verify that merging does not modify the base dictionary."""
    base = {"nested": {"x": 1}}
    deep_merge(base, {"nested": {"x": 2}})
    assert base == {"nested": {"x": 1}}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["namespace"]["resolver"] == "prefix"
    assert "src" in config["namespace"]["path_elements"]


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == load_config(None)


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "namespace": {"resolver": "parsing", "path_elements": ["kotlin"]},
    }

    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["namespace"]["resolver"] == "parsing"
    assert "src" in loaded["namespace"]["path_elements"]  # Default
    assert "kotlin" in loaded["namespace"]["path_elements"]  # Added
