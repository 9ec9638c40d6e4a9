"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from docmd.deep_merge import deep_merge
from docmd.load_config import DEFAULT_CONFIG, compute_config_hash, load_config
from docmd.skip_rules import DEFAULT_SKIP_RULES


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    merged = deep_merge({"nested": {"x": 1, "y": 2}}, {"nested": {"y": 3, "z": 4}})
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that ordinary arrays are replaced."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3, 4]}) == {"arr": [3, 4]}


def test_deep_merge_skip_lists_additive() -> None:
    """Verify that skip-rule lists are merged additively."""
    merged = deep_merge({"skip": {"ids": ["a", "b"]}}, {"skip": {"ids": ["b", "c"]}})
    assert merged["skip"]["ids"] == ["a", "b", "c"]


def test_deep_merge_does_not_mutate_base() -> None:
    """Verify the defaults survive a merge."""
    base = {"nested": {"x": 1}}
    deep_merge(base, {"nested": {"x": 2}})
    assert base == {"nested": {"x": 1}}


def test_compute_config_hash_stability() -> None:
    """Verify that the hash is stable regardless of key order."""
    config1 = {"build": {"format": "html", "fail_fast": False}, "skip": {"ids": []}}
    config2 = {"skip": {"ids": []}, "build": {"fail_fast": False, "format": "html"}}
    assert compute_config_hash(config1) == compute_config_hash(config2)


def test_compute_config_hash_ignores_output_section() -> None:
    """Verify that output paths do not invalidate a corpus."""
    other = deep_merge(DEFAULT_CONFIG, {"output": {"dir_name": "elsewhere"}})
    assert compute_config_hash(other) == compute_config_hash(DEFAULT_CONFIG)


def test_compute_config_hash_tracks_skip_rules() -> None:
    """Verify that skip rule changes produce a different hash."""
    other = deep_merge(DEFAULT_CONFIG, {"skip": {"tags": ["aside"]}})
    assert compute_config_hash(other) != compute_config_hash(DEFAULT_CONFIG)


def test_load_config_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that defaults are used when no file is present."""
    monkeypatch.chdir(tmp_path)
    config = load_config(None)
    assert config["build"]["format"] == "html"
    assert config["output"]["dir_name"] == "docmd"


def test_load_config_missing_explicit_file(tmp_path: Path) -> None:
    """Verify that a missing explicit file falls back to defaults."""
    config = load_config(str(tmp_path / "missing.yml"))
    assert config == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "docmd.yml"
    config_file.write_text(
        yaml.dump({"build": {"fail_fast": True}, "skip": {"class_substrings": ["stab"]}}),
        encoding="utf-8",
    )
    config = load_config(str(config_file))
    assert config["build"]["fail_fast"] is True
    assert config["build"]["format"] == "html"
    assert config["skip"]["class_substrings"] == ["stab"]
    assert config["output"]["metadata_file"] == "metadata.json"


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Verify that an empty file yields the defaults."""
    config_file = tmp_path / "docmd.yml"
    config_file.write_text("", encoding="utf-8")
    assert load_config(str(config_file)) == DEFAULT_CONFIG


def test_skip_config_extends_defaults(tmp_path: Path) -> None:
    """Verify that configured skip lists add to the built-in rules."""
    config_file = tmp_path / "docmd.yml"
    config_file.write_text("skip:\n  ids: [extra-panel]\n", encoding="utf-8")
    rules = DEFAULT_SKIP_RULES.extended(load_config(str(config_file))["skip"])
    assert rules.skips_id("extra-panel")
    assert rules.skips_id("implementors-list")
