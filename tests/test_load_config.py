"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from revved_finder.build_finder import build_finder
from revved_finder.deep_merge import deep_merge
from revved_finder.expand_glob import expand_glob
from revved_finder.filesystem_strategy import FilesystemStrategy
from revved_finder.load_config import DEFAULT_CONFIG, ConfigError, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"mapping": {"dist/a.png": "dist/1.a.png"}}
    update = {"mapping": {"dist/b.png": "dist/2.b.png"}}
    merged = deep_merge(base, update)
    assert merged == {
        "mapping": {"dist/a.png": "dist/1.a.png", "dist/b.png": "dist/2.b.png"}
    }


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    base = {"search_dirs": ["."]}
    update = {"search_dirs": ["dist", "build"]}
    merged = deep_merge(base, update)
    assert merged == {"search_dirs": ["dist", "build"]}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing file falls back to defaults."""
    config = load_config(str(tmp_path / "absent.yml"))
    assert config["search_dirs"] == ["."]


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "search_dirs": ["dist"],
        "mapping": {"dist/images/pic.png": "dist/images/2123.pic.png"},
        "log_level": "debug",
        "rewrite": {"patterns": ["url"]},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["search_dirs"] == ["dist"]
    assert loaded["mapping"] == {"dist/images/pic.png": "dist/images/2123.pic.png"}
    assert loaded["log_level"] == "DEBUG"
    assert loaded["rewrite"]["patterns"] == ["url"]


def test_load_config_single_search_dir(tmp_path: Path) -> None:
    """Verify a single directory string becomes a list."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("search_dirs: dist\n")
    assert load_config(str(config_file))["search_dirs"] == ["dist"]


@pytest.mark.parametrize(
    "content",
    [
        "search_dirs: [dist\n",
        "- just\n- a list\n",
        "search_dirs: 3\n",
        "mapping: [a, b]\n",
        "log_level: LOUD\n",
        "rewrite:\n  patterns: [style]\n",
        "rewrite: null\n",
        "rewrite:\n  patterns: [[url]]\n",
    ],
)
def test_load_config_invalid(tmp_path: Path, content: str) -> None:
    """Verify unusable configuration raises ConfigError."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(content)
    with pytest.raises(ConfigError):
        load_config(str(config_file))


def test_build_finder_mode() -> None:
    """Verify a configured mapping selects mapping mode, disk otherwise."""
    finder = build_finder({"mapping": {"dist/a.png": "dist/1.a.png"}})
    assert finder.uses_mapping
    assert finder.find("a.png", "dist") == "./1.a.png"

    finder = build_finder({"mapping": {}})
    assert isinstance(finder.strategy, FilesystemStrategy)
    assert finder.strategy.expand is expand_glob
