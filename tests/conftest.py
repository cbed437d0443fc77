"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from recent_work.api.config.RecentWorkConfig import RecentWorkConfig
from recent_work.api.state.StateStore import StateStore

MARKERS = {
    "unit": "unit tests",
    "config": "configuration loading and saving",
    "state": "state store and link records",
    "symlink": "symlink naming and management",
    "prune": "retention pruning",
    "watch": "event debouncing and the watchdog handler",
    "tracker": "tracker lifecycle and commands",
    "cli": "command line interface",
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(root: Path) -> dict:
    """Minimal valid configuration dict rooted at ``root``.

    Short intervals keep timer-driven tests fast.
    """
    return {
        "watch": [str(root / "watched")],
        "output_dir": str(root / "RecentWork"),
        "retention": {
            "max_files": 100,
            "max_age_hours": 48,
        },
        "debounce_secs": 0.05,
        "prune_interval_secs": 60.0,
        "ignored_dirs": [],
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def watch_dir(tmp_path: Path) -> Path:
    path = tmp_path / "watched"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "RecentWork"
    path.mkdir()
    return path


@pytest.fixture
def config_dict(tmp_path: Path) -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict(tmp_path)


@pytest.fixture
def recent_work_config(config_dict: dict, watch_dir: Path, output_dir: Path) -> RecentWorkConfig:
    """RecentWorkConfig whose watch and output directories exist."""
    return RecentWorkConfig(**config_dict)


@pytest.fixture
def recent_work_home(tmp_path: Path, monkeypatch, config_dict: dict, watch_dir: Path, output_dir: Path) -> Path:
    """Set up RECENT_WORK_HOME with a minimal config file.

    Returns:
        Path to the home directory
    """
    home = tmp_path / ".recent-work"
    home.mkdir()
    monkeypatch.setenv("RECENT_WORK_HOME", str(home))
    (home / "config.json").write_text(json.dumps(config_dict), encoding="utf-8")
    return home


@pytest.fixture
def state_store(output_dir: Path) -> StateStore:
    return StateStore(output_dir / ".recent-work" / "state.json")
