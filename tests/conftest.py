"""Shared pytest configuration and fixtures for all tests."""

import json
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from vimania.api.config.VimaniaConfig import VimaniaConfig
from vimania.utils.logger import reset_logging


def pytest_configure(config):
    for marker in ("unit", "url", "anchor", "link", "target", "dispatch", "title", "session", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def vimania_home(tmp_path: Path, monkeypatch) -> Path:
    """Point VIMANIA_HOME at a fresh directory and drop log handlers afterwards."""
    home = tmp_path / ".vimania"
    home.mkdir()
    home = home.resolve()
    monkeypatch.setenv("VIMANIA_HOME", str(home))
    yield home
    reset_logging()


@pytest.fixture
def write_config(vimania_home: Path) -> Callable[[dict], Path]:
    """Write a config.json into the isolated home."""

    def _write(data: dict) -> Path:
        path = vimania_home / "config.json"
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def make_config() -> Callable[..., VimaniaConfig]:
    """Build a VimaniaConfig from keyword overrides."""

    def _make(**overrides) -> VimaniaConfig:
        return VimaniaConfig(**overrides)

    return _make


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[..., Path]:
    """Write lines to a document under tmp_path."""

    def _write(lines: Sequence[str], name: str = "doc.md") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


# =============================================================================
# Test Helpers
# =============================================================================


class RecordingLauncher:
    """ProcessLauncher that records launches instead of starting processes."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.calls: list[tuple[str, list[str]]] = []

    def launch(self, command: str, args: Sequence[str]) -> bool:
        self.calls.append((command, list(args)))
        return self.succeed


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture
def failing_launcher() -> RecordingLauncher:
    return RecordingLauncher(succeed=False)


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        return cmd_func(*args, **kwargs).run()

    return _run
