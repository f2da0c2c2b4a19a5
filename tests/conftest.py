"""Shared pytest fixtures for selectorctl tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from selectorctl.config.settings import SelectorSettings
from selectorctl.services.selector import SelectorService
from selectorctl.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no config env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SELECTORCTL_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def settings(isolated_cwd: Path) -> SelectorSettings:
    return SelectorSettings.from_cli(start=isolated_cwd)


@pytest.fixture
def service(settings: SelectorSettings) -> SelectorService:
    return SelectorService(settings)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Iterator[None]:
    """The CLI enables telemetry for -v; keep it from leaking across tests."""
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo handler/level changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("selectorctl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
