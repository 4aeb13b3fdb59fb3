"""Pytest configuration and fixtures for Isocalc tests."""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

# Add the parent directory to sys.path so isocalc can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger state after each test; the CLI reconfigures it."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    isocalc_logger = logging.getLogger("isocalc")
    isocalc_level = isocalc_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    isocalc_logger.setLevel(isocalc_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ISOCALC_* variables from the outer environment out of tests."""
    for name in ("NOTATION", "DASHED", "REVERSE", "VERBOSE", "LOG_JSON"):
        monkeypatch.delenv(f"ISOCALC_{name}", raising=False)
