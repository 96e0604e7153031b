"""Shared pytest fixtures for personval tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the personval logger after each test.

    Every CLI invocation calls ``configure_logging``, which installs a
    handler bound to the runner's (soon closed) stderr.
    """
    pv = logging.getLogger("personval")
    handlers, level, propagate = pv.handlers[:], pv.level, pv.propagate
    yield
    pv.handlers = handlers
    pv.setLevel(level)
    pv.propagate = propagate


@pytest.fixture
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear ``PERSONVAL_*`` overrides and run in an empty temp directory.

    Use via ``@pytest.mark.usefixtures("_isolated_env")``.
    """
    for var in (
        "PERSONVAL_JSON_OUTPUT",
        "PERSONVAL_QUIET",
        "PERSONVAL_VERBOSE",
        "PERSONVAL_LOG_JSON",
        "PERSONVAL_OUTPUT__COLOR",
        "PERSONVAL_OUTPUT__WIDTH",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
