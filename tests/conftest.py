"""Shared pytest fixtures and test helpers for grouporder tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from grouporder.config.models import GroupOrderConfig
from grouporder.services.catalog import KindCatalog
from grouporder.services.telemetry import _current_span, disable_telemetry

SAMPLE_CONFIG = """\
[kinds.Triage]
groups = ["High", "Medium", "Low"]

[kinds.Abc]
groups = ["A", "B", "C"]

[orderings.support-queue]
kind = "Triage"
order = ["medium", "high", "low"]

[orderings.bac]
kind = "Abc"
order = ["b", "a", "c"]

[sort]
field = "priority"
"""


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package_logger = logging.getLogger("grouporder")
    package_level = package_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package_logger.setLevel(package_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory holding the sample grouporder.toml."""
    monkeypatch.delenv("GROUPORDER_CONFIG", raising=False)
    (tmp_path / "grouporder.toml").write_text(SAMPLE_CONFIG, encoding="utf-8")
    return tmp_path


@pytest.fixture
def catalog(project_root: Path) -> KindCatalog:
    """Catalog loaded from the sample config."""
    return KindCatalog.load(project_root / "grouporder.toml")


@pytest.fixture
def empty_catalog() -> KindCatalog:
    return KindCatalog(GroupOrderConfig())


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)
