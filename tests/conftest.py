"""Shared pytest configuration and fixtures for all tests."""

import json
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

from inlineref.api.database.Database import Database
from inlineref.api.database.DatabaseConfig import DatabaseConfig
from inlineref.api.referable.ReferableStore import ReferableStore
from inlineref.api.ref.ReferenceStore import ReferenceStore


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    config.addinivalue_line("markers", "db: tests that touch the (mongomock) database")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def unique_prefix() -> str:
    """Fresh database prefix; the shared mongomock client outlives each test."""
    return f"inlineref_test_{uuid.uuid4().hex[:12]}"


def minimal_config_dict(prefix: str | None = None) -> dict:
    """Minimal valid configuration dict backed by mongomock."""
    return {
        "database": {
            "type": "mongomock",
            "prefix": prefix or unique_prefix(),
            "data": {},
        },
        "log": {"level": "DEBUG"},
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@dataclass
class Article:
    """Stand-in for a content entity owning rich-text fields."""

    id: Any
    body: Any = None
    intro: Any = None


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def db_config() -> DatabaseConfig:
    return DatabaseConfig.model_validate(minimal_config_dict()["database"])


@pytest.fixture
def store(db_config: DatabaseConfig):
    """ReferenceStore over fresh refs/referables collections."""
    with Database(db_config, "refs") as refs_db, Database(db_config, "referables") as referables_db:
        yield ReferenceStore(refs_db, ReferableStore(referables_db))


@pytest.fixture
def inlineref_home(tmp_path: Path, monkeypatch) -> Path:
    """Set INLINEREF_HOME to a directory holding a minimal config file."""
    monkeypatch.setenv("INLINEREF_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict()))
    return tmp_path
