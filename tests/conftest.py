"""
Global test fixtures.

• Every test runs inside its own tmp dir so Settings never picks up a
  real docwright.yaml.
• Log level is pinned via the environment so CLI output stays clean.
"""
from datetime import datetime

import pytest

from docwright.core.parsing.defaults        import SaveDefaults
from docwright.core.services.document_store import DocumentStore

FIXED_NOW = datetime(2026, 10, 19, 14, 23, 1)


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DOCWRIGHT_OUTPUT_DIR", raising=False)
    monkeypatch.setenv("DOCWRIGHT_LOG_LEVEL", "ERROR")
    yield


@pytest.fixture
def store(tmp_path) -> DocumentStore:
    return DocumentStore(tmp_path / "docs")


@pytest.fixture
def fixed_defaults() -> SaveDefaults:
    return SaveDefaults(clock=lambda: FIXED_NOW)
