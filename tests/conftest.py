"""Global test configuration for graphseg tests."""

import os
from pathlib import Path

import pytest
import structlog

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample UCD files."""
    return FIXTURES


@pytest.fixture
def property_file(fixtures_dir) -> Path:
    return fixtures_dir / "GraphemeBreakProperty-sample.txt"


@pytest.fixture
def break_test_file(fixtures_dir) -> Path:
    return fixtures_dir / "GraphemeBreakTest-sample.txt"


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop structlog configuration made by CLI callbacks between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no GRAPHSEG_* variables set."""
    for key in list(os.environ):
        if key.startswith("GRAPHSEG_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def pair_test_file(fixtures_dir) -> Path:
    return fixtures_dir / "GraphemeBreakTest-pairs-10.0.0.txt"
