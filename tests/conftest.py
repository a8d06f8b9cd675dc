"""Pytest fixtures for course planner tests."""

import sys
from pathlib import Path

import pytest

# Add repo root to path so the package imports without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from course_planner.catalog import parse_catalog_text


SAMPLE_CATALOG = """\
CSCI100,Intro to CS
CSCI101,Intro to Programming,CSCI100
CSCI200,Data Structures,CSCI101,MATH201
"""


@pytest.fixture(autouse=True)
def monkeypatch_env(monkeypatch):
    """Silence logging and keep the host environment out of tests."""
    monkeypatch.setenv("ENV", "test")
    for name in (
        "CATALOG_PATH",
        "NEO4J_DB_URI",
        "NEO4J_USERNAME",
        "NEO4J_PASSWORD",
        "NEO4J_DATABASE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def sample_catalog_file(tmp_path):
    catalog_file = tmp_path / "courses.csv"
    catalog_file.write_text(SAMPLE_CATALOG, encoding="utf-8")
    return catalog_file


@pytest.fixture
def sample_catalog():
    return parse_catalog_text(SAMPLE_CATALOG).catalog


@pytest.fixture
def repo_sample_file():
    return Path(__file__).parent.parent / "data" / "sample_courses.csv"
