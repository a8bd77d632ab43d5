"""Shared test fixtures for dirsplit test suite."""

import os
import tempfile
from pathlib import Path

import pytest

from dirsplit.core.config import DEFAULT_CONFIG
from dirsplit.workspace import LocalWorkspace


@pytest.fixture
def tmp_dir():
    """Create a temporary directory, cleaned up after test."""
    with tempfile.TemporaryDirectory(prefix="dirsplit_test_") as d:
        yield Path(d)


@pytest.fixture
def config():
    return DEFAULT_CONFIG


@pytest.fixture
def workspace(tmp_dir):
    return LocalWorkspace(tmp_dir)


@pytest.fixture
def make_files(tmp_dir):
    """Create empty files in the temp directory and return their names."""

    def _make(*names):
        for name in names:
            (tmp_dir / name).write_bytes(os.fsencode(name))
        return list(names)

    return _make
