"""Pytest configuration and fixtures."""

import subprocess
import pytest
from unittest.mock import Mock

from cute.core.lazy_storage import LazyStorage
from cute.core.session import Session
from cute.providers import SqliteStorage


RAW_RESPONSE = (
    "HTTP/1.1 200 OK\r\n"
    "Content-Type: text/plain\r\n"
    "Content-Length: 5\r\n"
    "\r\n"
    "hello"
)


def completed(stdout: str = "", stderr: str = "", returncode: int = 0) -> subprocess.CompletedProcess:
    """Build a finished process result."""
    return subprocess.CompletedProcess([], returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def raw_response():
    """A raw response as printed by curl -i."""
    return RAW_RESPONSE


@pytest.fixture
def runner():
    """A subprocess runner that succeeds with RAW_RESPONSE."""
    return Mock(return_value=completed(stdout=RAW_RESPONSE))


@pytest.fixture
def storage(tmp_path):
    """SQLite storage in a temporary directory."""
    return SqliteStorage(tmp_path / "data" / "cute.db")


@pytest.fixture
def session(storage):
    """A fresh session at the home screen."""
    return Session(LazyStorage(storage))
