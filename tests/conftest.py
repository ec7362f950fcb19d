"""Shared pytest fixtures for bk tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's BK_* settings out of the tests."""
    monkeypatch.delenv("BK_DESCRIPTION_WIDTH", raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging() so caplog sees records from every test."""
    yield
    bk_logger = logging.getLogger("bk")
    bk_logger.handlers.clear()
    bk_logger.setLevel(logging.NOTSET)
    bk_logger.propagate = True


@pytest.fixture
def fake_executable(tmp_path):
    """A stand-in for the installed bk executable."""
    path = tmp_path / "bin" / "bk"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755)
    return path
