"""
Shared pytest fixtures for custom-cli tests.

This module provides:
- Settings/environment isolation for every test
- A helper that writes fixture files byte-for-byte
"""

import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from custom_cli.core.settings import clear_settings_cache
from custom_cli.logging import clear_context, configure_logging


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Drop ``CUSTOM_CLI_*`` variables and cached settings around each test.

    The working directory moves to ``tmp_path`` so a developer's ``.env``
    never leaks into the run. Logging is reset to WARNING on stderr.
    """
    for key in list(os.environ):
        if key.startswith("CUSTOM_CLI_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    clear_context()
    configure_logging(level="WARNING", format="console", force=True)
    yield
    clear_settings_cache()
    clear_context()


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[..., Path]:
    """
    Write a fixture file without newline translation.

        path = write_file("hello file!")
        path = write_file(b"\\xff raw", name="bin.txt")
    """

    def _write(content: str | bytes, name: str = "test.txt") -> Path:
        path = tmp_path / name
        data = content if isinstance(content, bytes) else content.encode("utf-8")
        path.write_bytes(data)
        return path

    return _write
