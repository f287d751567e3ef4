"""Pytest configuration and shared fixtures for SnipDeck tests."""

import logging
import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

SAMPLE_OUTLINE = """\
#+title: Snippets

* Prog
** Hello
World
** main: guard block :py:m:
if __name__ == "__main__":
    main()
** Sub tree :indent_nil:
\\*child
** ping :func:
** Empty
* Text
** Hello
Bonjour
** sig: signature :s:
Regards
"""


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Saves current environment and restores after test.

    Yields:
        Dictionary of original environment variables
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def sample_outline() -> str:
    """Outline text with two categories, ``Prog`` and ``Text``."""
    return SAMPLE_OUTLINE


@pytest.fixture
def snippet_file(temp_dir: Path, sample_outline: str) -> Path:
    """Write the sample outline to ``snippets.org`` in a temp directory."""
    path = temp_dir / "snippets.org"
    path.write_text(sample_outline, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_snipdeck_logger() -> Generator[None]:
    """Undo ``setup_logging`` so CLI tests do not leak handlers."""
    yield
    root = logging.getLogger("snipdeck")
    for handler in list(root.handlers):
        if getattr(handler, "_snipdeck_handler", False):
            root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True


def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
