"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_theory.constants import ScaleMode
from chuk_mcp_theory.core import Note, build_scale


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in preset library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_theory" / "presets" / "library"


@pytest.fixture
def c_major_two_octaves() -> list[Note]:
    """C major from C4 across two octaves (C4..B5)."""
    return build_scale(Note("C", "", 4), ScaleMode.IONIAN, 2)
