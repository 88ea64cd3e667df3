"""Pytest configuration and fixtures for datetuple tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datetuple can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def fixed_clock():
    """A clock that always reads 2018-10-02 08:30:05."""

    def clock() -> tuple[int, int, int, int, int, int]:
        return (2018, 10, 2, 8, 30, 5)

    return clock
