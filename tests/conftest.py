"""
Shared pytest fixtures for atomring tests.

Field fixtures are function-scoped so every test gets a fresh ring; the
periodic table is cached process-wide and shared.
"""

from pathlib import Path
import sys
from typing import Callable

import pytest

# Ensure the repository root is on sys.path so `import atomring` works when
# running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from atomring.config import get_config  # noqa: E402
from atomring.field import Field  # noqa: E402
from atomring.listeners import RecordingListener  # noqa: E402
from atomring.periodic_table import default_table  # noqa: E402
from tests.helpers import field_of  # noqa: E402


@pytest.fixture
def make_field() -> Callable[..., Field]:
    """Factory fixture: make_field(1, 2, PLUS, 3)."""
    return field_of


@pytest.fixture
def recorder() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def reset_caches():
    """Clear cached config and periodic table before and after a test."""
    get_config.cache_clear()
    default_table.cache_clear()
    yield
    get_config.cache_clear()
    default_table.cache_clear()
