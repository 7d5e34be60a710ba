"""
Root conftest to ensure proper import paths.

This file exists at the project root so the project directory is on
sys.path before pytest starts collecting tests, and to share fixtures
between the client tests (tests/) and the capability tests
(memes_capability/tests/).
"""

import sys
from pathlib import Path
from typing import List, Tuple
from unittest.mock import MagicMock

import pytest

# Ensure project root is in Python path
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tests.fixtures.backend import FakeMemeBackend  # noqa: E402
from memes_capability.host import NotifierSeverity  # noqa: E402


# ============================================================================
# Shared Test Fixtures
# ============================================================================

@pytest.fixture
def mock_logger():
    """Create a mock structlog-style logger.

    The logger supports:
    - bind(**kwargs) -> logger (returns itself with context)
    - debug/info/warning/error/critical methods
    """
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def meme_backend():
    """Fake meme-generator-rs backend served through httpx.MockTransport."""
    return FakeMemeBackend()


class RecordingNotifier:
    """Notifier that keeps every update for assertions."""

    def __init__(self):
        self.updates: List[Tuple[NotifierSeverity, str]] = []
        self.disposed = False

    def update(self, severity: NotifierSeverity, content: str) -> None:
        self.updates.append((severity, content))

    def dispose(self) -> None:
        self.disposed = True

    @property
    def last(self) -> Tuple[NotifierSeverity, str]:
        return self.updates[-1]

    @property
    def severities(self) -> List[NotifierSeverity]:
        return [s for s, _ in self.updates]


@pytest.fixture
def notifier():
    return RecordingNotifier()
