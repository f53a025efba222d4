"""
Pytest configuration and shared fixtures.
"""
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock
from uuid import UUID, uuid4

import pytest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from banking.application.ports.account_repository import IAccountRepository  # noqa: E402
from banking.application.ports.clock import IClock  # noqa: E402


@pytest.fixture
def account_id() -> UUID:
    """Identifier of the account under test."""
    return uuid4()


@pytest.fixture
def transaction_time() -> datetime:
    """Moment returned by the clock stub."""
    return datetime(2022, 1, 12, 10, 30)


@pytest.fixture
def clock_stub(transaction_time) -> MagicMock:
    """Clock that always answers transaction_time."""
    clock = MagicMock(spec=IClock)
    clock.now.return_value = transaction_time
    return clock


@pytest.fixture
def repository_stub() -> MagicMock:
    """Account repository with no accounts unless a test says otherwise."""
    repository = MagicMock(spec=IAccountRepository)
    repository.find.return_value = None
    return repository
