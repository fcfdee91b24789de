"""
Pytest configuration and fixtures for price solver tests.

This module provides:
- In-memory SQLite database fixtures
- In-memory, failing and recording snapshot stores
- A deterministic epoch-millis clock
- Service fixtures
- A FastAPI test client bound to a temporary data directory
"""

from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from price_solver.main import app
from price_solver.app_context import AppContext, set_app_context
from price_solver.config.settings import reset_settings
from price_solver.repositories.sqlalchemy.database import Base
# Import ORM models to register them with Base before creating tables
from price_solver.repositories.sqlalchemy import orm_models  # noqa: F401
from price_solver.repositories.sqlalchemy import SqlAlchemySnapshotStore
from price_solver.domain.models import Asset, HistoryRecord
from price_solver.services import CalculatorService, HistoryService


# 2024-06-15 14:30:00 UTC
FIXED_NOW_MS = 1_718_461_800_000


# =============================================================================
# CLOCK HELPERS
# =============================================================================


class StepClock:
    """Clock returning FIXED_NOW_MS, then one second later on each call."""

    def __init__(self, start: int = FIXED_NOW_MS, step: int = 1000):
        self._next = start
        self._step = step

    def __call__(self) -> int:
        value = self._next
        self._next += self._step
        return value


@pytest.fixture
def fixed_now() -> int:
    """Fixed 'now' timestamp for deterministic tests."""
    return FIXED_NOW_MS


@pytest.fixture
def clock() -> StepClock:
    """Deterministic clock for history records."""
    return StepClock()


# =============================================================================
# SNAPSHOT STORES
# =============================================================================


class InMemorySnapshotStore:
    """Dict-backed snapshot store that counts writes."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []

    def read(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def write(self, key: str, text: str) -> bool:
        self.writes.append((key, text))
        self.data[key] = text
        return True


class FailingSnapshotStore:
    """Snapshot store whose reads raise and whose writes report failure."""

    def __init__(self):
        self.write_attempts = 0

    def read(self, key: str) -> Optional[str]:
        raise OSError("Storage unavailable")

    def write(self, key: str, text: str) -> bool:
        self.write_attempts += 1
        return False


class RaisingSnapshotStore:
    """Snapshot store whose writes raise (e.g. quota exceeded)."""

    def read(self, key: str) -> Optional[str]:
        return None

    def write(self, key: str, text: str) -> bool:
        raise OSError("Quota exceeded")


@pytest.fixture
def memory_store() -> InMemorySnapshotStore:
    """Provide an empty in-memory store."""
    return InMemorySnapshotStore()


@pytest.fixture
def failing_store() -> FailingSnapshotStore:
    """Provide a store that always fails."""
    return FailingSnapshotStore()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> sessionmaker:
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def sqlalchemy_store(session_factory) -> SqlAlchemySnapshotStore:
    """Provide a SQLite-backed snapshot store."""
    return SqlAlchemySnapshotStore(session_factory)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def calculator() -> CalculatorService:
    """Provide CalculatorService with the stock defaults."""
    return CalculatorService(default_precision="2", default_exchange_rate="35.00")


@pytest.fixture
def history_service(memory_store, clock) -> HistoryService:
    """Provide a loaded HistoryService over the in-memory store."""
    service = HistoryService(store=memory_store, clock=clock)
    service.load()
    return service


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


def make_record(
    index: int = 0,
    source_asset: Asset = Asset.BITCOIN,
    target_asset: Asset = Asset.GOLD,
    source_value: float = 65000.0,
    result_value: float = 1783.76,
    precision: int = 2,
    exchange_rate: float = 35.0,
) -> HistoryRecord:
    """Helper to build a HistoryRecord; ``index`` offsets the timestamp."""
    return HistoryRecord(
        timestamp=FIXED_NOW_MS + index * 1000,
        source_asset=source_asset,
        target_asset=target_asset,
        source_value=source_value,
        result_value=result_value,
        precision=precision,
        exchange_rate=exchange_rate,
    )


@pytest.fixture
def record_factory() -> Callable[..., HistoryRecord]:
    """Factory for creating test history records."""
    return make_record


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def app_context(tmp_path) -> AppContext:
    """Provide an initialized AppContext in a temporary data directory."""
    reset_settings()
    context = AppContext(data_dir=tmp_path / "data")
    context.initialize()
    yield context
    context.close()
    reset_settings()


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client backed by the temporary context."""
    set_app_context(app_context)
    with TestClient(app) as c:
        yield c
    set_app_context(None)


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def conversion_payload(
    source: str = "B",
    target: str = "G",
    value="65000",
    precision="2",
    exchange_rate="35",
) -> dict:
    """Helper to build a /convert or /history request body."""
    return {
        "source_asset": source,
        "target_asset": target,
        "value": value,
        "precision": precision,
        "exchange_rate": exchange_rate,
    }
