# tests/conftest.py
import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from propadmin.adapters.clients.http_resilience import reset_circuit
from propadmin.adapters.providers.memory import records_from_payloads
from propadmin.models import Base
from propadmin.service_layer.demo_seed import DEMO_PROPERTIES, seed_demo


@pytest.fixture
async def engine():
    """
    Fresh in-memory DB per test. StaticPool makes all connections share the same
    in-memory database for the lifetime of this engine fixture.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def async_session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=True)


@pytest.fixture
async def seeded_session_maker(async_session_maker):
    async with async_session_maker() as session:
        await seed_demo(session)
        await session.commit()
    return async_session_maker


@pytest.fixture
def demo_records():
    return records_from_payloads(DEMO_PROPERTIES)


@pytest.fixture(autouse=True)
def _closed_circuit():
    reset_circuit()
    yield
    reset_circuit()
