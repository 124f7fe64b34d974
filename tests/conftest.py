"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.adapters.persistence.database import (
    Base,
    create_engine_from_settings,
    create_session_factory,
)
from app.adapters.persistence.models import SequenceModel
from app.config import Settings


@pytest.fixture
def sqlite_settings(tmp_path) -> Settings:
    return Settings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'sequences.db'}")


@pytest_asyncio.fixture
async def engine(sqlite_settings):
    engine = create_engine_from_settings(sqlite_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


async def seed_sequences(
    session_factory: async_sessionmaker[AsyncSession], **counts: int
) -> None:
    """Provision counter rows, the way an operator would outside the service."""
    async with session_factory() as session, session.begin():
        session.add_all(
            SequenceModel(sequence_name=name, sequence_count=count)
            for name, count in counts.items()
        )


async def read_count(
    session_factory: async_sessionmaker[AsyncSession], name: str
) -> int | None:
    async with session_factory() as session:
        return await session.scalar(
            select(SequenceModel.sequence_count).where(
                SequenceModel.sequence_name == name
            )
        )


async def count_rows(session_factory: async_sessionmaker[AsyncSession]) -> int:
    async with session_factory() as session:
        return await session.scalar(select(func.count()).select_from(SequenceModel))
