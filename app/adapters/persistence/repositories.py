"""SQLAlchemy repository implementations."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import Row, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.adapters.persistence.models import SequenceModel
from app.application.ports.sequence_store import SequenceStore
from app.domain.entities.sequence import Sequence
from app.domain.errors import SequenceNotFound, StorageFailure
from app.domain.policies.sequence_name import validate_sequence_name

logger = logging.getLogger(__name__)

# ─── Mappers ─────────────────────────────────────────────────────────


def _sequence_to_domain(row: Row) -> Sequence:
    return Sequence(id=row.id, name=row.sequence_name, count=row.sequence_count)


# ─── Repositories ────────────────────────────────────────────────────


class SqlSequenceStore(SequenceStore):
    """Read-increment-write of one counter row inside a single transaction.

    Each call opens its own session, so the store itself holds no state
    between requests and is safe to share across concurrent tasks. Writers
    on the same row are serialized by the database (row lock, or the SQLite
    write lock; see ``database.py``), never by an in-process lock.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def increment(self, name: str | None) -> int:
        name = validate_sequence_name(name)

        try:
            async with self._sessions() as session, session.begin():
                sequence = await self._lock_by_name(session, name)
                if sequence is None:
                    raise SequenceNotFound(name)

                new_count = sequence.advance()
                await session.execute(
                    update(SequenceModel)
                    .where(SequenceModel.id == sequence.id)
                    .values(sequence_count=new_count)
                )
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            # Leaving session.begin() with an error rolls the transaction back.
            logger.debug("Transaction on sequence %r rolled back: %s", name, e)
            raise StorageFailure() from e

        return new_count

    async def _lock_by_name(self, session: AsyncSession, name: str) -> Sequence | None:
        result = await session.execute(
            select(
                SequenceModel.id,
                SequenceModel.sequence_name,
                SequenceModel.sequence_count,
            )
            .where(SequenceModel.sequence_name == name)
            .with_for_update()
        )
        row = result.one_or_none()
        return _sequence_to_domain(row) if row is not None else None
