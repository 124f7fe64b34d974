"""FastAPI dependency injection — wires adapters into use cases.

The engine and session factory are created by the app lifespan and kept on
``app.state``; nothing here holds a module-level database handle.
"""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.adapters.persistence.repositories import SqlSequenceStore
from app.application.ports.sequence_store import SequenceStore
from app.application.use_cases.increment_sequence import IncrementSequenceUseCase


def get_engine(request: Request) -> AsyncEngine:
    return request.app.state.engine


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.session_factory


def get_sequence_store(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> SequenceStore:
    return SqlSequenceStore(session_factory)


def get_increment_sequence_uc(
    store: SequenceStore = Depends(get_sequence_store),
) -> IncrementSequenceUseCase:
    return IncrementSequenceUseCase(store=store)
