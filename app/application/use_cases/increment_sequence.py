"""IncrementSequenceUseCase — bump a named counter by one."""

from __future__ import annotations

import logging

from app.application.ports.sequence_store import SequenceStore
from app.domain.errors import InvalidArgument, SequenceNotFound, StorageFailure

logger = logging.getLogger(__name__)


class IncrementSequenceUseCase:
    """Runs one increment against the store and logs how it went."""

    def __init__(self, store: SequenceStore):
        self._store = store

    async def execute(self, name: str | None) -> int:
        """Increment ``name`` and return the new count.

        Typed errors from the store are logged here and re-raised unchanged
        for the API layer to translate.
        """
        try:
            new_count = await self._store.increment(name)
        except InvalidArgument as e:
            logger.warning("Rejected increment: %s", e)
            raise
        except SequenceNotFound as e:
            logger.warning("Increment of unknown sequence %r", e.name)
            raise
        except StorageFailure as e:
            logger.error(
                "Increment of %r failed: %r", name, e.__cause__, exc_info=e.__cause__
            )
            raise

        logger.info("Sequence %r incremented to %d", name, new_count)
        return new_count
