"""Port interface for atomic sequence increments."""

from abc import ABC, abstractmethod


class SequenceStore(ABC):
    @abstractmethod
    async def increment(self, name: str | None) -> int:
        """Atomically add one to the named counter and return the NEW value.

        Raises:
            InvalidArgument: name is missing or blank; storage is not touched.
            SequenceNotFound: no counter with that name exists.
            StorageFailure: the transaction failed and was rolled back.
        """
        ...
