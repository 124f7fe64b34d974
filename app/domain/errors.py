"""Typed outcomes of a failed increment.

Messages of these errors may be shown to API callers, so they never carry
driver or SQL text. The underlying storage error travels as ``__cause__``.
"""


class SequenceError(Exception):
    """Base class for every failed increment."""

    def __init__(self, message: str = "Sequence operation failed") -> None:
        super().__init__(message)


class InvalidArgument(SequenceError):
    """The sequence name is missing or blank. Storage was not touched."""

    def __init__(self, message: str = "Missing sequence_name parameter") -> None:
        super().__init__(message)


class SequenceNotFound(SequenceError):
    """No counter with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Sequence not found: {name}")
        self.name = name


class StorageFailure(SequenceError):
    """The transaction could not be completed. The row is unchanged."""

    def __init__(self, message: str = "Something went wrong!") -> None:
        super().__init__(message)
