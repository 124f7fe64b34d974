"""Sequence name policy — what counts as an acceptable counter name."""

from app.domain.errors import InvalidArgument


def validate_sequence_name(name: str | None) -> str:
    """Return the name unchanged if it may be looked up, else raise.

    Only missing or blank names are rejected. Any other name goes to the
    lookup, which reports whether a row exists.
    """
    if name is None or not name.strip():
        raise InvalidArgument()
    return name
