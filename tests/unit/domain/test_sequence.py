"""Tests for the Sequence entity and the sequence name policy."""

import pytest

from app.domain.entities.sequence import Sequence
from app.domain.errors import InvalidArgument
from app.domain.policies.sequence_name import validate_sequence_name


def test_advance_adds_exactly_one():
    seq = Sequence(id=1, name="home", count=41)
    assert seq.advance() == 42
    assert seq.count == 42


def test_advance_from_zero():
    seq = Sequence(id=None, name="fresh")
    assert seq.advance() == 1


def test_advance_is_cumulative():
    seq = Sequence(id=1, name="home", count=0)
    values = [seq.advance() for _ in range(3)]
    assert values == [1, 2, 3]


def test_valid_name_returned_unchanged():
    assert validate_sequence_name("landing-page") == "landing-page"


def test_name_is_not_stripped():
    """Names are matched exactly; surrounding spaces are kept."""
    assert validate_sequence_name(" home ") == " home "


@pytest.mark.parametrize("name", [None, "", " ", "\t\n"])
def test_blank_names_rejected(name):
    with pytest.raises(InvalidArgument, match="Missing sequence_name"):
        validate_sequence_name(name)


def test_long_name_passes_to_lookup():
    name = "x" * 256
    assert validate_sequence_name(name) == name
