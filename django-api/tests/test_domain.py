"""Unit tests for domain primitives and the spot state machine.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from events.domain import EventId, Money, SpotId, SpotStatus
from events.domain.errors import ErrorCode, SpotAlreadyReservedError, SpotNotFoundError
from events.domain.value_objects import parse_integer

from tests.factories import make_spot


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(4500).amount == 4500

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(0).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(-1)


class TestParseInteger:
    """Tests for parse_integer."""

    @pytest.mark.parametrize("raw,expected", [("42", 42), ("+7", 7), ("-3", -3), ("007", 7)])
    def test_parses_signed_decimal(self, raw, expected):
        """Signed ASCII decimal strings parse to their value."""
        assert parse_integer(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "1.5", " 1", "1_0", "0x1", "1\n", "١", "１"])
    def test_rejects_everything_else(self, raw):
        """Blanks, separators and non-ASCII digits raise ValueError."""
        with pytest.raises(ValueError):
            parse_integer(raw)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_integer(self):
        """EventId.from_string parses a decimal integer."""
        assert EventId.from_string("42") == EventId(42)

    def test_from_string_allows_leading_plus(self):
        """EventId.from_string accepts an explicit plus sign."""
        assert EventId.from_string("+7") == EventId(7)

    @pytest.mark.parametrize("raw", ["abc", "1.5", "١"])
    def test_from_string_rejects_non_integers(self, raw):
        """EventId.from_string raises ValueError for non-integers."""
        with pytest.raises(ValueError):
            EventId.from_string(raw)

    @pytest.mark.parametrize("raw", ["0", "-3"])
    def test_from_string_rejects_non_positive(self, raw):
        """EventId.from_string raises ValueError for zero and negatives."""
        with pytest.raises(ValueError):
            EventId.from_string(raw)

    def test_from_canonical_string_valid(self):
        """EventId.from_canonical_string parses the plain decimal form."""
        assert EventId.from_canonical_string("12") == EventId(12)

    @pytest.mark.parametrize("raw", ["01", "+1", "١", "１"])
    def test_from_canonical_string_rejects_other_spellings(self, raw):
        """Leading zeros, signs and non-ASCII digits are not canonical."""
        with pytest.raises(ValueError):
            EventId.from_canonical_string(raw)

    def test_str_is_the_number(self):
        """EventId string form is the bare number."""
        assert str(EventId(5)) == "5"


class TestSpotId:
    """Tests for SpotId value object."""

    def test_rejects_zero(self):
        """SpotId raises ValueError for zero."""
        with pytest.raises(ValueError):
            SpotId(0)


class TestSpotReserve:
    """Tests for the available -> reserved transition."""

    def test_reserve_available_spot(self):
        """Reserving an available spot returns it with reserved status."""
        spot = make_spot(1, "A1", 1)

        reserved = spot.reserve()

        assert reserved.status is SpotStatus.RESERVED
        assert reserved.id == spot.id
        assert reserved.name == spot.name
        assert reserved.event_id == spot.event_id

    def test_reserve_does_not_mutate_original(self):
        """The reserved copy leaves the source record unchanged."""
        spot = make_spot(1, "A1", 1)
        spot.reserve()
        assert spot.status is SpotStatus.AVAILABLE

    def test_reserve_reserved_spot_raises(self):
        """Reserving a reserved spot raises SpotAlreadyReservedError."""
        spot = make_spot(1, "A1", 1, SpotStatus.RESERVED)

        with pytest.raises(SpotAlreadyReservedError) as excinfo:
            spot.reserve()

        assert excinfo.value.code is ErrorCode.SPOT_ALREADY_RESERVED
        assert excinfo.value.message == "Spot is already reserved"


class TestDomainErrors:
    """Tests for domain error formatting."""

    def test_str_includes_code_and_message(self):
        """Domain errors render as CODE: message."""
        error = SpotNotFoundError("1", "Z9")
        assert str(error) == "SPOT_NOT_FOUND: Spot not found"
        assert error.spot_name == "Z9"
