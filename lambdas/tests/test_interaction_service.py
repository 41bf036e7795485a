"""Tests for chat roll service."""

import pytest

from interaction.models import EPHEMERAL_FLAG
from interaction.service import (
    FAILED_ROLL_MESSAGE,
    MISPLACED_MODIFIER_MESSAGE,
    UNKNOWN_ROLL_MESSAGE,
    roll_from_text,
)


class TestRollFromText:
    """Tests for roll_from_text."""

    def test_roll_renders_first_step(self, fixed_source):
        """Valid rolls render the formatted step without flags."""
        message = roll_from_text("2d6 + 1d4 - 2", fixed_source([4, 2, 3]))

        assert message.content == "(4) + (2) + (3) - 2 = 7"
        assert message.flags is None
        assert message.is_ephemeral is False

    def test_roll_with_positive_modifier(self, fixed_source):
        """Positive modifiers render with a plus sign."""
        message = roll_from_text("1d20+5", fixed_source([12]))

        assert message.content == "(12) + 5 = 17"

    @pytest.mark.parametrize("text", ["abc", "d6", "1d6+", "", "1d6-1d4"])
    def test_unparseable_roll(self, text):
        """Malformed expressions get the generic apology."""
        message = roll_from_text(text)

        assert message.content == UNKNOWN_ROLL_MESSAGE
        assert message.flags == EPHEMERAL_FLAG

    @pytest.mark.parametrize(
        "text", ["1d" + "9" * 5000, "1d6+" + "9" * 5000, "9" * 5000 + "d6", "1\u0663d6"]
    )
    def test_oversized_or_non_ascii_numbers(self, text):
        """Huge or non-ASCII digit runs get the generic apology."""
        message = roll_from_text(text)

        assert message.content == UNKNOWN_ROLL_MESSAGE
        assert message.flags == EPHEMERAL_FLAG

    def test_leading_modifier(self):
        """Modifiers before any dice get the modifier hint."""
        message = roll_from_text("+5")

        assert message.content == MISPLACED_MODIFIER_MESSAGE
        assert message.flags == EPHEMERAL_FLAG

    def test_out_of_limits(self):
        """Rolls beyond the bounds explain the limit."""
        message = roll_from_text("100d6")

        assert message.content == "Dice count must be between 1 and 99, 100 provided"
        assert message.is_ephemeral is True

    def test_resolution_failure(self):
        """Failures while rolling become the generic failure sentinel."""

        def broken(sides: int) -> int:
            raise RuntimeError("no entropy")

        message = roll_from_text("1d6", broken)

        assert message.content == FAILED_ROLL_MESSAGE
        assert message.flags == EPHEMERAL_FLAG
