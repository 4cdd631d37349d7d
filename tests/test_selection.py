"""Tests for splitting a player's selection out of a roll."""
import pytest

from farkle.core.dice import DiceSet
from farkle.core.errors import SelectionError
from farkle.core.selection import select_dice


class TestSelectDice:

    def test_split(self):
        selection = select_dice(DiceSet.decode("11235"), "15")
        assert selection.ok
        assert selection.kept == DiceSet.decode("15")
        assert selection.remaining == DiceSet.decode("123")
        assert selection.kept.total == 2

    def test_order_does_not_matter(self):
        available = DiceSet.decode("115")
        assert select_dice(available, "511") == select_dice(available, "115")

    def test_take_everything(self):
        selection = select_dice(DiceSet.decode("555"), 555)
        assert selection.kept == DiceSet.decode("555")
        assert selection.remaining.total == 0

    def test_empty_choice(self):
        available = DiceSet.decode("15")
        for choice in ("", 0, "0", "00"):
            selection = select_dice(available, choice)
            assert selection.ok
            assert selection.kept.total == 0
            assert selection.remaining == available

    def test_leading_zeros_ignored(self):
        selection = select_dice(DiceSet.decode("115"), "015")
        assert selection.ok
        assert selection.kept == DiceSet.decode("15")
        assert selection.remaining == DiceSet.decode("1")

    @pytest.mark.parametrize("choice", ["107", "8", "1x"])
    def test_invalid_face(self, choice):
        selection = select_dice(DiceSet.decode("111555"), choice)
        assert not selection.ok
        assert selection.error == SelectionError.INVALID_FACE
        assert selection.kept is None
        assert selection.remaining is None

    @pytest.mark.parametrize("choice", ["2", "111", "155"])
    def test_insufficient_dice(self, choice):
        selection = select_dice(DiceSet.decode("115"), choice)
        assert selection.error == SelectionError.INSUFFICIENT_DICE

    def test_failure_leaves_available_usable(self):
        available = DiceSet.decode("115")
        failed = select_dice(available, "66")
        assert failed.error == SelectionError.INSUFFICIENT_DICE
        assert available == DiceSet.decode("115")

        selection = select_dice(available, "15")
        assert selection.ok
        assert selection.remaining == DiceSet.decode("1")
