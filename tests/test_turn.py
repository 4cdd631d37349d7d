"""Tests for the turn state machine."""
import pytest

from farkle.core.dice import DiceSet
from farkle.core.errors import SelectionError
from farkle.core.turn import Turn, TurnStatus


@pytest.fixture
def turn(scripted_rng):
    # Random draws are never used when rolls are given explicitly
    return Turn(scripted_rng(""))


class TestRolling:

    def test_starts_with_six_dice(self, turn):
        assert turn.state.status == TurnStatus.ROLLING
        assert turn.state.dice_to_roll == 6
        assert turn.state.accumulated_score == 0

    def test_roll_draws_from_source(self, scripted_rng):
        turn = Turn(scripted_rng("123356"))
        assert turn.roll() == DiceSet.decode("123356")
        assert turn.state.status == TurnStatus.AWAITING_SELECTION

    def test_bust_ends_turn(self, turn):
        turn.roll("223446")
        assert turn.state.status == TurnStatus.BUSTED
        assert turn.is_over
        assert turn.final_score == 0

    def test_bust_forfeits_accumulated_score(self, turn):
        turn.roll("111236")
        assert turn.keep("111").accepted
        turn.roll("234")
        assert turn.state.status == TurnStatus.BUSTED
        assert turn.state.accumulated_score == 0
        assert turn.final_score == 0

    def test_wrong_number_of_dice(self, turn):
        with pytest.raises(ValueError):
            turn.roll("12345")

    def test_cannot_roll_while_selecting(self, turn):
        turn.roll("123456")
        with pytest.raises(ValueError):
            turn.roll()


class TestKeeping:

    def test_keep_scores_and_sets_next_roll(self, turn):
        turn.roll("111236")
        result = turn.keep("111")
        assert result.accepted
        assert result.points == 1000
        assert not result.hot_dice
        assert turn.state.accumulated_score == 1000
        assert turn.state.dice_to_roll == 3
        assert turn.state.status == TurnStatus.ROLLING

    def test_scores_accumulate_across_rolls(self, turn):
        turn.roll("111236")
        turn.keep("111")
        turn.roll("155")
        turn.keep("15")
        assert turn.state.accumulated_score == 1150
        assert turn.state.dice_to_roll == 1
        assert turn.bank() == 1150
        assert turn.final_score == 1150

    def test_non_scoring_selection_rejected(self, turn):
        rolled = turn.roll("122346")
        result = turn.keep("2")
        assert not result.accepted
        assert result.error == SelectionError.NO_SCORING_DICE
        assert turn.state.current_roll == rolled
        assert turn.state.status == TurnStatus.AWAITING_SELECTION
        assert turn.state.accumulated_score == 0

    def test_empty_selection_rejected(self, turn):
        turn.roll("122346")
        assert turn.keep("").error == SelectionError.NO_SCORING_DICE

    @pytest.mark.parametrize("choice, error", [
        ("66", SelectionError.INSUFFICIENT_DICE),
        ("17", SelectionError.INVALID_FACE),
    ])
    def test_invalid_selection_leaves_roll(self, choice, error):
        turn = Turn(None)
        turn.state.dice_to_roll = 3
        rolled = turn.roll("115")
        result = turn.keep(choice)
        assert result.error == error
        assert turn.state.current_roll == rolled

        retry = turn.keep("15")
        assert retry.accepted
        assert retry.points == 150
        assert turn.state.dice_to_roll == 1

    def test_keep_with_scoring_and_dead_dice(self, turn):
        # Dead dice can ride along, they just score nothing
        turn.roll("122346")
        result = turn.keep("12")
        assert result.accepted
        assert result.points == 100
        assert turn.state.dice_to_roll == 4

    def test_hot_dice_rolls_six(self, turn):
        turn.roll("123456")
        result = turn.keep("654321")
        assert result.accepted
        assert result.points == 1500
        assert result.hot_dice
        assert turn.state.dice_to_roll == 6
        assert turn.state.hot_dice_count == 1
        assert turn.roll("111222").total == 6

    def test_cannot_keep_before_rolling(self, turn):
        with pytest.raises(ValueError):
            turn.keep("1")


class TestBanking:

    def test_cannot_bank_before_keeping(self, turn):
        with pytest.raises(ValueError):
            turn.bank()

    def test_cannot_bank_after_bust(self, turn):
        turn.roll("222334")
        assert turn.state.status == TurnStatus.AWAITING_SELECTION
        turn.keep("222")
        turn.roll("234")
        with pytest.raises(ValueError):
            turn.bank()

    def test_bank_completes(self, turn):
        turn.roll("555234")
        turn.keep("555")
        turn.bank()
        assert turn.state.status == TurnStatus.COMPLETE
        assert turn.is_over
        with pytest.raises(ValueError):
            turn.roll()
