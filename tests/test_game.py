"""Tests for the multi-player game loop."""
import pytest

from farkle.core.game import Game
from farkle.core.player import Player
from farkle.core.random_source import RandomSource


def banked_turn(game, roll, keep):
    turn = game.start_turn()
    turn.state.dice_to_roll = len(roll)
    turn.roll(roll)
    assert turn.keep(keep).accepted
    turn.bank()
    return game.complete_turn(turn)


def busted_turn(game):
    turn = game.start_turn()
    turn.roll("223446")
    return game.complete_turn(turn)


def make_game(n, target=10000):
    return Game([Player(f"Player {i + 1}") for i in range(n)], RandomSource(1), target_score=target)


class TestGame:

    @pytest.mark.parametrize("n", [0, 5])
    def test_player_count(self, n):
        with pytest.raises(ValueError):
            make_game(n)

    def test_turns_rotate(self):
        game = make_game(3)
        assert game.current_player.name == "Player 1"
        busted_turn(game)
        assert game.current_player.name == "Player 2"
        banked_turn(game, "111", "111")
        assert game.current_player.name == "Player 3"
        busted_turn(game)
        assert game.current_player.name == "Player 1"
        assert [p.score for p in game.players] == [0, 1000, 0]
        assert game.turns_played == 3

    def test_winner_at_target(self):
        game = make_game(2, target=2000)
        banked_turn(game, "111111", "111111")
        assert game.game_over
        assert game.winner is game.players[0]
        with pytest.raises(ValueError):
            game.start_turn()

    def test_below_target_continues(self):
        game = make_game(2, target=2000)
        banked_turn(game, "111", "111")
        assert not game.game_over
        assert game.winner is None

    def test_single_player_ends_after_one_turn(self):
        game = make_game(1, target=500)
        banked_turn(game, "111", "111")
        assert game.game_over
        assert game.winner is None
        assert game.players[0].score == 1000

    def test_single_player_bust_also_ends(self):
        game = make_game(1)
        assert busted_turn(game) == 0
        assert game.game_over

    def test_cannot_complete_unfinished_turn(self):
        game = make_game(2)
        turn = game.start_turn()
        turn.roll("111236")
        with pytest.raises(ValueError):
            game.complete_turn(turn)

    def test_history_and_state(self):
        game = make_game(2)
        busted_turn(game)
        banked_turn(game, "5", "5")
        assert game.turn_history == [
            {"player": "Player 1", "score": 0, "busted": True, "rolls": 1},
            {"player": "Player 2", "score": 50, "busted": False, "rolls": 1},
        ]
        state = game.get_game_state()
        assert state["players"] == [{"name": "Player 1", "score": 0}, {"name": "Player 2", "score": 50}]
        assert state["winner"] is None
        assert game.players[0].farkles == 1


class TestPlayer:

    def test_add_score(self):
        player = Player("Ann")
        player.add_score(300)
        player.add_score(0)
        assert player.score == 300
        assert player.total_turns == 2
        assert str(player) == "Ann (300 points)"
