from typing import Dict, List, Optional
import logging

from .player import Player
from .scoring import ScoringEngine
from .turn import Turn


logger = logging.getLogger(__name__)

DEFAULT_TARGET_SCORE = 10000
MIN_PLAYERS = 1
MAX_PLAYERS = 4


class Game:
    """Manages a full game of Farkle.

    Players take turns in seat order until one reaches the target score.
    A single-player game is a diagnostic mode: it ends after one turn and
    never declares a winner.
    """

    def __init__(self, players: List[Player], rng, target_score: int = DEFAULT_TARGET_SCORE):
        if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
            raise ValueError(f"Farkle supports {MIN_PLAYERS} to {MAX_PLAYERS} players, got {len(players)}")
        if target_score <= 0:
            raise ValueError(f"Target score must be positive, got {target_score}")
        self.players = players
        self.rng = rng
        self.target_score = target_score
        self.scoring_engine = ScoringEngine()
        self.current_player_index = 0
        self.turns_played = 0
        self.game_over = False
        self.winner: Optional[Player] = None
        self.turn_history: List[Dict] = []
        self.current_turn: Optional[Turn] = None

    @property
    def current_player(self) -> Player:
        """Get the current player."""
        return self.players[self.current_player_index]

    @property
    def is_single_player(self) -> bool:
        return len(self.players) == 1

    def start_turn(self) -> Turn:
        """Start a new turn for the current player."""
        if self.game_over:
            raise ValueError("Cannot start a turn - game is over")
        self.current_turn = Turn(self.rng, self.scoring_engine)
        return self.current_turn

    def complete_turn(self, turn: Optional[Turn] = None) -> int:
        """Record a finished turn and pass play to the next player."""
        turn = turn or self.current_turn
        if turn is None or not turn.is_over:
            raise ValueError("Cannot complete turn - turn is still in progress")

        player = self.current_player
        points = turn.final_score
        player.add_score(points)
        self.turns_played += 1

        self.turn_history.append({
            "player": player.name,
            "score": points,
            "busted": points == 0,
            "rolls": len(turn.state.roll_history),
        })
        logger.info("%s scored %d (total %d)", player.name, points, player.score)

        if self.is_single_player:
            self.game_over = True
        elif player.score >= self.target_score:
            self.game_over = True
            self.winner = player
            logger.info("%s wins with %d", player.name, player.score)

        self.current_turn = None
        if not self.game_over:
            self.advance_turn()
        return points

    def advance_turn(self):
        """Move to the next player."""
        self.current_player_index = (self.current_player_index + 1) % len(self.players)

    def get_game_state(self) -> dict:
        """Get current game state."""
        return {
            "players": [{"name": p.name, "score": p.score} for p in self.players],
            "current_player": self.current_player.name,
            "turns_played": self.turns_played,
            "game_over": self.game_over,
            "winner": self.winner.name if self.winner else None,
            "target_score": self.target_score,
        }
