"""
Rules of (misère) Nim.

Pure functions: they take a GameState and return a new one, or raise InvalidMoveError / InvalidParametersError.
Loading and saving the state is the responsibility of the service layer.
"""

from dataclasses import replace

from src.core.config import DEFAULT_MAX_MATCHES_PER_TURN, DEFAULT_TOTAL_MATCHES
from src.core.exceptions import InvalidMoveError, InvalidParametersError
from src.core.models import GameState
from src.core.shared_types import PlayerType

MOVE_SUCCESSFUL = "Move successful!"
PLAYER_WINNER = "Player won. The computer took the last match"
COMPUTER_WINNER = "Computer won. The player took the last match"
GAME_RESET = "Game resettled to default configuration"

WINNER_MESSAGES = {
    PlayerType.PLAYER: PLAYER_WINNER,
    PlayerType.COMPUTER: COMPUTER_WINNER,
}


def opponent(player: PlayerType) -> PlayerType:
    return PlayerType.COMPUTER if player == PlayerType.PLAYER else PlayerType.PLAYER


def new_game(total_matches: int, max_matches_per_turn: int) -> GameState:
    """Fresh game with a full heap and the (human) player to move."""
    if total_matches < 1 or max_matches_per_turn < 1:
        raise InvalidParametersError(
            f"Invalid parameters to start a game. {total_matches=} and {max_matches_per_turn=} must both be at least 1."
        )
    return GameState(
        total_matches=total_matches,
        max_matches_per_turn=max_matches_per_turn,
        matches_in_heap=total_matches,
    )


def reset(state: GameState) -> GameState:
    """Back to the default configuration, keeping the game ID."""
    return GameState(
        total_matches=DEFAULT_TOTAL_MATCHES,
        max_matches_per_turn=DEFAULT_MAX_MATCHES_PER_TURN,
        matches_in_heap=DEFAULT_TOTAL_MATCHES,
        current_player=PlayerType.PLAYER,
        is_game_over=False,
        winner=None,
        message=GAME_RESET,
        game_id=state.game_id,
    )


def check_turn(state: GameState, mover: PlayerType) -> None:
    if state.current_player != mover:
        raise InvalidMoveError(
            f"Invalid move, it is the {state.current_player}'s turn, not the {mover}'s."
        )


def validate_take(state: GameState, count: int) -> None:
    """The per-turn bound is checked before the number of matches left in the heap."""
    if count < 1 or count > state.max_matches_per_turn:
        raise InvalidMoveError(
            f"The number of matches taken must be between 1 and {state.max_matches_per_turn}, got {count}."
        )
    if count > state.matches_in_heap:
        raise InvalidMoveError(
            f"Number of matches taken ({count}) is above the number of matches in the heap ({state.matches_in_heap})."
        )


def apply_take(state: GameState, mover: PlayerType, count: int) -> GameState:
    """
    Remove count matches for mover and pass the turn.
    ----
    Whoever empties the heap loses. The turn passes to the other side even on the final move.
    """
    validate_take(state, count)

    remaining = state.matches_in_heap - count
    other = opponent(mover)
    if remaining == 0:
        return replace(
            state,
            matches_in_heap=0,
            current_player=other,
            is_game_over=True,
            winner=other,
            message=WINNER_MESSAGES[other],
        )
    return replace(
        state,
        matches_in_heap=remaining,
        current_player=other,
        message=MOVE_SUCCESSFUL,
    )
