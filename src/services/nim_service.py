"""Orchestration of communication from API router to the Nim rules and the persistence layer (and the reverse direction)."""

import logging
from typing import Callable

from src.core.exceptions import GameNotFoundError, InvalidMoveError, InvalidParametersError
from src.core.models import GameState
from src.core.shared_types import PlayerType
from src.db.repository import GameRepository
from src.nim import rules
from src.nim.random_source import RandomSource

logger = logging.getLogger("nim")


class NimService:
    """
    Game engine for Nim.

    Stateless itself: every operation loads the game from the repository, applies the rules and saves the result.
    There is no locking, so two concurrent calls on the same game ID race (last write wins).
    """

    def __init__(self, repository: GameRepository, random_source: RandomSource) -> None:
        self.repo = repository
        self.random_source = random_source

    # -- API routes logic ---
    def start_game(self, total_matches: int, max_matches_per_turn: int) -> GameState:
        """Create a new game and persist it. The repository assigns the game ID."""
        logger.info(
            f"Creating new game with {total_matches} total matches and {max_matches_per_turn} max matches per turn"
        )
        try:
            state = rules.new_game(total_matches, max_matches_per_turn)
        except InvalidParametersError:
            logger.error(
                f"Invalid parameters to start a game. {total_matches=} {max_matches_per_turn=}"
            )
            raise
        stored = self.repo.save(state)
        logger.info(f"Game {stored.game_id} created")
        return stored

    def get_state(self, game_id: str) -> GameState:
        """Retrieve current game state."""
        logger.debug(f"Getting game state for id {game_id}")
        return self._fetch_game(game_id)

    def reset_game(self, game_id: str) -> GameState:
        """Put the game back to the default configuration (13 matches, 3 per turn)."""
        logger.info(f"Reset game with id {game_id}")
        state = self._fetch_game(game_id)
        return self.repo.save(rules.reset(state))

    def player_move(self, game_id: str, count: int) -> GameState:
        """The human player takes count matches."""
        logger.info(f"Player move on game {game_id}: taking {count}")
        state = self._fetch_game(game_id)
        return self._play_turn(state, PlayerType.PLAYER, lambda: count)

    def computer_move(self, game_id: str) -> GameState:
        """
        The computer takes a random number of matches.
        ----
        The draw covers [1, max_matches_per_turn] and is validated like a player's move.
        With fewer matches left than that, a draw above the heap is rejected with InvalidMoveError.
        """
        logger.info(f"Computer move on game {game_id}")
        state = self._fetch_game(game_id)

        def draw() -> int:
            return self.random_source.generate_random_int(
                1, state.max_matches_per_turn + 1
            )

        return self._play_turn(state, PlayerType.COMPUTER, draw)

    # -- Internal helpers --
    def _play_turn(
        self, state: GameState, mover: PlayerType, choose: Callable[[], int]
    ) -> GameState:
        """
        Shared sequence for both sides: turn check, finished-game short circuit, validate + apply, save.
        ----
        choose is only called once the game is known to be in progress, so no random number is drawn for a finished game.
        """
        try:
            rules.check_turn(state, mover)
        except InvalidMoveError:
            logger.warning(f"Not the {mover}'s turn on game {state.game_id}")
            raise

        if state.is_game_over:
            # finished games are returned as stored, nothing gets persisted
            logger.info(f"Game {state.game_id} already finished")
            return state

        count = choose()
        try:
            after_move = rules.apply_take(state, mover, count)
        except InvalidMoveError as exc:
            log = logger.error if mover == PlayerType.COMPUTER else logger.warning
            log(f"Invalid move by the {mover} on game {state.game_id}: {exc}")
            raise

        if after_move.is_game_over:
            logger.info(f"Game over on game {state.game_id}, {after_move.winner} wins")
        return self.repo.save(after_move)

    def _fetch_game(self, game_id: str) -> GameState:
        """Attempt to find the game in the repository and raise error if it fails."""
        state = self.repo.find_by_id(game_id)
        if state is None:
            logger.error(f"Game id {game_id} not found")
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return state
