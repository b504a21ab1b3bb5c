"""
HTTP routes. Thin layer: parse the request, call the NimService, map GameError kinds to status codes.

A rejected move answers with the current game state, its message replaced by the reason of the rejection.
A rejected computer move is a server-side problem (500), a rejected player move is the client's (400).
"""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_nim_service
from src.api.models import ErrorResponse, GameStateResponse
from src.core.exceptions import GameError, InvalidMoveError
from src.core.shared_types import ErrorKind
from src.services.nim_service import NimService

STATUS_BY_KIND = {
    ErrorKind.INVALID_PARAMETERS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_MOVE: status.HTTP_400_BAD_REQUEST,
}

router = APIRouter()


def _raise_http(exc: GameError) -> NoReturn:
    raise HTTPException(status_code=STATUS_BY_KIND[exc.kind], detail=str(exc)) from exc


def _rejected_move(
    service: NimService, game_id: str, exc: InvalidMoveError, status_code: int
) -> JSONResponse:
    current = GameStateResponse.from_state(service.get_state(game_id), message=str(exc))
    return JSONResponse(
        status_code=status_code,
        content=current.model_dump(mode="json", by_alias=True),
    )


@router.post(
    "/start-game",
    response_model=GameStateResponse,
    responses={400: {"model": ErrorResponse, "description": "Invalid parameters provided."}},
)
def start_game(
    total_matches: int = Query(alias="totalMatches"),
    max_matches_per_turn: int = Query(alias="maxMatchesPerTurn"),
    service: NimService = Depends(get_nim_service),
) -> GameStateResponse:
    """Create a new nim game with the parameters provided."""
    try:
        state = service.start_game(total_matches, max_matches_per_turn)
    except GameError as exc:
        _raise_http(exc)
    return GameStateResponse.from_state(state)


@router.get(
    "/state/{game_id}",
    response_model=GameStateResponse,
    responses={404: {"model": ErrorResponse, "description": "No game state found."}},
)
def get_game_state(
    game_id: str, service: NimService = Depends(get_nim_service)
) -> GameStateResponse:
    """Fetch the game state for the game ID provided."""
    try:
        state = service.get_state(game_id)
    except GameError as exc:
        _raise_http(exc)
    return GameStateResponse.from_state(state)


@router.put(
    "/reset/{game_id}",
    response_model=GameStateResponse,
    responses={404: {"model": ErrorResponse, "description": "No game state found."}},
)
def reset_game(
    game_id: str, service: NimService = Depends(get_nim_service)
) -> GameStateResponse:
    """Reset the game to the default configuration."""
    try:
        state = service.reset_game(game_id)
    except GameError as exc:
        _raise_http(exc)
    return GameStateResponse.from_state(state)


@router.post(
    "/player-move/{game_id}/{player_moves}",
    response_model=GameStateResponse,
    responses={
        400: {"model": GameStateResponse, "description": "Invalid move by the player."},
        404: {"model": ErrorResponse, "description": "No game state found."},
    },
)
def player_move(
    game_id: str, player_moves: int, service: NimService = Depends(get_nim_service)
):
    """The player takes player_moves matches from the heap."""
    try:
        state = service.player_move(game_id, player_moves)
    except InvalidMoveError as exc:
        return _rejected_move(service, game_id, exc, STATUS_BY_KIND[exc.kind])
    except GameError as exc:
        _raise_http(exc)
    return GameStateResponse.from_state(state)


@router.post(
    "/computer-move/{game_id}",
    response_model=GameStateResponse,
    responses={
        404: {"model": ErrorResponse, "description": "No game state found."},
        500: {"model": GameStateResponse, "description": "The computer could not make a move."},
    },
)
def computer_move(game_id: str, service: NimService = Depends(get_nim_service)):
    """The computer takes a random number of matches, if it is its turn."""
    try:
        state = service.computer_move(game_id)
    except InvalidMoveError as exc:
        return _rejected_move(
            service, game_id, exc, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    except GameError as exc:
        _raise_http(exc)
    return GameStateResponse.from_state(state)
