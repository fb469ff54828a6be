"""HTTP routes for /games. Each route is a thin wrapper around TicTacToeService."""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from src.api.models import (
    CreateGameRequest,
    ErrorResponse,
    GameResponse,
    LocationResponse,
    MoveRequest,
)
from src.services.tictactoe_service import TicTacToeService

game_router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def get_service(request: Request) -> TicTacToeService:
    """The service (and its repository) is created once, in the app's lifespan."""
    return request.app.state.service


@game_router.get("/", response_class=PlainTextResponse)
def index() -> str:
    return "Nothing here, go to /games"


@game_router.get("/games", response_model=list[GameResponse], response_model_by_alias=True)
def list_games(service: TicTacToeService = Depends(get_service)) -> list[GameResponse]:
    return service.list_games()


@game_router.post(
    "/games",
    response_model=LocationResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
def create_game(
    body: CreateGameRequest,
    request: Request,
    response: Response,
    service: TicTacToeService = Depends(get_service),
) -> LocationResponse:
    game = service.create_game(body)
    location = str(request.url_for("get_game", game_id=game.game_id))
    response.headers["Location"] = location
    return LocationResponse(location=location)


@game_router.get(
    "/games/{game_id}",
    response_model=GameResponse,
    response_model_by_alias=True,
    responses=NOT_FOUND,
)
def get_game(game_id: str, service: TicTacToeService = Depends(get_service)) -> GameResponse:
    return service.get_game(game_id)


@game_router.put(
    "/games/{game_id}",
    response_model=GameResponse,
    response_model_by_alias=True,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def make_move(
    game_id: str, body: MoveRequest, service: TicTacToeService = Depends(get_service)
) -> GameResponse:
    return service.make_move(game_id, body)


@game_router.delete(
    "/games/{game_id}",
    response_model=GameResponse,
    response_model_by_alias=True,
    responses=NOT_FOUND,
)
def delete_game(game_id: str, service: TicTacToeService = Depends(get_service)) -> GameResponse:
    return service.delete_game(game_id)
