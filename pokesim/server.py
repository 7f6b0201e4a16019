"""HTTP API for PokeSim: catalog lookup, battle simulation, and save games."""

import logging
import random
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokesim import __version__
from pokesim.core.battle import BattleOutcome, Winner, simulate
from pokesim.core.errors import CombatantNotFoundError, InvalidCombatantError, SaveNotFoundError
from pokesim.core.pokemon import Combatant
from pokesim.data.catalog import get_combatant, list_combatants
from pokesim.data.saves import InMemorySaveStore, SaveGame, SaveStore
from pokesim.utils.config import config

logger = logging.getLogger(__name__)

app = FastAPI(title="PokeSim Game API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# --- Models ---


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SimulateRequest(_CamelModel):
    player_pokemon: Combatant | None = None
    opponent_pokemon: Combatant | None = None
    rounds: int = 0


class BattleResult(_CamelModel):
    winner: Winner
    rounds: int
    battle_log: list[str]
    player_hp: int
    opponent_hp: int
    player_moves: list[str]
    opponent_moves: list[str]

    @classmethod
    def from_outcome(cls, outcome: BattleOutcome) -> "BattleResult":
        return cls(
            winner=outcome.winner,
            rounds=outcome.rounds,
            battle_log=outcome.battle_log,
            player_hp=outcome.player_hp,
            opponent_hp=outcome.opponent_hp,
            player_moves=outcome.player_moves,
            opponent_moves=outcome.opponent_moves,
        )


class SaveResponse(_CamelModel):
    success: bool
    save_id: str | None = None
    timestamp: int
    message: str | None = None


# --- Dependencies ---

_save_store = InMemorySaveStore()


def _get_store() -> SaveStore:
    return _save_store


def _get_rng() -> random.Random:
    """A fresh generator per request, so battles never share a stream."""
    return random.Random()


# --- Error handling ---


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": HTTPStatus(status_code).phrase,
            "code": status_code,
            "message": message,
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed body for %s: %s", request.url.path, exc.errors())
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


# --- Catalog Endpoints ---


@app.get("/api/pokemon", response_model=list[Combatant])
async def get_all_pokemon():
    return list_combatants()


@app.get("/api/pokemon/{pokemon_id}", response_model=Combatant)
async def get_pokemon(pokemon_id: str):
    try:
        pid = int(pokemon_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid Pokemon ID") from None
    try:
        return get_combatant(pid)
    except CombatantNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None


# --- Battle Endpoints ---


@app.post("/api/battle/simulate", response_model=BattleResult)
async def simulate_battle(
    battle: SimulateRequest, rng: Annotated[random.Random, Depends(_get_rng)]
):
    player = battle.player_pokemon
    opponent = battle.opponent_pokemon
    if player is None or opponent is None or player.id == 0 or opponent.id == 0:
        raise HTTPException(status_code=400, detail="Both player and opponent Pokemon are required")

    try:
        outcome = simulate(player, opponent, max_rounds=battle.rounds, rng=rng)
    except InvalidCombatantError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    return BattleResult.from_outcome(outcome)


# --- Save Game Endpoints ---


@app.post("/api/game/save", response_model=SaveResponse, response_model_exclude_none=True)
async def save_game(save: SaveGame, store: Annotated[SaveStore, Depends(_get_store)]):
    if not save.player_id:
        raise HTTPException(status_code=400, detail="Player ID is required")

    save = save.stamped()
    store.put(save.player_id, save)
    logger.info("Saved game for player %s", save.player_id)
    return SaveResponse(
        success=True,
        save_id=save.player_id,
        timestamp=save.timestamp,
        message="Game saved successfully",
    )


@app.get("/api/game/load/{player_id}", response_model=SaveGame)
async def load_game(player_id: str, store: Annotated[SaveStore, Depends(_get_store)]):
    try:
        return store.get(player_id)
    except SaveNotFoundError:
        raise HTTPException(status_code=404, detail="No saved game found for this player") from None


# --- Health ---


@app.get("/api/health")
async def health():
    return {
        "status": "UP",
        "message": "Pokemon Game API is running",
        "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }
