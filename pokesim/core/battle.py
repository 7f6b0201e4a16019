"""Turn-based battle state machine.

Resolves a complete battle between two combatants:
    not started -> in progress (rounds) -> concluded

Each battle works on private copies of both combatants and draws from
its own random source, so concurrent battles never share state and a
seeded source replays a battle exactly.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Protocol

from pydantic import BaseModel, Field

from pokesim.core.errors import InvalidCombatantError
from pokesim.core.moves import (
    NEUTRAL,
    Move,
    calculate_damage,
    effectiveness_message,
    get_type_effectiveness,
)
from pokesim.core.pokemon import Combatant
from pokesim.utils.config import config

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Side(str, Enum):
    """One side of a battle."""

    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> Side:
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class Winner(str, Enum):
    """Final classification of a battle."""

    PLAYER = "player"
    OPPONENT = "opponent"
    DRAW = "draw"


class BattlePhase(str, Enum):
    """Lifecycle phase of a battle."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    CONCLUDED = "concluded"


class EventKind(str, Enum):
    """Kinds of entries in the battle log."""

    START = "start"
    ROUND = "round"
    ATTACK = "attack"
    FAINT = "faint"
    CONCLUSION = "conclusion"


# ---------------------------------------------------------------------------
# Supporting models
# ---------------------------------------------------------------------------

class RandomSource(Protocol):
    """The subset of ``random.Random`` the battle engine draws from."""

    def randrange(self, stop: int) -> int: ...

    def randint(self, a: int, b: int) -> int: ...


class BattleEvent(BaseModel):
    """A single entry in the battle log, in order of occurrence."""

    kind: EventKind
    round: int = 0  # 0 for events outside any round
    message: str


class AttackOutcome(BaseModel):
    """Result of one attack from the damage model."""

    move: Move
    missed: bool = False
    damage: int | None = None  # None when no damage was computed
    effectiveness: float = NEUTRAL
    defender_hp: int
    description: str


class BattleOutcome(BaseModel):
    """The full record of a completed battle."""

    winner: Winner
    rounds: int
    player_hp: int
    opponent_hp: int
    events: list[BattleEvent] = Field(default_factory=list)
    player_moves: list[str] = Field(default_factory=list)
    opponent_moves: list[str] = Field(default_factory=list)

    @property
    def battle_log(self) -> list[str]:
        """The event messages in chronological order."""
        return [e.message for e in self.events]


# ---------------------------------------------------------------------------
# Turn order and damage model
# ---------------------------------------------------------------------------

def resolve_turn_order(player: Combatant, opponent: Combatant) -> tuple[Side, Side]:
    """Return (first, second) acting sides.

    Higher speed acts first; a tie goes to the player.
    """
    if player.speed >= opponent.speed:
        return Side.PLAYER, Side.OPPONENT
    return Side.OPPONENT, Side.PLAYER


def resolve_attack(attacker: Combatant, defender: Combatant, rng: RandomSource) -> AttackOutcome:
    """Execute one attack from `attacker` against `defender`.

    Picks a random move, rolls accuracy and, on a hit with a damaging
    move, deducts damage from the defender's HP. Only the defender is
    mutated.
    """
    move = attacker.moves[rng.randrange(len(attacker.moves))]

    # Accuracy check applies to every move, damaging or not
    if rng.randrange(100) >= move.accuracy:
        return AttackOutcome(
            move=move,
            missed=True,
            defender_hp=defender.hp,
            description=f"{attacker.name}'s {move.name} missed!",
        )

    if not move.is_damaging:
        return AttackOutcome(
            move=move,
            defender_hp=defender.hp,
            description=f"{attacker.name} used {move.name}!",
        )

    random_factor = rng.randint(config.random_factor_min, config.random_factor_max)
    effectiveness = get_type_effectiveness(move.type, defender.types)
    damage = calculate_damage(
        attacker_level=attacker.level,
        power=move.power,
        attack_stat=attacker.attack,
        defense_stat=defender.defense,
        random_factor=random_factor,
        effectiveness=effectiveness,
    )
    defender.take_damage(damage)

    parts = [
        f"{attacker.name} used {move.name}!",
        effectiveness_message(effectiveness),
        f"{damage} damage!",
        f"{defender.name} HP: {defender.hp}/{defender.max_hp}",
    ]
    return AttackOutcome(
        move=move,
        damage=damage,
        effectiveness=effectiveness,
        defender_hp=defender.hp,
        description=" ".join(p for p in parts if p),
    )


# ---------------------------------------------------------------------------
# Battle engine
# ---------------------------------------------------------------------------

class BattleEngine:
    """Runs one battle from start to conclusion.

    An engine is single use: construct it with the two combatants, then
    call run() once.
    """

    def __init__(
        self,
        player: Combatant,
        opponent: Combatant,
        max_rounds: int | None = None,
        rng: RandomSource | None = None,
    ):
        for combatant in (player, opponent):
            if not combatant.moves:
                raise InvalidCombatantError(combatant.name, "move list is empty")
            if combatant.defense < 1:
                logger.debug("Normalizing defense of %s from %d to 1", combatant.name, combatant.defense)

        if max_rounds is None or max_rounds <= 0:
            logger.debug("Round limit %r replaced with default %d", max_rounds, config.default_max_rounds)
            max_rounds = config.default_max_rounds

        self.combatants: dict[Side, Combatant] = {
            Side.PLAYER: player.battle_copy(),
            Side.OPPONENT: opponent.battle_copy(),
        }
        self.max_rounds = max_rounds
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.phase = BattlePhase.NOT_STARTED
        self.round = 0
        self.events: list[BattleEvent] = []
        self.moves_used: dict[Side, list[str]] = {Side.PLAYER: [], Side.OPPONENT: []}

    @property
    def player(self) -> Combatant:
        return self.combatants[Side.PLAYER]

    @property
    def opponent(self) -> Combatant:
        return self.combatants[Side.OPPONENT]

    def _log(self, kind: EventKind, message: str) -> None:
        self.events.append(BattleEvent(kind=kind, round=self.round, message=message))

    def _both_standing(self) -> bool:
        return not self.player.is_fainted and not self.opponent.is_fainted

    def run(self) -> BattleOutcome:
        """Run the battle to completion and return its outcome."""
        if self.phase is not BattlePhase.NOT_STARTED:
            raise RuntimeError("Battle has already been run")

        self.phase = BattlePhase.IN_PROGRESS
        self._log(
            EventKind.START,
            f"Battle started: {self.player.name} (Lv.{self.player.level}) "
            f"vs {self.opponent.name} (Lv.{self.opponent.level})",
        )
        logger.info("Battle started: %s vs %s (max %d rounds)", self.player.name, self.opponent.name, self.max_rounds)

        # Turn order is fixed for the whole battle
        first, second = resolve_turn_order(self.player, self.opponent)

        while self.round < self.max_rounds and self._both_standing():
            self.round += 1
            self._log(EventKind.ROUND, f"Round {self.round}:")
            if self._take_turn(first):
                break
            if self._take_turn(second):
                break

        self.phase = BattlePhase.CONCLUDED
        return self._conclude()

    def _take_turn(self, side: Side) -> bool:
        """Let `side` attack the other side. Returns True if the defender fainted."""
        attacker = self.combatants[side]
        defender = self.combatants[side.other]

        outcome = resolve_attack(attacker, defender, self.rng)
        self._log(EventKind.ATTACK, outcome.description)
        self.moves_used[side].append(outcome.description)

        if defender.is_fainted:
            self._log(EventKind.FAINT, f"{defender.name} fainted!")
            return True
        return False

    def _conclude(self) -> BattleOutcome:
        """Classify the winner and assemble the outcome."""
        if self.player.is_fainted:
            winner = Winner.OPPONENT
            self._log(EventKind.CONCLUSION, f"{self.opponent.name} wins the battle!")
        elif self.opponent.is_fainted:
            winner = Winner.PLAYER
            self._log(EventKind.CONCLUSION, f"{self.player.name} wins the battle!")
        else:
            winner = Winner.DRAW
            self._log(EventKind.CONCLUSION, "The battle ended in a draw!")

        logger.info("Battle concluded after %d round(s): %s", self.round, winner.value)

        return BattleOutcome(
            winner=winner,
            rounds=self.round,
            player_hp=self.player.hp,
            opponent_hp=self.opponent.hp,
            events=list(self.events),
            player_moves=list(self.moves_used[Side.PLAYER]),
            opponent_moves=list(self.moves_used[Side.OPPONENT]),
        )


def simulate(
    player: Combatant,
    opponent: Combatant,
    max_rounds: int | None = None,
    rng: RandomSource | None = None,
) -> BattleOutcome:
    """Simulate a battle between two combatants.

    `max_rounds` values of None or <= 0 fall back to the configured
    default. Pass a seeded ``random.Random`` (or any RandomSource) as
    `rng` for reproducible battles; otherwise each call gets a fresh
    private generator.

    Raises:
        InvalidCombatantError: if either combatant has no moves. Raised
            before any round runs.
    """
    return BattleEngine(player, opponent, max_rounds=max_rounds, rng=rng).run()
