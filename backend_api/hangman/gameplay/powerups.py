from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Tuple

from ..conf import hangman_settings
from .board import guess_letter
from .state import ALPHABET, VOWELS, GameState, PowerUp

logger = logging.getLogger(__name__)

Effect = Callable[[GameState, Any], GameState]


def reveal_vowel(state: GameState, rng) -> GameState:
    """Guess a random unguessed vowel of the word through the normal guess path."""
    vowels = [v for v in VOWELS if v not in state.guessed and v in state.secret_word]
    if not vowels:
        return state
    return guess_letter(state, rng.choice(vowels))


def second_chance(state: GameState, rng) -> GameState:
    """Forgive one mistake."""
    if state.mistakes <= 0:
        return state
    return replace(state, mistakes=state.mistakes - 1)


def eliminate_letters(state: GameState, rng) -> GameState:
    """Mark up to ELIMINATOR_COUNT letters absent from the word as guessed.

    The letters go straight into the guessed list: they cost no mistake and
    earn no coin.
    """
    candidates = [
        ch for ch in ALPHABET if ch not in state.guessed and ch not in state.secret_word
    ]
    count = min(hangman_settings.ELIMINATOR_COUNT, len(candidates))
    if count <= 0:
        return state
    eliminated = tuple(rng.sample(candidates, count))
    return replace(state, guessed=state.guessed + eliminated)


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class PowerUpDefinition:
    """Static description of a power-up and the effect it applies."""

    id: str
    name: str
    description: str
    default_cost: int
    effect: Effect

    @property
    def cost(self) -> int:
        costs = hangman_settings.POWER_UP_COSTS or {}
        return int(costs.get(self.id, self.default_cost))

    def fresh(self) -> PowerUp:
        """Unused per-session copy priced from the current settings."""
        return PowerUp(id=self.id, name=self.name, description=self.description, cost=self.cost)


# PUBLIC_INTERFACE
class PowerUpRegistry:
    """Registry mapping power-up identifiers to their definitions.

    Registration order is the display order of the power-up buttons.
    """

    _registry: Dict[str, PowerUpDefinition] = {
        "reveal_vowel": PowerUpDefinition(
            "reveal_vowel", "Vowel Revealer", "Reveals a random vowel", 2, reveal_vowel
        ),
        "second_chance": PowerUpDefinition(
            "second_chance", "Second Chance", "Removes one wrong guess", 3, second_chance
        ),
        "letter_eliminator": PowerUpDefinition(
            "letter_eliminator", "Letter Eliminator", "Removes 3 wrong letters", 4, eliminate_letters
        ),
    }

    @classmethod
    def get(cls, power_up_id: str) -> PowerUpDefinition:
        """Return the definition for ``power_up_id``, or raise KeyError."""
        key = (power_up_id or "").strip().lower()
        if key not in cls._registry:
            raise KeyError(f"Unknown power-up: {power_up_id!r}")
        return cls._registry[key]

    @classmethod
    def register(cls, definition: PowerUpDefinition) -> None:
        """Register or override a power-up definition."""
        if not (definition.id or "").strip():
            raise ValueError("power-up id must be a non-empty string")
        cls._registry[definition.id.strip().lower()] = definition

    @classmethod
    def ids(cls) -> List[str]:
        return list(cls._registry)

    @classmethod
    def definitions(cls) -> List[PowerUpDefinition]:
        return list(cls._registry.values())


# PUBLIC_INTERFACE
def fresh_power_ups() -> Tuple[PowerUp, ...]:
    """Unused power-ups for a new session."""
    return tuple(definition.fresh() for definition in PowerUpRegistry.definitions())


def is_affordable(state: GameState, power_up: PowerUp) -> bool:
    return state.coins >= power_up.cost


# PUBLIC_INTERFACE
def use_power_up(state: GameState, power_up_id: str, rng=random) -> GameState:
    """Buy and apply a power-up.

    Silently returns ``state`` unchanged when the power-up was already used in
    this session or the player cannot afford it. Otherwise the cost is paid,
    the power-up is marked used and its effect is applied. After the game is
    won or lost the effect does nothing; cost and used flag still apply.

    Raises:
        KeyError: if ``power_up_id`` is not registered.
    """
    definition = PowerUpRegistry.get(power_up_id)
    power_up = state.power_up(definition.id)
    if power_up.used or not is_affordable(state, power_up):
        return state

    state = replace(
        state,
        coins=state.coins - power_up.cost,
        power_ups=tuple(
            replace(p, used=True) if p.id == power_up.id else p for p in state.power_ups
        ),
    )
    logger.debug("Power-up %s used for %d coins", power_up.id, power_up.cost)
    if state.is_over:
        return state
    return definition.effect(state, rng)


# PUBLIC_INTERFACE
def power_up_options(state: GameState) -> List[Dict[str, Any]]:
    """Per power-up view for the UI, including whether it is affordable."""
    return [
        {
            "id": p.id,
            "name": p.name,
            "description": p.description,
            "cost": p.cost,
            "used": p.used,
            "affordable": is_affordable(state, p),
        }
        for p in state.power_ups
    ]
