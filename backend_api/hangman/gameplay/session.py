from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Any, Dict, Optional

from ..conf import hangman_settings
from .board import display_word, guess_letter, is_letter_guessed, wrong_letters
from .effects import advance_shake
from .hints import advance_hints, use_hint
from .powerups import fresh_power_ups, power_up_options, use_power_up
from .state import GameState
from .words import WordBank, WordSupply, WordSupplyError, is_playable, validate_choice

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def new_game(word: str, difficulty: str = "medium", category: str = "general") -> GameState:
    """Build the initial state of a session around ``word``.

    Nothing guessed, no mistakes, hint available, power-ups unused, timers idle
    and the coin balance seeded by difficulty.

    Raises:
        ValueError: for an unknown difficulty/category or a word that is not
                    a non-empty A-Z string.
    """
    difficulty, category = validate_choice(difficulty, category)
    if not is_playable(word):
        raise ValueError(f"Secret word must be a non-empty A-Z string, got {word!r}.")
    return GameState(
        secret_word=word,
        difficulty=difficulty,
        category=category,
        max_mistakes=int(hangman_settings.MAX_MISTAKES),
        coins=int(hangman_settings.STARTING_COINS[difficulty]),
        power_ups=fresh_power_ups(),
    )


# PUBLIC_INTERFACE
def tick(state: GameState, dt: float) -> GameState:
    """Advance every timer of the session by ``dt`` seconds."""
    if dt < 0:
        raise ValueError("dt must be non-negative.")
    state = replace(state, shake=advance_shake(state.shake, dt))
    return advance_hints(state, dt)


# PUBLIC_INTERFACE
class HangmanSession:
    """Session controller driven by a single frame loop.

    Holds the current ``GameState`` and routes input events and frame ticks to
    the gameplay functions. Not safe for concurrent use.

    Parameters:
        word_supply: object with ``get_word(difficulty, category)``; defaults
                     to a ``WordBank`` sharing this session's random source.
        rng: random source for words, power-ups and hints.
    """

    def __init__(self, word_supply: Optional[WordSupply] = None, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.word_supply = word_supply or WordBank(rng=self.rng)
        self.state: Optional[GameState] = None

    def _require_state(self) -> GameState:
        if self.state is None:
            raise RuntimeError("No game in progress; call start_new_game() first.")
        return self.state

    # PUBLIC_INTERFACE
    def start_new_game(self, difficulty: Optional[str] = None, category: Optional[str] = None) -> GameState:
        """Deal a fresh word and reset the whole session.

        Any armed hint and running timer from the previous game is dropped.

        Raises:
            ValueError: for an unknown difficulty or category.
            WordSupplyError: if the word supply fails or returns a malformed word.
        """
        difficulty, category = validate_choice(
            difficulty or hangman_settings.DEFAULT_DIFFICULTY,
            category or hangman_settings.DEFAULT_CATEGORY,
        )
        try:
            word = self.word_supply.get_word(difficulty, category)
        except WordSupplyError:
            raise
        except (LookupError, ValueError) as exc:
            raise WordSupplyError(f"Word supply failed for {difficulty}/{category}: {exc}") from exc

        word = (word or "").strip().upper()
        if not is_playable(word):
            raise WordSupplyError(f"Word supply returned an unplayable word for {difficulty}/{category}: {word!r}")

        self.state = new_game(word, difficulty, category)
        logger.info("New %s game started in category %s (%d letters)", difficulty, category, len(word))
        return self.state

    # PUBLIC_INTERFACE
    def reset_game(self) -> GameState:
        """Deal a new word with the current difficulty and category."""
        state = self._require_state()
        logger.info("Resetting %s/%s game", state.difficulty, state.category)
        return self.start_new_game(state.difficulty, state.category)

    # PUBLIC_INTERFACE
    def guess_letter(self, letter: str) -> GameState:
        self.state = guess_letter(self._require_state(), letter)
        return self.state

    # PUBLIC_INTERFACE
    def use_power_up(self, power_up_id: str) -> GameState:
        self.state = use_power_up(self._require_state(), power_up_id, self.rng)
        return self.state

    # PUBLIC_INTERFACE
    def use_hint(self) -> GameState:
        self.state = use_hint(self._require_state(), self.rng)
        return self.state

    # PUBLIC_INTERFACE
    def update(self, dt: float) -> GameState:
        """Frame tick: advance screen shake, hint display and the armed hint."""
        self.state = tick(self._require_state(), dt)
        return self.state

    def is_letter_guessed(self, letter: str) -> bool:
        return is_letter_guessed(self._require_state(), letter)

    def is_game_over(self) -> bool:
        return self._require_state().is_over

    # PUBLIC_INTERFACE
    def snapshot(self) -> Dict[str, Any]:
        """Everything the rendering layer needs, as plain data.

        The secret word is only included once the game is over.
        """
        state = self._require_state()
        hint = state.hint
        shake = state.shake
        return {
            "difficulty": state.difficulty,
            "category": state.category,
            "display": display_word(state),
            "word_length": len(state.secret_word),
            "guessed_letters": list(state.guessed),
            "wrong_letters": wrong_letters(state),
            "mistakes": state.mistakes,
            "max_mistakes": state.max_mistakes,
            "status": state.status,
            "is_game_over": state.is_over,
            "coins": state.coins,
            "power_ups": power_up_options(state),
            "hint": {
                "available": hint.available,
                "phase": hint.phase,
                "reveal_letter": hint.reveal_letter,
                "reveal_timer": max(hint.reveal_timer, 0.0),
                "progress": hint.pending.progress if hint.pending else None,
            },
            "screen_shake": {
                "active": shake.active,
                "intensity": shake.intensity,
                "elapsed": shake.elapsed,
                "duration": shake.duration,
            },
            "secret_word": state.secret_word if state.is_over else None,
        }
