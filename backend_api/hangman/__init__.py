"""
Hangman app package initializer.

Re-exports the gameplay engine so callers can import from hangman directly,
e.g.:

    from hangman import HangmanSession, guess_letter
"""

# PUBLIC_INTERFACE
from .gameplay import (
    GameState,
    HangmanSession,
    PowerUpRegistry,
    WordBank,
    WordSupplyError,
    advance_hints,
    display_word,
    guess_letter,
    new_game,
    use_hint,
    use_power_up,
)

__all__ = [
    "GameState",
    "HangmanSession",
    "PowerUpRegistry",
    "WordBank",
    "WordSupplyError",
    "advance_hints",
    "display_word",
    "guess_letter",
    "new_game",
    "use_hint",
    "use_power_up",
]
