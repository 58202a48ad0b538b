"""
Hangman gameplay engine.

Exports:
- GameState and the other frozen state records
- guess engine helpers (guess_letter, render_display, display_word, ...)
- PowerUpRegistry and use_power_up for the coin economy
- use_hint and advance_hints for the delayed hint
- WordBank, the default word supply
- HangmanSession, the frame-loop facade, and new_game/tick

These modules are framework-agnostic: they only read the optional HANGMAN
settings block and never touch models or requests.
"""

from .state import (
    CATEGORIES,
    DIFFICULTIES,
    IN_PROGRESS,
    LOST,
    WON,
    GameState,
    HintState,
    PendingGuess,
    PowerUp,
    ScreenShake,
)
from .board import display_word, guess_letter, is_game_over, is_letter_guessed, render_display
from .effects import advance_shake, shake_offset, trigger_shake
from .powerups import PowerUpDefinition, PowerUpRegistry, power_up_options, use_power_up
from .hints import advance_hints, use_hint
from .words import WordBank, WordSupply, WordSupplyError
from .session import HangmanSession, new_game, tick

__all__ = [
    "CATEGORIES",
    "DIFFICULTIES",
    "IN_PROGRESS",
    "LOST",
    "WON",
    "GameState",
    "HintState",
    "PendingGuess",
    "PowerUp",
    "ScreenShake",
    "display_word",
    "guess_letter",
    "is_game_over",
    "is_letter_guessed",
    "render_display",
    "advance_shake",
    "shake_offset",
    "trigger_shake",
    "PowerUpDefinition",
    "PowerUpRegistry",
    "power_up_options",
    "use_power_up",
    "advance_hints",
    "use_hint",
    "WordBank",
    "WordSupply",
    "WordSupplyError",
    "HangmanSession",
    "new_game",
    "tick",
]
