"""
Settings for the hangman app.

All options live in a single ``HANGMAN`` dict in the project settings, e.g.:

    HANGMAN = {
        "MAX_MISTAKES": 6,
        "HINT_DELAY_SECS": 1.0,
    }

Values are resolved on every attribute access so that ``override_settings``
works in tests and the gameplay package never reads settings at import time.
When Django settings are not configured (plain library use) the defaults apply.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from django.conf import settings

DEFAULTS: Dict[str, Any] = {
    "MAX_MISTAKES": 6,
    "STARTING_COINS": {"easy": 3, "medium": 2, "hard": 1},
    "WIN_BONUS_BASE": 5,
    "POWER_UP_COSTS": {"reveal_vowel": 2, "second_chance": 3, "letter_eliminator": 4},
    "ELIMINATOR_COUNT": 3,
    "HINT_DELAY_SECS": 1.0,
    "HINT_DISPLAY_SECS": 3.0,
    "SHAKE_INTENSITY": 8.0,
    "SHAKE_DURATION_SECS": 0.2,
    "FRAME_SECS": 1 / 60,
    "DEFAULT_DIFFICULTY": "medium",
    "DEFAULT_CATEGORY": "general",
    # Optional {category: [word, ...]} mapping replacing the built-in word lists.
    "WORDS": None,
}


# PUBLIC_INTERFACE
class HangmanSettings:
    """Attribute-style access to the ``HANGMAN`` settings dict with defaults."""

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        self.defaults = defaults or DEFAULTS

    @property
    def user_settings(self) -> Dict[str, Any]:
        if not settings.configured:
            return {}
        return getattr(settings, "HANGMAN", None) or {}

    def __getattr__(self, attr: str) -> Any:
        if attr not in self.defaults:
            raise AttributeError(f"Invalid HANGMAN setting: {attr!r}")
        default = self.defaults[attr]
        value = self.user_settings.get(attr, default)
        # Partial overrides of mapping settings keep the remaining defaults.
        if isinstance(default, dict) and isinstance(value, dict):
            return {**default, **value}
        return value


hangman_settings = HangmanSettings(DEFAULTS)
