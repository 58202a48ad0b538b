"""
Guess engine: letter evaluation, display reconstruction and win/loss resolution.

The display string is never patched in place. It is always rebuilt from the
secret word and the guessed letters, so a position shown once stays shown for
the rest of the session because guessed letters only ever grow.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List

from ..conf import hangman_settings
from .effects import trigger_shake
from .state import ALPHABET, LOST, PLACEHOLDER, SEPARATOR, WON, GameState

logger = logging.getLogger(__name__)


def normalize_letter(letter: str) -> str:
    """Upper-case a guess and ensure it is a single letter A-Z."""
    value = (letter or "").strip().upper()
    if len(value) != 1 or value not in ALPHABET:
        raise ValueError(f"Guess must be a single letter A-Z, got {letter!r}.")
    return value


# PUBLIC_INTERFACE
def render_display(word: str, guessed: Iterable[str], full_reveal: bool = False) -> str:
    """Build the display string for ``word`` given the guessed letters.

    Each position shows its letter when that letter was guessed (or when
    ``full_reveal`` is set) and the placeholder otherwise; positions are joined
    by a single space, e.g. ``"C _ T"``.
    """
    revealed = set(guessed)
    return SEPARATOR.join(
        ch if full_reveal or ch in revealed else PLACEHOLDER for ch in word
    )


def is_solved(word: str, guessed: Iterable[str]) -> bool:
    """True when every position of ``word`` is revealed by ``guessed``."""
    revealed = set(guessed)
    return all(ch in revealed for ch in word)


def win_bonus(mistakes: int) -> int:
    """Coins awarded on a win; never less than one."""
    return max(1, hangman_settings.WIN_BONUS_BASE - mistakes)


# PUBLIC_INTERFACE
def display_word(state: GameState) -> str:
    """Current display string; a lost game reveals the whole word."""
    return render_display(state.secret_word, state.guessed, full_reveal=state.status == LOST)


def has_placeholders(state: GameState) -> bool:
    return PLACEHOLDER in display_word(state)


def hidden_letters(state: GameState) -> List[str]:
    """Distinct letters at positions that are still hidden, in alphabetical order."""
    if state.status == LOST:
        return []
    guessed = set(state.guessed)
    return sorted({ch for ch in state.secret_word if ch not in guessed})


def wrong_letters(state: GameState) -> List[str]:
    """Guessed letters that are not part of the word, in guess order."""
    return [ch for ch in state.guessed if ch not in state.secret_word]


# PUBLIC_INTERFACE
def is_letter_guessed(state: GameState, letter: str) -> bool:
    return normalize_letter(letter) in state.guessed


# PUBLIC_INTERFACE
def is_game_over(state: GameState) -> bool:
    return state.is_over


# PUBLIC_INTERFACE
def guess_letter(state: GameState, letter: str) -> GameState:
    """Evaluate a single letter guess.

    Rules:
    - no-op once the game is won or lost, or when the letter was already guessed
    - correct letter: reveals every occurrence and awards one coin; revealing the
      last hidden position wins and adds the win bonus
    - wrong letter: one more mistake and a screen shake; reaching the mistake
      budget loses the game and reveals the word

    Raises:
        ValueError: if ``letter`` is not a single letter A-Z.
    """
    letter = normalize_letter(letter)
    if state.is_over or letter in state.guessed:
        return state

    guessed = state.guessed + (letter,)

    if letter in state.secret_word:
        coins = state.coins + 1
        if is_solved(state.secret_word, guessed):
            bonus = win_bonus(state.mistakes)
            logger.info(
                "Word %s solved with %d mistakes, bonus %d coins",
                state.secret_word, state.mistakes, bonus,
            )
            return replace(state, guessed=guessed, coins=coins + bonus, status=WON)
        return replace(state, guessed=guessed, coins=coins)

    mistakes = min(state.mistakes + 1, state.max_mistakes)
    state = replace(state, guessed=guessed, mistakes=mistakes, shake=trigger_shake())
    if mistakes >= state.max_mistakes:
        logger.info("Word %s not found after %d mistakes", state.secret_word, mistakes)
        return replace(state, status=LOST)
    return state
