from __future__ import annotations

import logging
import random
from dataclasses import replace

from ..conf import hangman_settings
from .board import guess_letter, hidden_letters
from .state import GameState, HintState, PendingGuess

logger = logging.getLogger(__name__)

# Slack for timers summed from many float frame steps.
TIME_EPSILON = 1e-9


# PUBLIC_INTERFACE
def use_hint(state: GameState, rng=random) -> GameState:
    """Pick a hidden letter and arm an auto-guess for it.

    The hint is one-shot per session. It does nothing when already spent, when
    the game is over or when no position is left hidden. Otherwise a letter is
    chosen uniformly among the distinct hidden letters, announced for
    HINT_DISPLAY_SECS and guessed automatically after HINT_DELAY_SECS of game
    time (see ``advance_hints``).

    Hidden letters are by construction letters of the word, so the armed guess
    is always a correct one.
    """
    if not state.hint.available or state.is_over:
        return state
    candidates = hidden_letters(state)
    if not candidates:
        return state

    letter = rng.choice(candidates)
    logger.debug("Hint armed for letter %s", letter)
    hint = HintState(
        available=False,
        reveal_letter=letter,
        reveal_timer=float(hangman_settings.HINT_DISPLAY_SECS),
        pending=PendingGuess(letter=letter, duration=float(hangman_settings.HINT_DELAY_SECS)),
    )
    return replace(state, hint=hint)


# PUBLIC_INTERFACE
def advance_hints(state: GameState, dt: float) -> GameState:
    """Advance the hint display timer and the armed auto-guess by ``dt`` seconds.

    The armed guess fires exactly once, through ``guess_letter``, on the tick
    its elapsed time reaches the hint delay, and is discarded afterwards.
    """
    hint = state.hint
    reveal_letter, reveal_timer = hint.reveal_letter, hint.reveal_timer
    if reveal_timer > 0:
        reveal_timer -= dt
        if reveal_timer <= TIME_EPSILON:
            reveal_timer, reveal_letter = 0.0, None

    pending, fire = hint.pending, None
    if pending is not None:
        elapsed = pending.elapsed + dt
        if elapsed >= pending.duration - TIME_EPSILON:
            pending, fire = None, pending.letter
        else:
            pending = replace(pending, elapsed=elapsed)

    state = replace(
        state,
        hint=replace(hint, reveal_letter=reveal_letter, reveal_timer=reveal_timer, pending=pending),
    )
    if fire is not None:
        logger.debug("Hint auto-guessing letter %s", fire)
        state = guess_letter(state, fire)
    return state
