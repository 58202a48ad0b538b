from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

GameStatus = Literal["in_progress", "won", "lost"]
HintPhase = Literal["idle", "armed"]

IN_PROGRESS: GameStatus = "in_progress"
WON: GameStatus = "won"
LOST: GameStatus = "lost"

DIFFICULTIES: Tuple[str, ...] = ("easy", "medium", "hard")
CATEGORIES: Tuple[str, ...] = ("general", "animals", "science", "geography")

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
VOWELS: Tuple[str, ...] = ("A", "E", "I", "O", "U")

PLACEHOLDER = "_"
SEPARATOR = " "


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class PowerUp:
    """A one-shot power-up as held by a single game session."""

    id: str
    name: str
    description: str
    cost: int
    used: bool = False


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class PendingGuess:
    """An armed auto-guess: ``letter`` is committed once ``elapsed`` reaches ``duration``."""

    letter: str
    duration: float
    elapsed: float = 0.0

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(self.elapsed / self.duration, 1.0)


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class HintState:
    """Hint availability, the cosmetic reveal text and the armed auto-guess.

    Fields:
    - available: one hint per session; cleared when the hint is used
    - reveal_letter: letter announced to the player while reveal_timer runs
    - reveal_timer: seconds left for the announcement (display only)
    - pending: the armed auto-guess, if any
    """

    available: bool = True
    reveal_letter: Optional[str] = None
    reveal_timer: float = 0.0
    pending: Optional[PendingGuess] = None

    @property
    def phase(self) -> HintPhase:
        return "armed" if self.pending is not None else "idle"


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class ScreenShake:
    """Fire-and-forget shake timer triggered by wrong guesses."""

    active: bool = False
    intensity: float = 0.0
    duration: float = 0.0
    elapsed: float = 0.0


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class GameState:
    """Complete state of one hangman session.

    Instances are never mutated; gameplay functions return a new state built
    with ``dataclasses.replace``. ``guessed`` keeps insertion order for display.
    """

    secret_word: str
    difficulty: str = "medium"
    category: str = "general"
    guessed: Tuple[str, ...] = ()
    mistakes: int = 0
    max_mistakes: int = 6
    status: GameStatus = IN_PROGRESS
    coins: int = 0
    power_ups: Tuple[PowerUp, ...] = ()
    hint: HintState = field(default_factory=HintState)
    shake: ScreenShake = field(default_factory=ScreenShake)

    @property
    def is_over(self) -> bool:
        return self.status != IN_PROGRESS

    def power_up(self, power_up_id: str) -> PowerUp:
        """Return the session's power-up with the given id, or raise KeyError."""
        for power_up in self.power_ups:
            if power_up.id == power_up_id:
                return power_up
        raise KeyError(f"Unknown power-up: {power_up_id!r}")
