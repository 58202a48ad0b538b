from __future__ import annotations

import random
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Tuple

from ..conf import hangman_settings
from .state import ALPHABET, CATEGORIES, DIFFICULTIES

# Inclusive word length range per difficulty; None means no upper bound.
DIFFICULTY_LENGTHS: Dict[str, Tuple[int, Optional[int]]] = {
    "easy": (3, 5),
    "medium": (6, 7),
    "hard": (8, None),
}

DEFAULT_WORDS: Dict[str, List[str]] = {
    "general": [
        "HOUSE", "CHAIR", "BREAD", "CLOUD", "APPLE", "TABLE", "LIGHT", "MUSIC",
        "RIVER", "SMILE", "PHONE", "GRASS",
        "GARDEN", "WINDOW", "BASKET", "CANDLE", "PENCIL", "JOURNEY", "BLANKET",
        "KITCHEN", "MORNING", "LIBRARY",
        "ADVENTURE", "BUTTERFLY", "CHOCOLATE", "UMBRELLA", "NEWSPAPER",
        "HOSPITAL", "KEYBOARD", "TREASURE", "MOUNTAIN", "BIRTHDAY",
    ],
    "animals": [
        "TIGER", "HORSE", "SHEEP", "EAGLE", "ZEBRA", "KOALA", "OTTER", "SHARK",
        "SNAKE", "MOUSE",
        "MONKEY", "RABBIT", "DONKEY", "PARROT", "TURTLE", "GIRAFFE", "DOLPHIN",
        "PENGUIN", "LEOPARD", "GORILLA",
        "ELEPHANT", "KANGAROO", "FLAMINGO", "CROCODILE", "ALLIGATOR",
        "CHIMPANZEE", "RHINOCEROS", "PORCUPINE", "HEDGEHOG", "SQUIRREL",
    ],
    "science": [
        "ATOM", "CELL", "GENE", "LASER", "PRISM", "ORBIT", "FORCE", "METAL",
        "ACID", "QUARK",
        "PROTON", "ENERGY", "PLASMA", "ENZYME", "NEUTRON", "GRAVITY", "CARBON",
        "FOSSIL", "OXYGEN", "ELEMENT",
        "MOLECULE", "ELECTRON", "MAGNETISM", "CHEMISTRY", "TELESCOPE",
        "HYDROGEN", "ORGANISM", "PHOTOSYNTHESIS", "EVOLUTION", "MOMENTUM",
    ],
    "geography": [
        "OCEAN", "CANAL", "BEACH", "CLIFF", "DELTA", "DUNE", "GULF", "LAKE",
        "RIDGE", "COAST",
        "DESERT", "CANYON", "GLACIER", "VOLCANO", "TUNDRA", "PLATEAU", "ISLAND",
        "LAGOON", "SAVANNA", "STEPPE",
        "PENINSULA", "CONTINENT", "ARCHIPELAGO", "RAINFOREST", "MERIDIAN",
        "LATITUDE", "LONGITUDE", "HEMISPHERE", "WATERFALL", "ESCARPMENT",
    ],
}


class WordSupplyError(ValueError):
    """The word supply could not produce a playable word."""


# PUBLIC_INTERFACE
class WordSupply(Protocol):
    """Anything that hands out a random word for a difficulty and category."""

    def get_word(self, difficulty: str, category: str) -> str: ...


def validate_choice(difficulty: str, category: str) -> Tuple[str, str]:
    """Normalize difficulty/category and raise ValueError for unknown values."""
    difficulty = (difficulty or "").strip().lower()
    category = (category or "").strip().lower()
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty: {difficulty!r}")
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category!r}")
    return difficulty, category


def is_playable(word: str) -> bool:
    return bool(word) and all(ch in ALPHABET for ch in word)


def _normalize_words(words: Iterable[str]) -> List[str]:
    """Strip and upper-case entries, dropping anything that is not A-Z only."""
    normalized = []
    for word in words:
        value = (word or "").strip().upper()
        if is_playable(value) and value not in normalized:
            normalized.append(value)
    return normalized


def _fits(word: str, difficulty: str) -> bool:
    low, high = DIFFICULTY_LENGTHS[difficulty]
    return len(word) >= low and (high is None or len(word) <= high)


# PUBLIC_INTERFACE
class WordBank:
    """In-memory word supply grouped by category; difficulty selects by length.

    Parameters:
        words: optional {category: [word, ...]} mapping. Falls back to the
               HANGMAN["WORDS"] setting, then to the built-in lists.
        rng: random source used to pick words (module ``random`` by default).
    """

    def __init__(self, words: Optional[Mapping[str, Iterable[str]]] = None, rng=None):
        source = words or hangman_settings.WORDS or DEFAULT_WORDS
        self._words: Dict[str, List[str]] = {
            category.strip().lower(): _normalize_words(entries)
            for category, entries in source.items()
        }
        self.rng = rng or random

    def words(self, difficulty: str, category: str) -> List[str]:
        """All candidate words for the given difficulty and category."""
        difficulty, category = validate_choice(difficulty, category)
        return [w for w in self._words.get(category, []) if _fits(w, difficulty)]

    # PUBLIC_INTERFACE
    def get_word(self, difficulty: str, category: str) -> str:
        """Return a random uppercase word for the difficulty and category.

        Raises:
            ValueError: for an unknown difficulty or category.
            WordSupplyError: if no word matches.
        """
        candidates = self.words(difficulty, category)
        if not candidates:
            raise WordSupplyError(f"No {difficulty} words available in category {category!r}.")
        return self.rng.choice(candidates)
