from __future__ import annotations

from typing import Any, Dict

from rest_framework import serializers

from .gameplay import CATEGORIES, DIFFICULTIES, PowerUpRegistry
from .gameplay.state import ALPHABET


def _normalize_choice(value: str) -> str:
    """Normalize incoming choice inputs."""
    return (value or "").strip().lower()


def _validate_letter(value: str) -> str:
    """Ensure the guess is exactly one letter A-Z and upper-case it."""
    value = (value or "").strip().upper()
    if len(value) != 1 or value not in ALPHABET:
        raise serializers.ValidationError("Guess must be a single letter A-Z.")
    return value


# PUBLIC_INTERFACE
class StartGameRequestSerializer(serializers.Serializer):
    """Request payload to start a new game.

    Fields:
    - difficulty (optional, default 'medium'): easy, medium or hard
    - category (optional, default 'general'): general, animals, science, geography
    """

    difficulty = serializers.ChoiceField(
        required=False, choices=[(d, d) for d in DIFFICULTIES], default="medium"
    )
    category = serializers.ChoiceField(
        required=False, choices=[(c, c) for c in CATEGORIES], default="general"
    )

    def to_internal_value(self, data: Any) -> Dict[str, Any]:
        if isinstance(data, dict):
            data = {k: _normalize_choice(v) if isinstance(v, str) else v for k, v in data.items()}
        return super().to_internal_value(data)


# PUBLIC_INTERFACE
class GuessRequestSerializer(serializers.Serializer):
    """Request payload for a single letter guess."""

    letter = serializers.CharField()

    def validate_letter(self, value: str) -> str:
        return _validate_letter(value)


# PUBLIC_INTERFACE
class PowerUpRequestSerializer(serializers.Serializer):
    """Request payload to buy and apply a power-up."""

    power_up = serializers.CharField()

    def validate_power_up(self, value: str) -> str:
        value = _normalize_choice(value)
        if value not in PowerUpRegistry.ids():
            choices = ", ".join(PowerUpRegistry.ids())
            raise serializers.ValidationError(f"Unknown power-up {value!r}; choose one of: {choices}.")
        return value


# PUBLIC_INTERFACE
class UpdateRequestSerializer(serializers.Serializer):
    """Request payload to advance game time by a number of seconds."""

    seconds = serializers.FloatField(min_value=0)


# PUBLIC_INTERFACE
class PowerUpSerializer(serializers.Serializer):
    """A power-up as shown to the player."""

    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField()
    cost = serializers.IntegerField()
    used = serializers.BooleanField()
    affordable = serializers.BooleanField()


# PUBLIC_INTERFACE
class HintSerializer(serializers.Serializer):
    """Hint availability and the pending reveal."""

    available = serializers.BooleanField()
    phase = serializers.ChoiceField(choices=["idle", "armed"])
    reveal_letter = serializers.CharField(allow_null=True)
    reveal_timer = serializers.FloatField()
    progress = serializers.FloatField(allow_null=True)


# PUBLIC_INTERFACE
class ScreenShakeSerializer(serializers.Serializer):
    """Cosmetic screen shake timer."""

    active = serializers.BooleanField()
    intensity = serializers.FloatField()
    elapsed = serializers.FloatField()
    duration = serializers.FloatField()


# PUBLIC_INTERFACE
class GameSnapshotSerializer(serializers.Serializer):
    """Full outbound state of a session, as produced by HangmanSession.snapshot()."""

    difficulty = serializers.CharField()
    category = serializers.CharField()
    display = serializers.CharField()
    word_length = serializers.IntegerField()
    guessed_letters = serializers.ListField(child=serializers.CharField())
    wrong_letters = serializers.ListField(child=serializers.CharField())
    mistakes = serializers.IntegerField()
    max_mistakes = serializers.IntegerField()
    status = serializers.ChoiceField(choices=["in_progress", "won", "lost"])
    is_game_over = serializers.BooleanField()
    coins = serializers.IntegerField()
    power_ups = PowerUpSerializer(many=True)
    hint = HintSerializer()
    screen_shake = ScreenShakeSerializer()
    secret_word = serializers.CharField(allow_null=True)
