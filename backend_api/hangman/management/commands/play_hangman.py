import json
import random
import sys
from typing import Any, Dict, List

from django.core.management.base import BaseCommand
from rest_framework import serializers

from hangman.conf import hangman_settings
from hangman.gameplay import CATEGORIES, DIFFICULTIES, HangmanSession, WordSupplyError
from hangman.serializers import (
    GameSnapshotSerializer,
    GuessRequestSerializer,
    PowerUpRequestSerializer,
    StartGameRequestSerializer,
    UpdateRequestSerializer,
)

HELP_TEXT = """Commands:
  <letter>          guess a letter
  hint              arm the one-shot hint
  power <id>        use a power-up (reveal_vowel, second_chance, letter_eliminator)
  wait <seconds>    let game time pass
  reset             new word, same difficulty and category
  new [difficulty] [category]
  help              show this text
  quit              leave the game"""


def render_board(snapshot: Dict[str, Any]) -> str:
    """Plain-text view of a session snapshot."""
    hint = snapshot["hint"]
    if hint["reveal_letter"]:
        hint_line = f"letter '{hint['reveal_letter']}' is in the word!"
    elif hint["available"]:
        hint_line = "available"
    else:
        hint_line = "used"

    power_ups = []
    for p in snapshot["power_ups"]:
        if p["used"]:
            state = "USED"
        else:
            state = f"cost {p['cost']}" + ("" if p["affordable"] else ", can't afford")
        power_ups.append(f"  {p['id']:<18} {p['name']} ({state})")

    lines = [
        f"Category: {snapshot['category'].upper()}  Difficulty: {snapshot['difficulty'].upper()}",
        f"Word:    {snapshot['display']}",
        f"Guessed: {' '.join(snapshot['guessed_letters'])}",
        f"Wrong:   {snapshot['mistakes']}/{snapshot['max_mistakes']}   Coins: {snapshot['coins']}",
        f"Hint:    {hint_line}",
        "Power-ups:",
        *power_ups,
    ]
    if snapshot["status"] == "won":
        lines.append(f"YOU WIN! The word was: {snapshot['secret_word']}")
    elif snapshot["status"] == "lost":
        lines.append(f"GAME OVER. The word was: {snapshot['secret_word']}")
    return "\n".join(lines)


def _first_error(detail: Any) -> str:
    """Flatten DRF error details into one readable message."""
    if isinstance(detail, dict):
        return "; ".join(_first_error(v) for v in detail.values())
    if isinstance(detail, list):
        return "; ".join(_first_error(v) for v in detail)
    return str(detail)


class Command(BaseCommand):
    help = "Play hangman in the terminal. Reads one command per line from stdin."

    # Lets tests feed input through call_command(..., stdin=...).
    stealth_options = ("stdin",)

    def add_arguments(self, parser):
        parser.add_argument("--difficulty", choices=DIFFICULTIES, default=None)
        parser.add_argument("--category", choices=CATEGORIES, default=None)
        parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games.")
        parser.add_argument("--json", action="store_true", help="Print JSON snapshots instead of the board.")

    def handle(self, *args, **options):
        self.as_json = options["json"]
        stdin = options.get("stdin") or sys.stdin
        rng = random.Random(options["seed"])
        session = HangmanSession(rng=rng)

        start = StartGameRequestSerializer(
            data={
                "difficulty": options["difficulty"] or hangman_settings.DEFAULT_DIFFICULTY,
                "category": options["category"] or hangman_settings.DEFAULT_CATEGORY,
            }
        )
        start.is_valid(raise_exception=True)
        session.start_new_game(**start.validated_data)
        if not self.as_json:
            self.stdout.write(HELP_TEXT)
        self._show(session)

        for raw in stdin:
            line = raw.strip()
            if not line:
                continue
            command, *params = line.split()
            command = command.lower()
            if command in ("quit", "exit"):
                break
            if command == "help":
                self.stdout.write(HELP_TEXT)
                continue
            try:
                self._dispatch(session, command, params)
            except WordSupplyError as exc:
                self.stderr.write(str(exc))
                continue
            except serializers.ValidationError as exc:
                self.stderr.write(_first_error(exc.detail))
                continue
            self._show(session)

    def _dispatch(self, session: HangmanSession, command: str, params: List[str]) -> None:
        if len(command) == 1:
            guess = GuessRequestSerializer(data={"letter": command})
            guess.is_valid(raise_exception=True)
            session.guess_letter(guess.validated_data["letter"])
        elif command == "hint":
            session.use_hint()
        elif command == "power":
            request = PowerUpRequestSerializer(data={"power_up": params[0] if params else ""})
            request.is_valid(raise_exception=True)
            session.use_power_up(request.validated_data["power_up"])
        elif command == "wait":
            request = UpdateRequestSerializer(data={"seconds": params[0] if params else None})
            request.is_valid(raise_exception=True)
            self._advance(session, request.validated_data["seconds"])
        elif command == "reset":
            session.reset_game()
        elif command == "new":
            data = {}
            if params:
                data["difficulty"] = params[0]
            if len(params) > 1:
                data["category"] = params[1]
            request = StartGameRequestSerializer(data=data)
            request.is_valid(raise_exception=True)
            session.start_new_game(**request.validated_data)
        else:
            raise serializers.ValidationError({"command": f"Unknown command {command!r}; type 'help'."})

    def _advance(self, session: HangmanSession, seconds: float) -> None:
        """Run the frame loop for ``seconds`` of game time."""
        frame = float(hangman_settings.FRAME_SECS)
        remaining = seconds
        while remaining > 1e-9:
            dt = min(frame, remaining)
            session.update(dt)
            remaining -= dt

    def _show(self, session: HangmanSession) -> None:
        snapshot = GameSnapshotSerializer(session.snapshot()).data
        if self.as_json:
            self.stdout.write(json.dumps(snapshot))
        else:
            self.stdout.write(render_board(snapshot))
