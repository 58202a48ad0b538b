import json
import random
from io import StringIO

from django.core.management import call_command
from django.test import SimpleTestCase, override_settings
from rest_framework.test import APISimpleTestCase

from hangman.gameplay import HangmanSession
from hangman.serializers import (
    GameSnapshotSerializer,
    GuessRequestSerializer,
    PowerUpRequestSerializer,
    StartGameRequestSerializer,
    UpdateRequestSerializer,
)


class RequestSerializerTests(APISimpleTestCase):
    def test_guess_is_upper_cased(self):
        serializer = GuessRequestSerializer(data={"letter": " c "})
        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.validated_data["letter"], "C")

    def test_guess_rejects_non_letters(self):
        for bad in ("", "ab", "7", "?"):
            self.assertFalse(GuessRequestSerializer(data={"letter": bad}).is_valid())

    def test_start_game_defaults(self):
        serializer = StartGameRequestSerializer(data={})
        self.assertTrue(serializer.is_valid())
        self.assertEqual(dict(serializer.validated_data), {"difficulty": "medium", "category": "general"})

    def test_start_game_normalizes_choices(self):
        serializer = StartGameRequestSerializer(data={"difficulty": "EASY", "category": " Animals"})
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data["difficulty"], "easy")
        self.assertEqual(serializer.validated_data["category"], "animals")

    def test_start_game_rejects_unknown_difficulty(self):
        serializer = StartGameRequestSerializer(data={"difficulty": "extreme"})
        self.assertFalse(serializer.is_valid())
        self.assertIn("difficulty", serializer.errors)

    def test_power_up_choices(self):
        self.assertTrue(PowerUpRequestSerializer(data={"power_up": "Second_Chance"}).is_valid())
        self.assertFalse(PowerUpRequestSerializer(data={"power_up": "time_freeze"}).is_valid())

    def test_update_rejects_negative_time(self):
        self.assertTrue(UpdateRequestSerializer(data={"seconds": "1.5"}).is_valid())
        self.assertFalse(UpdateRequestSerializer(data={"seconds": -1}).is_valid())


class SnapshotSerializerTests(APISimpleTestCase):
    def test_renders_session_snapshot(self):
        session = HangmanSession(rng=random.Random(2))
        session.start_new_game("easy", "science")
        data = GameSnapshotSerializer(session.snapshot()).data
        self.assertEqual(data["status"], "in_progress")
        self.assertEqual(data["coins"], 3)
        self.assertIsNone(data["secret_word"])
        self.assertIsNone(data["hint"]["reveal_letter"])
        self.assertEqual(len(data["power_ups"]), 3)
        self.assertEqual(len(data["display"].split(" ")), data["word_length"])


class PlayHangmanCommandTests(SimpleTestCase):
    def _play(self, lines, *args):
        out, err = StringIO(), StringIO()
        call_command("play_hangman", *args, stdin=StringIO(lines), stdout=out, stderr=err)
        return out.getvalue(), err.getvalue()

    def _snapshots(self, output):
        return [json.loads(line) for line in output.strip().splitlines()]

    def test_board_output(self):
        out, _ = self._play("quit\n", "--difficulty", "easy", "--category", "animals", "--seed", "3")
        self.assertIn("Category: ANIMALS  Difficulty: EASY", out)
        self.assertIn("Wrong:   0/6   Coins: 3", out)

    @override_settings(HANGMAN={"WORDS": {"general": ["DOG"]}})
    def test_losing_game(self):
        out, _ = self._play("z\ny\nx\nw\nv\nu\n", "--difficulty", "easy", "--json")
        final = self._snapshots(out)[-1]
        self.assertEqual(final["status"], "lost")
        self.assertEqual(final["mistakes"], 6)
        self.assertEqual(final["display"], "D O G")
        self.assertEqual(final["secret_word"], "DOG")

    @override_settings(HANGMAN={"WORDS": {"general": ["CAT"]}})
    def test_hint_commits_after_waiting(self):
        out, _ = self._play("hint\nwait 2\n", "--difficulty", "easy", "--json")
        armed, committed = self._snapshots(out)[1:]
        self.assertEqual(armed["hint"]["phase"], "armed")
        self.assertEqual(armed["guessed_letters"], [])
        self.assertEqual(committed["guessed_letters"], [armed["hint"]["reveal_letter"]])
        self.assertEqual(committed["coins"], 4)

    @override_settings(HANGMAN={"WORDS": {"general": ["SKY"]}})
    def test_power_up(self):
        out, _ = self._play("power reveal_vowel\n", "--difficulty", "easy", "--json")
        final = self._snapshots(out)[-1]
        self.assertEqual(final["coins"], 1)
        self.assertTrue(final["power_ups"][0]["used"])

    def test_invalid_input_is_reported(self):
        out, err = self._play("7\npower time_freeze\ndance\nwait -1\n", "--json")
        self.assertEqual(len(self._snapshots(out)), 1)
        self.assertIn("Guess must be a single letter A-Z.", err)
        self.assertIn("time_freeze", err)
        self.assertIn("Unknown command 'dance'", err)

    @override_settings(HANGMAN={"WORDS": {"general": ["DOG"]}})
    def test_missing_words_keep_current_game(self):
        out, err = self._play("d\nnew easy animals\no\n", "--difficulty", "easy", "--json")
        self.assertIn("No easy words available in category 'animals'.", err)
        snapshots = self._snapshots(out)
        # start, "d" and "o"; the failed "new" prints nothing
        self.assertEqual(len(snapshots), 3)
        final = snapshots[-1]
        self.assertEqual(final["category"], "general")
        self.assertEqual(final["guessed_letters"], ["D", "O"])

    def test_new_game_command(self):
        out, _ = self._play("new hard geography\n", "--json", "--seed", "5")
        final = self._snapshots(out)[-1]
        self.assertEqual((final["difficulty"], final["category"]), ("hard", "geography"))
        self.assertGreaterEqual(final["word_length"], 8)


class WordBankCommandTests(SimpleTestCase):
    def test_counts(self):
        out = StringIO()
        call_command("word_bank", "--category", "animals", stdout=out)
        self.assertIn("animals/hard: 10 words", out.getvalue())
        self.assertNotIn("general/", out.getvalue())

    def test_list(self):
        out = StringIO()
        call_command("word_bank", "--category", "science", "--difficulty", "easy", "--list", stdout=out)
        self.assertIn("QUARK", out.getvalue())
