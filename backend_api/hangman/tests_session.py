import random

from django.test import SimpleTestCase, override_settings

from hangman.conf import hangman_settings
from hangman.gameplay import HangmanSession, ScreenShake, WordBank, WordSupplyError, shake_offset, trigger_shake
from hangman.gameplay.effects import advance_shake


class StubWordSupply:
    """Deals the given words in order, repeating the last one."""

    def __init__(self, *words):
        self.words = list(words)
        self.calls = []

    def get_word(self, difficulty, category):
        self.calls.append((difficulty, category))
        if len(self.words) > 1:
            return self.words.pop(0)
        return self.words[0]


class BrokenWordSupply:
    def get_word(self, difficulty, category):
        raise LookupError("word list missing")


class SessionControllerTests(SimpleTestCase):
    def setUp(self):
        self.supply = StubWordSupply("CAT", "DOG")
        self.session = HangmanSession(word_supply=self.supply, rng=random.Random(1))

    def test_start_new_game_resets_state(self):
        state = self.session.start_new_game("easy", "animals")
        self.assertEqual(state.secret_word, "CAT")
        self.assertEqual(state.guessed, ())
        self.assertEqual(state.mistakes, 0)
        self.assertEqual(state.status, "in_progress")
        self.assertEqual(state.coins, 3)
        self.assertTrue(state.hint.available)
        self.assertIsNone(state.hint.pending)
        self.assertFalse(state.shake.active)
        self.assertFalse(any(p.used for p in state.power_ups))
        self.assertEqual(self.supply.calls, [("easy", "animals")])

    def test_starting_coins_by_difficulty(self):
        for difficulty, coins in (("easy", 3), ("medium", 2), ("hard", 1)):
            self.assertEqual(self.session.start_new_game(difficulty, "general").coins, coins)

    def test_defaults_to_medium_general(self):
        state = self.session.start_new_game()
        self.assertEqual((state.difficulty, state.category), ("medium", "general"))

    def test_reset_redeals_with_same_choice(self):
        self.session.start_new_game("hard", "science")
        self.session.guess_letter("Z")
        state = self.session.reset_game()
        self.assertEqual(state.secret_word, "DOG")
        self.assertEqual(state.mistakes, 0)
        self.assertEqual(self.supply.calls, [("hard", "science"), ("hard", "science")])

    def test_new_game_cancels_armed_hint(self):
        self.session.start_new_game()
        self.session.use_hint()
        state = self.session.start_new_game()
        self.session.update(1.0)
        self.assertEqual(self.session.state.guessed, ())
        self.assertTrue(state.hint.available)

    def test_hint_commits_through_update(self):
        self.session.start_new_game()
        letter = self.session.use_hint().hint.pending.letter
        self.session.update(0.5)
        self.assertFalse(self.session.is_letter_guessed(letter))
        self.session.update(0.5)
        self.assertTrue(self.session.is_letter_guessed(letter))

    def test_hint_commits_after_ten_updates(self):
        self.session.start_new_game()
        letter = self.session.use_hint().hint.pending.letter
        for _ in range(10):
            self.session.update(0.1)
        self.assertTrue(self.session.is_letter_guessed(letter))
        self.assertEqual(self.session.snapshot()["hint"]["phase"], "idle")

    def test_update_runs_screen_shake(self):
        self.session.start_new_game()
        self.assertTrue(self.session.guess_letter("Z").shake.active)
        self.assertTrue(self.session.update(0.1).shake.active)
        self.assertFalse(self.session.update(0.1).shake.active)

    def test_update_rejects_negative_dt(self):
        self.session.start_new_game()
        with self.assertRaises(ValueError):
            self.session.update(-0.1)

    def test_requires_started_game(self):
        with self.assertRaises(RuntimeError):
            self.session.guess_letter("A")
        with self.assertRaises(RuntimeError):
            self.session.reset_game()

    def test_unknown_difficulty(self):
        with self.assertRaises(ValueError):
            self.session.start_new_game("extreme", "general")

    def test_word_is_normalized(self):
        session = HangmanSession(word_supply=StubWordSupply("  cat "))
        self.assertEqual(session.start_new_game().secret_word, "CAT")

    def test_empty_word_is_rejected(self):
        session = HangmanSession(word_supply=StubWordSupply(""))
        with self.assertRaises(WordSupplyError):
            session.start_new_game()
        self.assertIsNone(session.state)

    def test_malformed_word_is_rejected(self):
        session = HangmanSession(word_supply=StubWordSupply("ICE CREAM"))
        with self.assertRaises(WordSupplyError):
            session.start_new_game()

    def test_supply_failure_is_wrapped(self):
        session = HangmanSession(word_supply=BrokenWordSupply())
        with self.assertRaises(WordSupplyError):
            session.start_new_game()

    def test_snapshot(self):
        self.session.start_new_game("medium", "general")
        self.session.guess_letter("C")
        self.session.guess_letter("Z")
        snapshot = self.session.snapshot()
        self.assertEqual(snapshot["display"], "C _ _")
        self.assertEqual(snapshot["guessed_letters"], ["C", "Z"])
        self.assertEqual(snapshot["wrong_letters"], ["Z"])
        self.assertEqual(snapshot["mistakes"], 1)
        self.assertEqual(snapshot["max_mistakes"], 6)
        self.assertEqual(snapshot["coins"], 3)
        self.assertEqual(snapshot["hint"]["phase"], "idle")
        self.assertTrue(snapshot["screen_shake"]["active"])
        self.assertIsNone(snapshot["secret_word"])
        self.assertEqual([p["affordable"] for p in snapshot["power_ups"]], [True, True, False])

    def test_snapshot_reveals_word_when_over(self):
        self.session.start_new_game()
        for letter in "BDEFGH":
            self.session.guess_letter(letter)
        snapshot = self.session.snapshot()
        self.assertEqual(snapshot["status"], "lost")
        self.assertTrue(snapshot["is_game_over"])
        self.assertEqual(snapshot["secret_word"], "CAT")
        self.assertEqual(snapshot["display"], "C A T")


class WordBankTests(SimpleTestCase):
    def test_difficulty_selects_length(self):
        bank = WordBank()
        for category in ("general", "animals", "science", "geography"):
            self.assertTrue(all(len(w) <= 5 for w in bank.words("easy", category)))
            self.assertTrue(all(6 <= len(w) <= 7 for w in bank.words("medium", category)))
            self.assertTrue(all(len(w) >= 8 for w in bank.words("hard", category)))

    def test_get_word_is_uppercase_alpha(self):
        bank = WordBank(rng=random.Random(4))
        for _ in range(20):
            word = bank.get_word("medium", "animals")
            self.assertTrue(word.isalpha())
            self.assertEqual(word, word.upper())
            self.assertIn(word, bank.words("medium", "animals"))

    def test_unknown_category(self):
        with self.assertRaises(ValueError):
            WordBank().get_word("easy", "music")

    def test_custom_words_are_normalized(self):
        bank = WordBank({"general": [" cat ", "ice cream", "DOG", "dog", ""]})
        self.assertEqual(bank.words("easy", "general"), ["CAT", "DOG"])

    def test_empty_selection_raises(self):
        bank = WordBank({"general": ["CAT"]})
        with self.assertRaises(WordSupplyError):
            bank.get_word("hard", "general")

    @override_settings(HANGMAN={"WORDS": {"animals": ["yak"]}})
    def test_words_from_settings(self):
        self.assertEqual(WordBank().get_word("easy", "animals"), "YAK")


class ScreenShakeTests(SimpleTestCase):
    def test_offset_is_zero_when_idle(self):
        self.assertEqual(shake_offset(ScreenShake(), random.Random(0)), (0.0, 0.0))

    def test_offset_within_intensity(self):
        rng = random.Random(0)
        shake = trigger_shake()
        for _ in range(20):
            dx, dy = shake_offset(shake, rng)
            self.assertTrue(-8.0 <= dx <= 8.0)
            self.assertTrue(-8.0 <= dy <= 8.0)

    def test_stops_after_duration(self):
        shake = advance_shake(trigger_shake(), 0.25)
        self.assertFalse(shake.active)
        self.assertEqual(shake.intensity, 0.0)


class SettingsTests(SimpleTestCase):
    def test_invalid_setting(self):
        with self.assertRaises(AttributeError):
            hangman_settings.NOT_A_SETTING

    @override_settings(HANGMAN={"MAX_MISTAKES": 3})
    def test_override(self):
        self.assertEqual(hangman_settings.MAX_MISTAKES, 3)
        self.assertEqual(hangman_settings.ELIMINATOR_COUNT, 3)
        session = HangmanSession(word_supply=StubWordSupply("CAT"))
        self.assertEqual(session.start_new_game().max_mistakes, 3)

    @override_settings(HANGMAN={"STARTING_COINS": {"easy": 10}})
    def test_partial_mapping_override_keeps_defaults(self):
        self.assertEqual(hangman_settings.STARTING_COINS, {"easy": 10, "medium": 2, "hard": 1})
        session = HangmanSession(word_supply=StubWordSupply("CAT"))
        self.assertEqual(session.start_new_game("easy").coins, 10)
        self.assertEqual(session.start_new_game("hard").coins, 1)
