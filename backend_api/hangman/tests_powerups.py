import random
from dataclasses import replace

from django.test import SimpleTestCase, override_settings

from hangman.gameplay import LOST, WON, PowerUpRegistry, guess_letter, new_game, power_up_options, use_power_up
from hangman.gameplay.board import display_word
from hangman.gameplay.powerups import PowerUpDefinition


def _play(state, letters):
    for letter in letters:
        state = guess_letter(state, letter)
    return state


class VowelRevealerTests(SimpleTestCase):
    def setUp(self):
        self.rng = random.Random(7)

    def test_no_vowels_still_consumed(self):
        state = new_game("SKY", "easy")
        after = use_power_up(state, "reveal_vowel", self.rng)
        self.assertEqual(after.coins, state.coins - 2)
        self.assertTrue(after.power_up("reveal_vowel").used)
        self.assertEqual(display_word(after), display_word(state))
        self.assertEqual(after.guessed, ())
        self.assertEqual(after.mistakes, 0)

    def test_reveals_vowel_through_guess_path(self):
        state = new_game("CAT", "easy")
        after = use_power_up(state, "reveal_vowel", self.rng)
        self.assertEqual(after.guessed, ("A",))
        self.assertEqual(display_word(after), "_ A _")
        # cost 2, then +1 for the correct letter
        self.assertEqual(after.coins, state.coins - 2 + 1)

    def test_skips_guessed_vowels(self):
        state = guess_letter(new_game("AUDIO", "easy"), "A")
        for seed in range(10):
            after = use_power_up(state, "reveal_vowel", random.Random(seed))
            self.assertIn(after.guessed[-1], ("U", "I", "O"))

    def test_no_effect_after_loss(self):
        state = _play(new_game("CAT", "easy"), "BDEFGH")
        self.assertEqual(state.status, LOST)
        after = use_power_up(state, "reveal_vowel", self.rng)
        self.assertEqual(after.guessed, state.guessed)
        self.assertNotIn("A", after.guessed)
        self.assertEqual(after.coins, state.coins - 2)
        self.assertTrue(after.power_up("reveal_vowel").used)
        self.assertEqual(after.status, LOST)


class SecondChanceTests(SimpleTestCase):
    def test_removes_one_mistake(self):
        state = guess_letter(new_game("DOG", "easy"), "Z")
        after = use_power_up(state, "second_chance")
        self.assertEqual(after.mistakes, 0)
        self.assertEqual(after.coins, state.coins - 3)
        self.assertEqual(after.guessed, state.guessed)

    def test_without_mistakes_still_consumed(self):
        state = new_game("DOG", "easy")
        after = use_power_up(state, "second_chance")
        self.assertEqual(after.mistakes, 0)
        self.assertEqual(after.coins, 0)
        self.assertTrue(after.power_up("second_chance").used)

    def test_no_effect_after_loss(self):
        state = new_game("DOG", "easy")
        for letter in "ABCEFH":
            state = guess_letter(state, letter)
        self.assertEqual(state.status, LOST)
        after = use_power_up(state, "second_chance")
        self.assertEqual(after.coins, state.coins - 3)
        self.assertTrue(after.power_up("second_chance").used)
        self.assertEqual(after.mistakes, 6)
        self.assertEqual(after.status, LOST)


class LetterEliminatorTests(SimpleTestCase):
    def test_ax_scenario(self):
        state = replace(new_game("AX", "easy"), coins=4)
        after = use_power_up(state, "letter_eliminator", random.Random(3))
        self.assertEqual(len(after.guessed), 3)
        self.assertEqual(len(set(after.guessed)), 3)
        for letter in after.guessed:
            self.assertNotIn(letter, "AX")
        self.assertEqual(after.mistakes, 0)
        self.assertEqual(after.coins, 0)
        self.assertEqual(display_word(after), "_ _")

    def test_fewer_candidates_than_count(self):
        state = replace(new_game("ABCDEFGHIJKLMNOPQRSTUVWX", "hard"), coins=4)
        after = use_power_up(state, "letter_eliminator", random.Random(0))
        self.assertEqual(sorted(after.guessed), ["Y", "Z"])

    def test_ignores_already_guessed_letters(self):
        state = replace(guess_letter(new_game("AX", "easy"), "Q"), coins=4)
        after = use_power_up(state, "letter_eliminator", random.Random(1))
        self.assertEqual(after.guessed.count("Q"), 1)
        self.assertEqual(len(after.guessed), 4)
        self.assertEqual(after.mistakes, 1)

    def test_usable_after_vowel_revealer(self):
        state = replace(new_game("CAT", "easy"), coins=10)
        state = use_power_up(state, "reveal_vowel", random.Random(0))
        state = use_power_up(state, "letter_eliminator", random.Random(0))
        self.assertTrue(state.power_up("reveal_vowel").used)
        self.assertTrue(state.power_up("letter_eliminator").used)
        self.assertEqual(len(state.guessed), 4)

    def test_no_effect_after_win_or_loss(self):
        won = replace(_play(new_game("AX", "easy"), "AX"), coins=10)
        lost = replace(_play(new_game("AX", "easy"), "BCDEFG"), coins=10)
        self.assertEqual(won.status, WON)
        self.assertEqual(lost.status, LOST)
        for state in (won, lost):
            after = use_power_up(state, "letter_eliminator", random.Random(0))
            self.assertEqual(after.guessed, state.guessed)
            self.assertEqual(after.coins, state.coins - 4)
            self.assertTrue(after.power_up("letter_eliminator").used)
            self.assertEqual(display_word(after), display_word(state))


class EconomyTests(SimpleTestCase):
    def test_unaffordable_is_noop(self):
        state = new_game("CAT", "hard")
        self.assertIs(use_power_up(state, "letter_eliminator"), state)

    def test_one_shot_per_session(self):
        state = replace(new_game("DOG", "easy"), coins=10)
        once = use_power_up(state, "second_chance")
        self.assertIs(use_power_up(once, "second_chance"), once)

    def test_unknown_power_up_raises(self):
        with self.assertRaises(KeyError):
            use_power_up(new_game("CAT"), "time_freeze")

    def test_options_report_affordability(self):
        options = power_up_options(new_game("CAT", "medium"))
        self.assertEqual([o["id"] for o in options], ["reveal_vowel", "second_chance", "letter_eliminator"])
        self.assertEqual([o["affordable"] for o in options], [True, False, False])
        self.assertEqual([o["cost"] for o in options], [2, 3, 4])
        self.assertFalse(any(o["used"] for o in options))

    @override_settings(HANGMAN={"POWER_UP_COSTS": {"second_chance": 1}})
    def test_costs_come_from_settings(self):
        state = new_game("CAT", "hard")
        self.assertEqual(state.power_up("second_chance").cost, 1)
        self.assertEqual(state.power_up("reveal_vowel").cost, 2)

    def test_registry_register(self):
        definition = PowerUpDefinition(
            "free_coin", "Free Coin", "Gives a coin back", 0, lambda state, rng: replace(state, coins=state.coins + 1)
        )
        original = dict(PowerUpRegistry._registry)
        try:
            PowerUpRegistry.register(definition)
            state = new_game("CAT", "hard")
            after = use_power_up(state, "free_coin")
            self.assertEqual(after.coins, state.coins + 1)
            self.assertTrue(after.power_up("free_coin").used)
        finally:
            PowerUpRegistry._registry = original

    def test_registry_normalizes_ids(self):
        definition = PowerUpDefinition(
            " Free_Coin ", "Free Coin", "Gives a coin back", 0, lambda state, rng: replace(state, coins=state.coins + 1)
        )
        original = dict(PowerUpRegistry._registry)
        try:
            PowerUpRegistry.register(definition)
            self.assertIs(PowerUpRegistry.get("free_coin"), definition)
            self.assertIs(PowerUpRegistry.get("FREE_COIN"), definition)
            self.assertIn("free_coin", PowerUpRegistry.ids())
            state = new_game("CAT", "hard")
            after = use_power_up(state, "free_coin")
            self.assertEqual(after.coins, state.coins + 1)
        finally:
            PowerUpRegistry._registry = original

    def test_registry_rejects_blank_id(self):
        definition = PowerUpDefinition("  ", "Blank", "", 0, lambda state, rng: state)
        with self.assertRaises(ValueError):
            PowerUpRegistry.register(definition)
