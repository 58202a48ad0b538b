from django.test import SimpleTestCase

from hangman.gameplay import LOST, WON, guess_letter, new_game, render_display
from hangman.gameplay.board import (
    display_word,
    has_placeholders,
    is_game_over,
    is_letter_guessed,
    is_solved,
    wrong_letters,
)


def _play(state, letters):
    for letter in letters:
        state = guess_letter(state, letter)
    return state


class RenderDisplayTests(SimpleTestCase):
    def test_hides_unguessed_positions(self):
        self.assertEqual(render_display("BANANA", ["A"]), "_ A _ A _ A")

    def test_full_reveal_ignores_guesses(self):
        self.assertEqual(render_display("DOG", [], full_reveal=True), "D O G")

    def test_length_matches_word(self):
        for guessed in ([], ["E"], ["E", "L"], list("HELP")):
            display = render_display("HELLO", guessed)
            self.assertEqual(len(display.split(" ")), 5)


class GuessLetterTests(SimpleTestCase):
    def setUp(self):
        self.state = new_game("CAT", "medium", "general")

    def test_cat_scenario(self):
        state = guess_letter(self.state, "C")
        self.assertEqual(display_word(state), "C _ _")
        state = guess_letter(state, "A")
        self.assertEqual(display_word(state), "C A _")
        before_final = state.coins
        state = guess_letter(state, "T")
        self.assertEqual(display_word(state), "C A T")
        self.assertEqual(state.status, WON)
        # one coin for the letter plus max(1, 5 - 0) bonus
        self.assertEqual(state.coins, before_final + 1 + 5)

    def test_correct_guess_awards_one_coin(self):
        state = guess_letter(self.state, "A")
        self.assertEqual(state.coins, self.state.coins + 1)
        self.assertEqual(state.mistakes, 0)

    def test_wrong_guess_counts_mistake_and_shakes(self):
        state = guess_letter(self.state, "Z")
        self.assertEqual(state.mistakes, 1)
        self.assertEqual(state.coins, self.state.coins)
        self.assertTrue(state.shake.active)
        self.assertEqual(state.shake.intensity, 8.0)
        self.assertEqual(wrong_letters(state), ["Z"])

    def test_repeat_guess_is_noop(self):
        for letter in ("C", "Z"):
            once = guess_letter(self.state, letter)
            twice = guess_letter(once, letter)
            self.assertEqual(once, twice)

    def test_lowercase_is_accepted(self):
        state = guess_letter(self.state, "c")
        self.assertTrue(is_letter_guessed(state, "C"))
        self.assertTrue(is_letter_guessed(state, "c"))

    def test_invalid_letter_raises(self):
        for bad in ("", "1", "AB", "É", None):
            with self.assertRaises(ValueError):
                guess_letter(self.state, bad)

    def test_guessed_letters_keep_order(self):
        state = _play(self.state, "TZC")
        self.assertEqual(state.guessed, ("T", "Z", "C"))

    def test_repeated_letters_revealed_together(self):
        state = guess_letter(new_game("BANANA"), "N")
        self.assertEqual(display_word(state), "_ _ N _ N _")


class GameOutcomeTests(SimpleTestCase):
    def test_dog_loss_reveals_word(self):
        state = _play(new_game("DOG"), "ABCEFH")
        self.assertEqual(state.mistakes, 6)
        self.assertEqual(state.status, LOST)
        self.assertEqual(display_word(state), "D O G")

    def test_no_guesses_after_loss(self):
        lost = _play(new_game("DOG"), "ABCEFH")
        self.assertIs(guess_letter(lost, "D"), lost)
        self.assertIs(guess_letter(lost, "Z"), lost)

    def test_no_guesses_after_win(self):
        won = _play(new_game("CAT"), "CAT")
        self.assertIs(guess_letter(won, "Z"), won)

    def test_mistakes_never_exceed_budget(self):
        state = _play(new_game("DOG"), "ABCEFHIJKLMN")
        self.assertEqual(state.mistakes, state.max_mistakes)

    def test_win_bonus_shrinks_with_mistakes(self):
        state = _play(new_game("AB", "medium"), "ZYXW")
        state = _play(state, "AB")
        # 2 starting + 2 correct letters + max(1, 5 - 4)
        self.assertEqual(state.coins, 5)

    def test_win_bonus_is_at_least_one(self):
        state = _play(new_game("AB", "medium"), "ZYXWV")
        self.assertEqual(state.mistakes, 5)
        before = state.coins
        state = _play(state, "AB")
        self.assertEqual(state.status, WON)
        self.assertEqual(state.coins, before + 2 + 1)

    def test_won_iff_solved_and_never_both(self):
        state = new_game("LEVEL")
        for letter in "ZLQEV":
            state = guess_letter(state, letter)
            solved = is_solved(state.secret_word, state.guessed)
            self.assertEqual(state.status == WON, solved)
            self.assertEqual(state.status == LOST, state.mistakes == state.max_mistakes)
            self.assertEqual(len(display_word(state).split(" ")), len(state.secret_word))
        self.assertEqual(state.status, WON)

    def test_placeholders_and_game_over_flags(self):
        state = new_game("CAT")
        self.assertTrue(has_placeholders(state))
        self.assertFalse(is_game_over(state))
        won = _play(state, "CAT")
        self.assertFalse(has_placeholders(won))
        self.assertTrue(is_game_over(won))
        lost = _play(state, "BDEFGH")
        self.assertTrue(is_game_over(lost))
        self.assertFalse(has_placeholders(lost))
