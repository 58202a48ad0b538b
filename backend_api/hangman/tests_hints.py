import random

from django.test import SimpleTestCase, override_settings

from hangman.gameplay import WON, advance_hints, guess_letter, new_game, use_hint
from hangman.gameplay.board import display_word


class UseHintTests(SimpleTestCase):
    def setUp(self):
        self.rng = random.Random(11)
        self.state = guess_letter(new_game("CAT", "medium"), "C")

    def test_arms_hidden_letter(self):
        state = use_hint(self.state, self.rng)
        self.assertFalse(state.hint.available)
        self.assertEqual(state.hint.phase, "armed")
        self.assertIn(state.hint.reveal_letter, ("A", "T"))
        self.assertEqual(state.hint.pending.letter, state.hint.reveal_letter)
        self.assertEqual(state.hint.reveal_timer, 3.0)
        # nothing is guessed until time passes
        self.assertEqual(state.guessed, ("C",))

    def test_one_hint_per_session(self):
        state = advance_hints(use_hint(self.state, self.rng), 1.0)
        self.assertIs(use_hint(state, self.rng), state)

    def test_noop_when_game_over(self):
        won = guess_letter(guess_letter(self.state, "A"), "T")
        self.assertIs(use_hint(won, self.rng), won)

    def test_hint_is_always_in_word(self):
        for seed in range(25):
            state = use_hint(new_game("MISSISSIPPI"), random.Random(seed))
            self.assertIn(state.hint.pending.letter, "MISP")


class AdvanceHintsTests(SimpleTestCase):
    def setUp(self):
        self.state = use_hint(guess_letter(new_game("CAT", "medium"), "C"), random.Random(5))
        self.letter = self.state.hint.pending.letter

    def test_commits_after_one_second(self):
        state = advance_hints(self.state, 1.0)
        self.assertIn(self.letter, state.guessed)
        self.assertIsNone(state.hint.pending)
        self.assertEqual(state.hint.phase, "idle")
        self.assertEqual(state.coins, self.state.coins + 1)

    def test_waits_for_full_delay(self):
        state = advance_hints(self.state, 0.5)
        self.assertNotIn(self.letter, state.guessed)
        self.assertAlmostEqual(state.hint.pending.progress, 0.5)
        state = advance_hints(state, 0.5)
        self.assertIn(self.letter, state.guessed)

    def test_commits_after_ten_short_frames(self):
        state = self.state
        for _ in range(9):
            state = advance_hints(state, 0.1)
        self.assertNotIn(self.letter, state.guessed)
        state = advance_hints(state, 0.1)
        self.assertIn(self.letter, state.guessed)
        self.assertIsNone(state.hint.pending)

    def test_commits_after_one_second_of_frames(self):
        state = self.state
        for _ in range(60):
            state = advance_hints(state, 1 / 60)
        self.assertIn(self.letter, state.guessed)

    def test_reveal_text_clears_after_short_frames(self):
        state = self.state
        for _ in range(30):
            state = advance_hints(state, 0.1)
        self.assertIsNone(state.hint.reveal_letter)

    def test_fires_once(self):
        state = advance_hints(self.state, 1.0)
        later = advance_hints(state, 5.0)
        self.assertEqual(later.guessed, state.guessed)
        self.assertEqual(later.coins, state.coins)

    def test_reveal_text_outlives_commit(self):
        state = advance_hints(self.state, 1.0)
        self.assertEqual(state.hint.reveal_letter, self.letter)
        state = advance_hints(state, 1.5)
        self.assertEqual(state.hint.reveal_letter, self.letter)
        state = advance_hints(state, 0.5)
        self.assertIsNone(state.hint.reveal_letter)
        self.assertEqual(state.hint.reveal_timer, 0.0)

    def test_letter_guessed_manually_before_commit(self):
        state = guess_letter(self.state, self.letter)
        fired = advance_hints(state, 1.0)
        self.assertEqual(fired.guessed, state.guessed)
        self.assertEqual(fired.coins, state.coins)
        self.assertIsNone(fired.hint.pending)

    def test_commit_can_win(self):
        state = use_hint(new_game("A", "medium"), random.Random(0))
        state = advance_hints(state, 1.0)
        self.assertEqual(state.status, WON)
        self.assertEqual(display_word(state), "A")
        # 2 starting + 1 letter + 5 bonus
        self.assertEqual(state.coins, 8)

    @override_settings(HANGMAN={"HINT_DELAY_SECS": 2.0})
    def test_delay_from_settings(self):
        state = use_hint(new_game("CAT"), random.Random(0))
        state = advance_hints(state, 1.0)
        self.assertEqual(state.guessed, ())
        state = advance_hints(state, 1.0)
        self.assertEqual(len(state.guessed), 1)
