"""
Tests for fitness evaluation and data models.
"""

import unittest

from string_ga.data_models import (
    DEFAULT_ALPHABET,
    UNEVALUATED,
    GAParams,
    Individual,
    build_alphabet,
)
from string_ga.evaluator import CHAR_WEIGHT, LENGTH_WEIGHT, GuessEvaluator


class TestGuessEvaluator(unittest.TestCase):
    """Test per-character distance fitness."""

    def test_exact_match_scores_zero(self):
        """A candidate equal to the target has diff 0."""
        for target in ["a", "abc", "Hello, World!", "struct GAParams {\n};\n"]:
            self.assertEqual(GuessEvaluator(target).evaluate(target), 0.0)

    def test_character_distance(self):
        """Each position adds the code point distance times 256."""
        evaluator = GuessEvaluator("abc")
        self.assertEqual(evaluator.evaluate("abd"), 1 * CHAR_WEIGHT)
        self.assertEqual(evaluator.evaluate("aac"), 1 * CHAR_WEIGHT)
        self.assertEqual(evaluator.evaluate("Abc"), (ord("a") - ord("A")) * CHAR_WEIGHT)

    def test_length_penalty(self):
        """Every character of length mismatch adds 256 squared."""
        evaluator = GuessEvaluator("abc")
        self.assertEqual(evaluator.evaluate("ab"), LENGTH_WEIGHT)
        self.assertEqual(evaluator.evaluate("abcab"), 2 * LENGTH_WEIGHT)
        self.assertEqual(evaluator.evaluate("bbcd"), CHAR_WEIGHT + LENGTH_WEIGHT)

    def test_empty_strings(self):
        """Empty candidates and targets score by length alone."""
        self.assertEqual(GuessEvaluator("abc").evaluate(""), 3 * LENGTH_WEIGHT)
        self.assertEqual(GuessEvaluator("").evaluate("xy"), 2 * LENGTH_WEIGHT)
        self.assertEqual(GuessEvaluator("").evaluate(""), 0.0)

    def test_symmetric(self):
        """Swapping target and candidate gives the same score."""
        pairs = [
            ("abc", "xyz"),
            ("abc", "a"),
            ("", "hello"),
            ("GAParams", "gaparams!!"),
            ("short", "a much longer candidate"),
        ]
        for s, t in pairs:
            self.assertEqual(
                GuessEvaluator(s).evaluate(t),
                GuessEvaluator(t).evaluate(s),
                msg=f"{s!r} vs {t!r}"
            )

    def test_non_negative(self):
        """Scores are never negative."""
        evaluator = GuessEvaluator("target")
        for guess in ["", "t", "target", "TARGET", "~~~~~~~~~~~~~~~~", "\n"]:
            self.assertGreaterEqual(evaluator.evaluate(guess), 0.0)

    def test_returns_float(self):
        self.assertIsInstance(GuessEvaluator("abc").evaluate("abd"), float)

    def test_target_is_read_only(self):
        evaluator = GuessEvaluator("abc")
        self.assertEqual(evaluator.target, "abc")
        with self.assertRaises(AttributeError):
            evaluator.target = "xyz"


class TestDataModels(unittest.TestCase):
    """Test core data model classes."""

    def test_individual_defaults_to_unevaluated(self):
        ind = Individual(data="abc")
        self.assertEqual(ind.diff, UNEVALUATED)
        self.assertFalse(ind.is_evaluated)
        self.assertEqual(len(ind), 3)

    def test_individual_copy(self):
        """Copies are independent of the original."""
        ind1 = Individual(data="abc", diff=12.0)
        ind2 = ind1.copy()
        ind2.diff = 0.0
        ind2.data = "xyz"

        self.assertEqual(ind1.data, "abc")
        self.assertEqual(ind1.diff, 12.0)

    def test_alphabet_contents(self):
        """Alphabet holds letters, digits and the fixed symbol set, in order."""
        alphabet = build_alphabet()
        self.assertEqual(alphabet, DEFAULT_ALPHABET)
        self.assertTrue(alphabet.startswith("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"))
        for symbol in "=_!@#$%^&*()<>[];:'\" \n":
            self.assertIn(symbol, alphabet)
        self.assertEqual(len(alphabet), len(set(alphabet)))
        self.assertEqual(len(alphabet), 84)

    def test_params_for_target(self):
        """individual_size defaults to twice the target length."""
        params = GAParams.for_target("abcd")
        self.assertEqual(params.individual_size, 8)
        self.assertEqual(params.generation_size, 500)
        self.assertEqual(params.elite_count, 10)
        self.assertEqual(params.crossover_count, 200)
        self.assertEqual(params.mutated_count, 200)
        self.assertAlmostEqual(params.mutation_rate, 0.05)

        params = GAParams.for_target("abcd", individual_size=3, generation_size=60)
        self.assertEqual(params.individual_size, 3)
        self.assertEqual(params.generation_size, 60)

    def test_params_validate(self):
        """Out-of-range parameters are rejected."""
        GAParams().validate()

        invalid = [
            dict(generation_size=0, elite_count=0, crossover_count=0, mutated_count=0),
            dict(elite_count=-1),
            dict(mutation_rate=1.5),
            dict(mutation_rate=-0.1),
            dict(individual_size=0),
            dict(generation_size=100),
            dict(elite_count=0, crossover_count=0, mutated_count=5),
        ]
        for changes in invalid:
            with self.assertRaises(ValueError, msg=str(changes)):
                GAParams().with_overrides(**changes).validate()

    def test_params_are_frozen(self):
        params = GAParams()
        with self.assertRaises(Exception):
            params.elite_count = 3


if __name__ == '__main__':
    unittest.main()
