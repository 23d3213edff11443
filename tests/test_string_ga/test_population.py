"""
Tests for population partitioning and parallel ranking.
"""

import unittest
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from string_ga.data_models import DEFAULT_ALPHABET
from string_ga.evaluator import GuessEvaluator
from string_ga.population import (
    partition_ranges,
    random_individual,
    rank_population,
    resolve_worker_count,
)


class FailingEvaluator(GuessEvaluator):
    """Evaluator that fails on a marker candidate."""

    def evaluate(self, guess: str) -> float:
        if guess == "boom":
            raise RuntimeError("evaluation failed")
        return super().evaluate(guess)


class TestPartitioning(unittest.TestCase):
    """Test splitting the population into worker chunks."""

    def test_even_and_remainder_chunks(self):
        """The last chunk takes the remainder."""
        self.assertEqual(partition_ranges(9, 3), [(0, 3), (3, 6), (6, 9)])
        self.assertEqual(partition_ranges(10, 3), [(0, 3), (3, 6), (6, 10)])
        self.assertEqual(partition_ranges(10, 1), [(0, 10)])

    def test_more_workers_than_items(self):
        self.assertEqual(partition_ranges(3, 8), [(0, 1), (1, 2), (2, 3)])

    def test_empty_population(self):
        self.assertEqual(partition_ranges(0, 4), [])

    def test_ranges_cover_every_index_once(self):
        """Chunks are disjoint and cover the whole population."""
        for size in [1, 7, 50, 500, 501]:
            for workers in [1, 2, 3, 8, 16]:
                covered = []
                for start, end in partition_ranges(size, workers):
                    covered.extend(range(start, end))
                self.assertEqual(covered, list(range(size)), msg=f"size={size} workers={workers}")

    def test_resolve_worker_count(self):
        """Explicit counts are kept; missing counts fall back to at least 1."""
        self.assertEqual(resolve_worker_count(4), 4)
        self.assertGreaterEqual(resolve_worker_count(None), 1)
        self.assertGreaterEqual(resolve_worker_count(0), 1)


class TestRanking(unittest.TestCase):
    """Test fitness evaluation and sorting."""

    def setUp(self):
        self.evaluator = GuessEvaluator("Hello, World!")
        rng = np.random.default_rng(3)
        self.population = [random_individual(DEFAULT_ALPHABET, rng) for _ in range(101)]

    def assert_ranked(self, ranked):
        diffs = [individual.diff for individual in ranked]
        self.assertEqual(diffs, sorted(diffs))
        for individual in ranked:
            self.assertTrue(individual.is_evaluated)
            self.assertEqual(individual.diff, self.evaluator.evaluate(individual.data))

    def test_rank_single_worker(self):
        """Ranking sorts by non-decreasing diff and keeps the size."""
        ranked = rank_population(self.population, self.evaluator, workers=1)
        self.assertIs(ranked, self.population)
        self.assertEqual(len(ranked), 101)
        self.assert_ranked(ranked)

    def test_rank_parallel_matches_sequential(self):
        """Parallel evaluation produces the same ranking as sequential."""
        sequential = [ind.copy() for ind in self.population]
        parallel = [ind.copy() for ind in self.population]

        rank_population(sequential, self.evaluator, workers=1)
        rank_population(parallel, self.evaluator, workers=4)

        self.assert_ranked(parallel)
        self.assertEqual(
            [(ind.data, ind.diff) for ind in sequential],
            [(ind.data, ind.diff) for ind in parallel]
        )

    def test_rank_with_shared_executor(self):
        with ThreadPoolExecutor(max_workers=3) as executor:
            ranked = rank_population(self.population, self.evaluator, workers=3, executor=executor)
        self.assertEqual(len(ranked), 101)
        self.assert_ranked(ranked)

    def test_rank_keeps_same_individuals(self):
        before = sorted(ind.data for ind in self.population)
        rank_population(self.population, self.evaluator, workers=5)
        self.assertEqual(sorted(ind.data for ind in self.population), before)

    def test_worker_error_propagates(self):
        """An exception inside a worker surfaces after the join."""
        self.population[60].data = "boom"
        with self.assertRaises(RuntimeError):
            rank_population(self.population, FailingEvaluator("abc"), workers=4)

    def test_rank_empty_population(self):
        self.assertEqual(rank_population([], self.evaluator, workers=4), [])


if __name__ == '__main__':
    unittest.main()
