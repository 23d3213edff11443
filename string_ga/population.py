"""
Population seeding and ranking.

Ranking evaluates fitness for every individual in parallel over disjoint
contiguous chunks, then sorts the population by ascending diff. Random draws
never happen inside worker threads.
"""

import os
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from .data_models import Individual
from .evaluator import GuessEvaluator
from .sampling import draw_integer, draw_symbols


RANDOM_MIN_LENGTH = 1
RANDOM_MAX_LENGTH = 30


def random_individual(alphabet: str, rng: np.random.Generator) -> Individual:
    """
    Create a fresh random individual.

    Args:
        alphabet: Allowed characters
        rng: Random number generator

    Returns:
        Unevaluated Individual with length in [RANDOM_MIN_LENGTH, RANDOM_MAX_LENGTH]
    """
    length = draw_integer(rng, RANDOM_MIN_LENGTH, RANDOM_MAX_LENGTH)
    return Individual(data=draw_symbols(alphabet, length, rng))


def resolve_worker_count(workers: Optional[int] = None) -> int:
    """
    Determine how many evaluation workers to use.

    Args:
        workers: Requested worker count (None or <= 0 for auto-detection)

    Returns:
        Worker count, falling back to 1 when hardware concurrency is unknown
    """
    if workers is not None and workers > 0:
        return workers
    return os.cpu_count() or 1


def partition_ranges(size: int, workers: int) -> List[Tuple[int, int]]:
    """
    Split [0, size) into contiguous disjoint chunks, one per worker.

    Every chunk has size // workers elements; the last one also takes the
    remainder. Empty chunks are dropped.

    Args:
        size: Number of items to partition
        workers: Number of chunks requested

    Returns:
        List of (start, end) half-open ranges
    """
    workers = max(1, min(workers, size)) if size else 1
    chunk_size = size // workers

    ranges = []
    for t in range(workers):
        start = t * chunk_size
        end = size if t == workers - 1 else (t + 1) * chunk_size
        if end > start:
            ranges.append((start, end))
    return ranges


def _evaluate_range(
    population: List[Individual],
    evaluator: GuessEvaluator,
    start: int,
    end: int
) -> None:
    for i in range(start, end):
        individual = population[i]
        individual.diff = evaluator.evaluate(individual.data)


def rank_population(
    population: List[Individual],
    evaluator: GuessEvaluator,
    workers: int = 1,
    executor: Optional[Executor] = None
) -> List[Individual]:
    """
    Evaluate every individual and sort the population by ascending diff.

    Args:
        population: Population to rank (sorted in place)
        evaluator: Fitness evaluator
        workers: Number of disjoint chunks evaluated concurrently
        executor: Executor to run chunks on (a temporary thread pool is
            used if not given)

    Returns:
        The same list, sorted by non-decreasing diff
    """
    ranges = partition_ranges(len(population), workers)

    if len(ranges) <= 1:
        for start, end in ranges:
            _evaluate_range(population, evaluator, start, end)
    elif executor is not None:
        _evaluate_on(executor, population, evaluator, ranges)
    else:
        with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
            _evaluate_on(pool, population, evaluator, ranges)

    population.sort(key=lambda individual: individual.diff)
    return population


def _evaluate_on(
    executor: Executor,
    population: List[Individual],
    evaluator: GuessEvaluator,
    ranges: List[Tuple[int, int]]
) -> None:
    futures = [
        executor.submit(_evaluate_range, population, evaluator, start, end)
        for start, end in ranges
    ]
    # Join every chunk before sorting
    for future in futures:
        future.result()
