"""
Generation driver for the string GA.

Runs the evolutionary loop: rank, elitism, crossover, mutation, random fill
and replacement. Fitness evaluation is spread over a thread pool; every
random draw happens on the calling thread so a run is reproducible for a
fixed seed whatever the worker count.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Optional

import numpy as np

from .crossover import crossover
from .data_models import DEFAULT_ALPHABET, GAParams, GenerationSnapshot, Individual
from .evaluator import GuessEvaluator
from .mutation import mutate
from .population import random_individual, rank_population, resolve_worker_count
from .sampling import draw_integer


DEFAULT_SEED = 42


class GeneticAlgorithm:
    """
    Evolves a population of strings toward the evaluator's target.

    Attributes:
        evaluator: Fitness evaluator
        params: GA parameters
        alphabet: Characters used for random and mutated candidates
        rng: Random number generator shared by all operators
        workers: Number of concurrent evaluation chunks
        generation: Number of completed generation steps
    """

    def __init__(
        self,
        evaluator: GuessEvaluator,
        params: GAParams,
        alphabet: str = DEFAULT_ALPHABET,
        random_seed: Optional[int] = DEFAULT_SEED,
        rng: Optional[np.random.Generator] = None,
        workers: Optional[int] = None
    ):
        params.validate()
        if not alphabet:
            raise ValueError("alphabet must contain at least one character")

        self.evaluator = evaluator
        self.params = params
        self.alphabet = alphabet
        self.rng = rng if rng is not None else np.random.default_rng(random_seed)
        self.workers = resolve_worker_count(workers)
        self.generation = 0

        self._executor = ThreadPoolExecutor(max_workers=self.workers) if self.workers > 1 else None
        self._population = [
            random_individual(alphabet, self.rng) for _ in range(params.generation_size)
        ]

    @property
    def population(self) -> List[Individual]:
        return [individual.copy() for individual in self._population]

    def rank(self) -> List[Individual]:
        """Rank the current population in place and return it."""
        return rank_population(self._population, self.evaluator, self.workers, self._executor)

    def best(self) -> Individual:
        """
        Rank the current population and return its best individual.

        Returns:
            Copy of the individual with the lowest diff
        """
        return self.rank()[0].copy()

    def step(self) -> GenerationSnapshot:
        """
        Advance the population by one generation.

        Returns:
            Snapshot of the ranked generation that was replaced
        """
        start_time = time.perf_counter()
        params = self.params
        rng = self.rng

        ranked = self.rank()
        best = ranked[0]
        mean_diff = float(np.mean([individual.diff for individual in ranked]))

        next_generation = [individual.copy() for individual in ranked[:params.elite_count]]

        for _ in range(params.crossover_count):
            parent_a = ranked[draw_integer(rng, 0, len(ranked) - 1)]
            parent_b = ranked[draw_integer(rng, 0, len(ranked) - 1)]
            next_generation.append(crossover(parent_a, parent_b, rng))

        # Mutation sources come from elites and crossover children only
        source_count = len(next_generation)
        for _ in range(params.mutated_count):
            source = next_generation[draw_integer(rng, 0, source_count - 1)]
            next_generation.append(
                mutate(source, params.individual_size, params.mutation_rate, self.alphabet, rng)
            )

        while len(next_generation) < params.generation_size:
            next_generation.append(random_individual(self.alphabet, rng))

        self._population = next_generation

        snapshot = GenerationSnapshot(
            generation=self.generation,
            best_diff=best.diff,
            best_data=best.data,
            mean_diff=mean_diff,
            duration_us=int((time.perf_counter() - start_time) * 1_000_000),
        )
        self.generation += 1
        return snapshot

    def evolve(self, max_generations: int) -> Iterator[GenerationSnapshot]:
        """
        Run generation steps, yielding a snapshot after each one.

        Args:
            max_generations: Number of generations to run

        Yields:
            GenerationSnapshot per generation
        """
        for _ in range(max_generations):
            yield self.step()

    def run(
        self,
        max_generations: int,
        best_every: int = 1000,
        timing_every: int = 100,
        history: Optional[List[GenerationSnapshot]] = None,
        record_every: int = 1
    ) -> Optional[GenerationSnapshot]:
        """
        Run the GA for a fixed number of generations, printing progress.

        Args:
            max_generations: Generation budget (no early stopping)
            best_every: Print best diff and candidate every N generations (0 disables)
            timing_every: Print step duration every N generations (0 disables)
            history: Optional list that recorded snapshots are appended to
            record_every: Record every N-th snapshot into history (the last one
                is always recorded)

        Returns:
            Snapshot of the last generation, or None if no generation ran
        """
        snapshot = None
        for snapshot in self.evolve(max_generations):
            c = snapshot.generation
            if best_every and c % best_every == 0:
                print(f"{snapshot.best_diff:g}: {snapshot.best_data}")
            if timing_every and c % timing_every == 0:
                print(f"Duration (us): {snapshot.duration_us}")
            if history is not None and record_every and c % record_every == 0:
                history.append(snapshot)

        if history is not None and snapshot is not None and (not history or history[-1] is not snapshot):
            history.append(snapshot)
        return snapshot

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> "GeneticAlgorithm":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
