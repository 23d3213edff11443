"""
Data models for the string GA.

Core data structures representing individuals, run parameters, generation
snapshots, and the alphabet candidates are built from.
"""

import string
from dataclasses import dataclass, replace
from typing import Any, Dict


# Fitness value of an individual that has not been ranked yet
UNEVALUATED = -1.0

SYMBOLS = "=_!@#$%^&*()<>[];:'\" \n"


def build_alphabet() -> str:
    """
    Build the ordered set of characters candidates are made of.

    Returns:
        Lowercase letters, uppercase letters, digits, then punctuation and
        whitespace symbols
    """
    return string.ascii_lowercase + string.ascii_uppercase + string.digits + SYMBOLS


DEFAULT_ALPHABET = build_alphabet()


@dataclass
class Individual:
    """
    Represents a single candidate string (individual in GA population).

    Attributes:
        data: Candidate character sequence
        diff: Distance from the target (lower is better), UNEVALUATED until ranked
    """
    data: str
    diff: float = UNEVALUATED

    @property
    def is_evaluated(self) -> bool:
        return self.diff >= 0

    def copy(self) -> "Individual":
        """
        Create an independent copy of this individual.

        Returns:
            New Individual with the same data and diff
        """
        return Individual(data=self.data, diff=self.diff)

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class GAParams:
    """
    Immutable per-run GA configuration.

    Attributes:
        generation_size: Population size after every generation
        elite_count: Best individuals carried over unchanged
        crossover_count: Children produced by crossover per generation
        mutated_count: Children produced by mutation per generation
        mutation_rate: Per-character replacement probability in [0, 1]
        individual_size: Maximum candidate length produced by mutation
    """
    generation_size: int = 500
    elite_count: int = 10
    crossover_count: int = 200
    mutated_count: int = 200
    mutation_rate: float = 0.05
    individual_size: int = 300

    @classmethod
    def for_target(cls, target: str, **overrides) -> "GAParams":
        """
        Create parameters sized for a target string.

        individual_size defaults to twice the target length.

        Args:
            target: Target string the run evolves toward
            **overrides: Field values replacing the defaults

        Returns:
            GAParams instance
        """
        if overrides.get("individual_size") is None:
            overrides["individual_size"] = 2 * len(target)
        return cls(**overrides)

    def with_overrides(self, **changes) -> "GAParams":
        return replace(self, **changes)

    def validate(self) -> None:
        """
        Check parameter ranges.

        Raises:
            ValueError: If any parameter is out of range, or the elite,
                crossover and mutation counts together overshoot the
                generation size
        """
        if self.generation_size < 1:
            raise ValueError(f"generation_size must be at least 1, got: {self.generation_size}")

        for name in ("elite_count", "crossover_count", "mutated_count"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got: {value}")

        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError(f"mutation_rate must be within [0, 1], got: {self.mutation_rate}")

        if self.individual_size < 1:
            raise ValueError(f"individual_size must be at least 1, got: {self.individual_size}")

        if self.mutated_count and not (self.elite_count or self.crossover_count):
            raise ValueError("mutated_count requires elite_count or crossover_count to be positive")

        produced = self.elite_count + self.crossover_count + self.mutated_count
        if produced > self.generation_size:
            raise ValueError(
                f"elite_count + crossover_count + mutated_count ({produced}) "
                f"exceeds generation_size ({self.generation_size})"
            )


@dataclass
class GenerationSnapshot:
    """
    Best individual of one ranked generation.

    Attributes:
        generation: Zero-based generation index
        best_diff: Fitness of the best individual
        best_data: Candidate string of the best individual
        mean_diff: Mean fitness over the ranked population
        duration_us: Wall time spent on the generation step, in microseconds
    """
    generation: int
    best_diff: float
    best_data: str
    mean_diff: float = 0.0
    duration_us: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert snapshot to dictionary for CSV export.

        Returns:
            Dictionary with string-serializable values
        """
        return {
            "generation": self.generation,
            "best_diff": self.best_diff,
            "mean_diff": self.mean_diff,
            "duration_us": self.duration_us,
            "best_data": self.best_data,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationSnapshot":
        """
        Create snapshot from dictionary (e.g., from CSV).

        Args:
            data: Dictionary with snapshot fields

        Returns:
            GenerationSnapshot instance
        """
        return cls(
            generation=int(data["generation"]),
            best_diff=float(data["best_diff"]),
            best_data=data["best_data"],
            mean_diff=float(data.get("mean_diff") or 0.0),
            duration_us=int(data.get("duration_us") or 0),
        )
