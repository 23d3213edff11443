"""
String GA

Genetic algorithm that evolves variable-length character sequences toward a
hidden target string, guided only by a per-character distance fitness.

Key Features:
- Parallel fitness evaluation over disjoint population chunks
- Elitism, fitness-weighted crossover, length-changing mutation, random fill
- Reproducible runs: every random draw comes from one seeded generator

Modules:
- data_models: Core data structures (Individual, GAParams, GenerationSnapshot)
- evaluator: Per-character distance fitness against the target
- sampling: Validated random draws
- population: Random individuals and parallel ranking
- crossover: Fitness-weighted crossover operator
- mutation: Length and character mutation operator
- engine: Generation driver
- io_utils: Snapshot history CSV I/O
- visualization_utils: Convergence plots
- cli: Run configuration loading and command-line interface
"""

__version__ = "0.1.0"

from .data_models import (
    DEFAULT_ALPHABET,
    UNEVALUATED,
    GAParams,
    GenerationSnapshot,
    Individual,
    build_alphabet,
)
from .engine import GeneticAlgorithm
from .evaluator import GuessEvaluator

__all__ = [
    "DEFAULT_ALPHABET",
    "UNEVALUATED",
    "GAParams",
    "GenerationSnapshot",
    "Individual",
    "build_alphabet",
    "GeneticAlgorithm",
    "GuessEvaluator",
]
