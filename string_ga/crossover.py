"""
Crossover operator for the string GA.

Blends two parents position by position, biased toward the fitter parent.
"""

from typing import Tuple

import numpy as np

from .data_models import Individual

# Keeps both weights positive when a parent scores 0
WEIGHT_FLOOR = 2.0


def crossover_weights(parent_a: Individual, parent_b: Individual) -> Tuple[float, float]:
    """
    Sampling weights of the two parents.

    Each parent is weighted by the other parent's diff, so the parent with the
    lower diff is favored.

    Args:
        parent_a: First parent
        parent_b: Second parent

    Returns:
        Tuple of (weight_a, weight_b)
    """
    return WEIGHT_FLOOR + parent_b.diff, WEIGHT_FLOOR + parent_a.diff


def crossover(
    parent_a: Individual,
    parent_b: Individual,
    rng: np.random.Generator
) -> Individual:
    """
    Combine two parents into one child.

    The child's length is the mean of the parents' lengths (rounded down).
    It starts as the longer parent's data cut to that length, so positions
    past the shorter parent are inherited verbatim. Every position the
    parents share is then taken from parent A or parent B by a weighted coin.

    Args:
        parent_a: First parent
        parent_b: Second parent
        rng: Random number generator

    Returns:
        Unevaluated child Individual
    """
    len_a, len_b = len(parent_a.data), len(parent_b.data)
    child_len = (len_a + len_b) // 2
    longer = parent_a if len_a > len_b else parent_b

    chars = list(longer.data[:child_len])
    overlap = min(len_a, len_b)

    weight_a, weight_b = crossover_weights(parent_a, parent_b)
    prob_a = weight_a / (weight_a + weight_b)

    if overlap:
        from_a = rng.random(overlap) < prob_a
        for i in range(overlap):
            chars[i] = parent_a.data[i] if from_a[i] else parent_b.data[i]

    return Individual(data="".join(chars))
