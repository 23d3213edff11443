"""
Mutation operator for the string GA.

Perturbs a candidate's length, then re-draws individual characters.
"""

import numpy as np

from .data_models import Individual
from .sampling import draw_integer, draw_symbols


def mutate(
    source: Individual,
    individual_size: int,
    mutation_rate: float,
    alphabet: str,
    rng: np.random.Generator
) -> Individual:
    """
    Create a mutated copy of an individual.

    1. Draws a length change so that the new length is uniform in
       [1, individual_size]; grown positions get fresh alphabet draws
    2. Replaces every character, grown ones included, with a fresh draw
       with probability mutation_rate

    Args:
        source: Individual to mutate (left unchanged)
        individual_size: Maximum length of the result
        mutation_rate: Per-character replacement probability
        alphabet: Allowed characters
        rng: Random number generator

    Returns:
        Unevaluated mutated Individual

    Raises:
        EmptyRangeError: If individual_size < 1
    """
    source_len = len(source.data)
    length_change = draw_integer(rng, 1 - source_len, individual_size - source_len)
    new_len = source_len + length_change

    data = source.data[:new_len]
    if new_len > source_len:
        data += draw_symbols(alphabet, new_len - source_len, rng)

    chars = list(data)
    hits = np.flatnonzero(rng.random(new_len) < mutation_rate)
    if hits.size:
        replacements = draw_symbols(alphabet, hits.size, rng)
        for i, symbol in zip(hits, replacements):
            chars[i] = symbol

    return Individual(data="".join(chars))
