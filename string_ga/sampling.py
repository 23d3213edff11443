"""
Random draws shared by the GA operators.

All draws go through one numpy Generator owned by the GA driver.
"""

import numpy as np


class EmptyRangeError(ValueError):
    """Raised when a random integer range has no values to draw from."""
    pass


def draw_integer(rng: np.random.Generator, low: int, high: int) -> int:
    """
    Draw an integer uniformly from the inclusive range [low, high].

    Args:
        rng: Random number generator
        low: Smallest value that may be drawn
        high: Largest value that may be drawn

    Returns:
        Drawn integer

    Raises:
        EmptyRangeError: If low > high
    """
    if low > high:
        raise EmptyRangeError(f"Cannot draw from empty range [{low}, {high}]")
    return int(rng.integers(low, high + 1))


def draw_symbols(alphabet: str, count: int, rng: np.random.Generator) -> str:
    """
    Draw characters uniformly (with replacement) from an alphabet.

    Args:
        alphabet: Allowed characters
        count: Number of characters to draw
        rng: Random number generator

    Returns:
        String of `count` drawn characters
    """
    if count <= 0:
        return ""
    if not alphabet:
        raise EmptyRangeError("Cannot draw symbols from an empty alphabet")
    indices = rng.integers(0, len(alphabet), size=count)
    return "".join(alphabet[i] for i in indices)
