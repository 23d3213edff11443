"""
Fitness evaluation against a fixed target string.
"""

CHAR_WEIGHT = 256
LENGTH_WEIGHT = 256 * 256


class GuessEvaluator:
    """Scores candidate strings by their distance from a fixed target."""

    def __init__(self, target: str):
        self._target = target

    @property
    def target(self) -> str:
        return self._target

    def evaluate(self, guess: str) -> float:
        """
        Compute the distance of a candidate from the target.

        Each position of the overlapping prefix contributes the absolute
        difference of the character codes times CHAR_WEIGHT; every character
        of length mismatch adds LENGTH_WEIGHT.

        Args:
            guess: Candidate string

        Returns:
            Non-negative distance, 0 for an exact match
        """
        char_sum = sum(abs(ord(t) - ord(g)) for t, g in zip(self._target, guess))
        length_diff = abs(len(guess) - len(self._target))
        total = float(char_sum * CHAR_WEIGHT + length_diff * LENGTH_WEIGHT)
        assert total >= 0.0, f"negative fitness {total} for {guess!r}"
        return total

    def __repr__(self) -> str:
        return f"GuessEvaluator(target={self._target!r})"
