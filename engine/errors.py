"""
Exceptions raised by the scoring engine.

Missing holes and ties are not errors: engines skip incomplete holes and
report an absent winner. Only structural misuse by the caller raises.
"""


class ScoringError(Exception):
    """Base class for scoring engine errors."""
    pass


class InvalidStrokeIndex(ScoringError, ValueError):
    """Raised when a tee's stroke index does not have exactly 18 values."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Stroke index must have exactly 18 values (got {length})")


class WrongPlayerCount(ScoringError, ValueError):
    """Raised when a two-player format receives a different number of scorecards."""

    def __init__(self, format_name: str, count: int, expected: int = 2):
        self.format_name = format_name
        self.count = count
        self.expected = expected
        super().__init__(
            f"{format_name} requires exactly {expected} players (got {count})"
        )
