class ScoreTracker:
    """Point total. Only ever goes up."""

    def __init__(self):
        self._points = 0

    def credit(self, amount: int) -> None:
        if amount <= 0:
            raise ValueError(f"Score credit must be positive, got {amount}")
        self._points += amount

    def total(self) -> int:
        return self._points
