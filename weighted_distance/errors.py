"""Exceptions raised by the distance engine."""


class DistanceError(ValueError):
    """Base class for all configuration and input errors."""


class InvalidCost(DistanceError):
    """A supplied cost is not strictly positive."""

    def __init__(self, name, value):
        self.name = name
        self.value = value
        super().__init__(f"{name} cost must be positive, got {value!r}")


class InconsistentCosts(DistanceError):
    """The transposition cost is cheaper than half a delete+insert pair."""

    def __init__(self, addition, deletion, transposition):
        self.addition = addition
        self.deletion = deletion
        self.transposition = transposition
        super().__init__(
            "Transposition cost must be at least the average of the "
            f"addition cost and deletion cost (transposition={transposition}, "
            f"addition={addition}, deletion={deletion})"
        )


class InvalidInput(DistanceError, TypeError):
    """An input sequence or character is missing or of the wrong kind."""
