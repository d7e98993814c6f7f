from __future__ import annotations


class LadderConfigError(ValueError):
    """Raised when a ladder cannot be built from the given decade and base."""


class EmptyDecadeError(LadderConfigError):
    def __init__(self) -> None:
        super().__init__("Decade must contain at least one step")


class LadderInvariantError(LadderConfigError):
    def __init__(self) -> None:
        super().__init__(
            "The last step of the decade must be smaller than the first step multiplied by the base"
        )


class DecadeOrderError(LadderConfigError):
    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        super().__init__(f"Decade step {position} {reason}")
