"""Exception types for the matchup predictor."""


class InvalidInputError(ValueError):
    """Raised when team metrics or model configuration are out of contract."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [message])

    @classmethod
    def from_errors(cls, context: str, errors) -> "InvalidInputError":
        errors = list(errors)
        return cls(f"{context}: " + "; ".join(errors), errors)
