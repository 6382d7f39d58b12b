class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedTimestamp(ValidationError):
    """Raised when a raw timestamp cannot be read as a civil wall-clock instant."""

    def __init__(self, raw: object, reason: str = "unrecognized timestamp"):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Malformed timestamp {raw!r}: {reason}")
