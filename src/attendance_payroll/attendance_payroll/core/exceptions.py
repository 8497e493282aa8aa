class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = "DomainError"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    kind = "ValidationError"


class MalformedTimeError(ValidationError):
    """Raised when a clock value is not a valid 24-hour HH:MM string."""

    kind = "MalformedTime"


class UnknownStatusError(ValidationError):
    """Raised when a record status is outside the attendance status enum."""

    kind = "UnknownStatus"


class InvalidConfigurationError(ValidationError):
    """Raised when employee terms or the holiday calendar are unusable."""

    kind = "InvalidConfiguration"
