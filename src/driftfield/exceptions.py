"""Exception hierarchy for driftfield.

All exceptions derive from DriftfieldError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class DriftfieldError(Exception):
    """Base exception for all driftfield errors."""


class EntropyUnavailableError(DriftfieldError):
    """No byte source can provide bytes.

    Raised when the primary byte source fails and either no fallback
    is configured or the fallback also fails.
    """


class ConfigValidationError(DriftfieldError):
    """Configuration field validation failed.

    Raised when per-call overrides contain unknown keys, attempt to
    override infrastructure fields, or fail type validation.
    """


class SampleError(DriftfieldError):
    """A byte sample does not satisfy a statistic's preconditions.

    Raised when the sample is too short for the requested statistic
    (e.g., fewer than two bytes for serial correlation).
    """


class InvalidInputError(DriftfieldError):
    """Caller-supplied input is malformed.

    Raised for precondition violations such as negative check-in counts
    or a birth profile without a date.
    """
