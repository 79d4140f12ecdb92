"""Custom exception hierarchy for the mvc_generator package.

All public functions raise :class:`GeneratorError` (or a subclass) so
that callers can catch a single exception type.  This also allows the
CLI to catch all exceptions and print a user-friendly message.
"""


class GeneratorError(RuntimeError):
    """Base exception for all generator related errors."""


class InvalidNameError(GeneratorError, ValueError):
    """Raised when a resource name is missing or malformed."""


class FileCreationError(GeneratorError):
    """Raised when a file cannot be created, read or written to."""
