"""
Exception hierarchy for premaster conversion.

Everything raised while reading, validating or encoding a premaster archive
derives from PremasterError so the command line can report it in one place.
"""


class PremasterError(Exception):
    """Base exception for all conversion errors."""
    pass


class ParseError(PremasterError):
    """Raised when the track descriptor is malformed."""
    pass


class ValidationError(PremasterError):
    """Raised when the track table is inconsistent or does not fit the payload."""
    pass


class TruncatedInputError(PremasterError):
    """Raised when the payload runs out in the middle of a sector."""

    def __init__(self, message: str, needed: int = None, available: int = None):
        super().__init__(message)
        self.needed = needed
        self.available = available


class UnconsumedInputError(PremasterError):
    """Raised when payload bytes are left over after the last track."""

    def __init__(self, message: str, remaining: int = None):
        super().__init__(message)
        self.remaining = remaining


class ImageIOError(PremasterError):
    """Raised when an input or output file cannot be opened, read or written."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class ParityInputError(AssertionError):
    """Raised when a parity routine is handed a span of the wrong length."""
    pass
