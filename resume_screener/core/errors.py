"""
Error taxonomy for the ranking core.

These are contract violations, not transient failures: nothing here is
retried. The API layer maps them to a generic response and logs the detail.
"""


class RankingError(Exception):
    """Base class for errors raised by the ranking components."""


class EmptyInputError(RankingError):
    """An average or maximum was requested over zero values."""

    def __init__(self, operation: str, field: str):
        self.operation = operation
        self.field = field
        super().__init__(f"Cannot compute {operation} of '{field}' over an empty candidate set")


class UnknownFieldError(RankingError):
    """A field name outside the recognised set was requested."""

    def __init__(self, field, allowed):
        self.field = field
        self.allowed = sorted(allowed)
        super().__init__(f"Unknown field '{field}'. Expected one of: {', '.join(self.allowed)}")


class InvalidSortFieldError(UnknownFieldError):
    """The sorter was asked to order by an unrecognised field."""


class AnalysisPayloadError(RankingError):
    """The upstream analysis output could not be turned into an AnalysisResult."""
