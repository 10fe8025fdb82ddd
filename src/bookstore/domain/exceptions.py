"""Domain-level exceptions.

Every failure the catalog can report is a subclass of DomainException so
the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException):
    """Caller input is malformed (blank ISBN or email, bad quantity, ...)."""


class BookNotFoundError(DomainException):
    """No catalog entry exists under the requested ISBN."""


class UnavailableError(DomainException):
    """The entry cannot supply the requested quantity right now."""


class InsufficientStockError(DomainException):
    """A paper book was asked for more copies than it holds."""


class NotPurchasableError(DomainException):
    """The entry is for display only and can never be sold."""
