"""Domain-level exceptions.

Business outcomes of the sales facade (unknown customer, unknown product)
are reported, not raised. These exceptions cover the remaining cases so
the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value could not be built from the given input."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
