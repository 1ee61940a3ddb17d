"""Domain-level exceptions.

Every failure the reporting engine can signal is a subclass of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidInputError(DomainException):
    """A caller-supplied value (date, customer scope) could not be parsed."""


class DataIntegrityError(DomainException):
    """A stored numeric field is non-finite, malformed or nonsensical."""
