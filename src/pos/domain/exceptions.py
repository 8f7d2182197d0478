"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Unknown ids (lines, products, categories) are not errors in this domain:
operations referencing them are silent no-ops.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or precondition was violated.

    Raised before any state is changed, so the caller can show the message
    and carry on with the session untouched.
    """


class PersistenceError(DomainException):
    """Saved state could not be written.

    The in-memory change that triggered the write has been rolled back, so
    memory and storage still agree.
    """
