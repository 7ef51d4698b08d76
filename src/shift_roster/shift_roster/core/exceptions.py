class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateEntryError(ValidationError):
    """Raised when an employee already has a shift entry for a date."""


class NotFoundError(DomainError):
    """Raised when an action targets a record that does not exist."""


class AuthenticationError(DomainError):
    """Raised when a code or password is invalid."""


class AuthorizationError(DomainError):
    """Raised when the caller lacks permission for an action."""


class DataAccessError(DomainError):
    """Raised when the record store fails."""


class DuplicateRecordError(DataAccessError):
    """Raised when an insert violates a unique key."""
