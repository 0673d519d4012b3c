"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class DuplicateEmailError(DuplicateError):
    """A user with the same (case-insensitive) email is already registered."""

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)


class InvalidCredentialsError(DomainError):
    """Login failed.

    Raised for both an unknown email and a wrong password so callers
    cannot tell the two apart.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class TokenError(DomainError):
    """Base class for access token failures."""


class TokenInvalidError(TokenError):
    """Token signature, structure or subject claim is not valid."""

    def __init__(self, message: str = "Invalid authentication credentials"):
        super().__init__(message)


class TokenExpiredError(TokenError):
    """Token was valid but its expiration time has passed."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class RepositoryError(DomainError):
    """Backing store is unavailable or a storage operation failed."""
