"""Result types returned by the account service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful registration or login."""
    id: str
    name: str
    email: str
    token: str


@dataclass(frozen=True)
class UserSummary:
    """Entry of the user listing."""
    name: str
    email: str


@dataclass(frozen=True)
class CallerProfile:
    """What an authenticated caller learns about themselves."""
    id: str
    email: str
    message: str


@dataclass(frozen=True)
class DeleteResult:
    message: str
