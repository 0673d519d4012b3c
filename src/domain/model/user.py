"""User domain model and the normalization rules applied on every write."""

from dataclasses import dataclass
from datetime import datetime


def normalize_name(value: str) -> str:
    """Capitalize a display name: first letter upper, rest lower."""
    return value.strip().capitalize()


def normalize_email(value: str) -> str:
    """Emails are unique case-insensitively, so they are stored lowercased."""
    return value.strip().lower()


@dataclass(frozen=True)
class PublicUser:
    """Outward-facing view of a user. Carries no credential material."""
    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime


@dataclass
class User:
    """Domain model representing a registered user."""
    id: str
    first_name: str
    last_name: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_public(self) -> PublicUser:
        return PublicUser(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __repr__(self) -> str:
        # Keep the hash out of tracebacks and debug logs
        return f"User(id={self.id!r}, email={self.email!r})"
