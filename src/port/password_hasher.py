"""Port definition for one-way credential hashing."""

from typing import Protocol


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
    def dummy_verify(self, password: str) -> None: ...
