"""Port definition for signed, time-limited access tokens."""

from typing import Protocol


class TokenService(Protocol):
    def issue(self, user_id: str) -> str:
        """Return a signed token whose subject is user_id."""
        ...

    def verify(self, token: str) -> str:
        """Return the subject user_id.

        Raises TokenExpiredError or TokenInvalidError.
        """
        ...
