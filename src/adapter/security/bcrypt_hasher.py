"""bcrypt implementation of PasswordHasher."""

from logging import getLogger

import bcrypt

logger = getLogger(__name__)

# 2^12 = 4096 iterations
DEFAULT_ROUNDS = 12
MIN_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of input; bcrypt 5 rejects longer input
MAX_PASSWORD_BYTES = 72

_DUMMY_PASSWORD = "timing-equalizer-password"


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class BcryptPasswordHasher:
    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        if rounds < MIN_ROUNDS:
            raise ValueError(f"bcrypt rounds must be at least {MIN_ROUNDS}, got {rounds}")
        self.rounds = rounds
        # Built up front so the first unknown-email login costs one checkpw like every other
        self._dummy_hash = bcrypt.hashpw(_encode(_DUMMY_PASSWORD), bcrypt.gensalt(rounds=rounds))

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Check password against a stored hash.

        A malformed hash is treated as a mismatch rather than an error.
        """
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning("Password verification failed on malformed hash", extra={"error": str(e)})
            return False

    def dummy_verify(self, password: str) -> None:
        """Spend the same work as verify() so a missing user is not faster to reject."""
        bcrypt.checkpw(_encode(password), self._dummy_hash)
