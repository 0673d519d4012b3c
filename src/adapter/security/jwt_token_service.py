"""JWT implementation of TokenService (python-jose)."""

from datetime import datetime, timedelta, timezone
from logging import getLogger
from typing import Callable

from jose import ExpiredSignatureError, JWTError, jwt

from domain.model.errors import TokenExpiredError, TokenInvalidError

logger = getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_EXPIRATION = timedelta(hours=24)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JWTTokenService:
    """Issues and verifies HS256 access tokens carrying only the user id.

    The secret, algorithm and lifetime are fixed at construction.
    `clock` supplies the issuance time; verification always checks
    expiry against the real current time.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = JWT_ALGORITHM,
        lifetime: timedelta = JWT_EXPIRATION,
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret_key:
            raise ValueError("Token secret key must not be empty")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = lifetime
        self._clock = clock

    def issue(self, user_id: str) -> str:
        now = self._clock()
        payload = {
            "sub": user_id,
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            logger.debug("JWT verification failed: token expired")
            raise TokenExpiredError()
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            raise TokenInvalidError()

        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            raise TokenInvalidError()
        return user_id
