"""Process-wide settings read from the environment.

Values are read once and passed to the components that need them;
nothing else in the service reads these variables directly.

CORS origins are loaded on their own because the middleware is installed
when the app module is imported, before any request needs the signing key.
"""

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_expiration: timedelta = timedelta(hours=24)
    bcrypt_rounds: int = 12


def load_settings() -> Settings:
    secret_key = os.getenv("JWT_SECRET_KEY")
    if not secret_key:
        raise ValueError(
            "JWT_SECRET_KEY environment variable is required. "
            "Generate a secure key with: openssl rand -hex 32"
        )
    return Settings(
        jwt_secret_key=secret_key,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        jwt_expiration=timedelta(hours=float(os.getenv("JWT_EXPIRATION_HOURS", "24"))),
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def load_cors_origins() -> list[str]:
    """Comma-separated CORS_ORIGINS, or ["*"] when unset."""
    raw = os.getenv("CORS_ORIGINS", "*").strip()
    if raw == "*":
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
