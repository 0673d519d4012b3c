from functools import lru_cache

from fastapi import Depends, HTTPException

from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.user_repository import MongoUserRepository
from adapter.security.bcrypt_hasher import BcryptPasswordHasher
from adapter.security.jwt_token_service import JWTTokenService
from api.config import get_settings
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository
from services.account_service import AccountService


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_user_repo() -> UserRepository:
    return MongoUserRepository(_get_db())


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    settings = get_settings()
    return JWTTokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        lifetime=settings.jwt_expiration,
    )


def get_account_service(
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AccountService:
    return AccountService(repo=repo, hasher=hasher, tokens=tokens)
