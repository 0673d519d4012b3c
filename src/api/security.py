"""Bearer-token authentication dependency."""

import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from api.dependencies import get_account_service
from domain.model.errors import TokenError
from services.account_service import AccountService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    service: AccountService = Depends(get_account_service),
) -> str:
    """Resolve the caller's user id from the bearer token. Raises 401 if not authenticated."""
    if not credentials:
        raise _unauthorized("Not authenticated")

    try:
        return service.resolve_caller(credentials.credentials)
    except TokenError as e:
        raise _unauthorized(str(e))
