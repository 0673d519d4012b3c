"""User account routes.

Endpoints:
- GET /api/users: List users (name and email only)
- GET /api/users/me: Current caller's profile
- POST /api/users/register: Create an account and return a token
- POST /api/users/login: Exchange credentials for a token
- PUT /api/users/{id}: Partial update of a user
- DELETE /api/users/{id}: Delete a user

Service calls hash passwords and block on MongoDB, so they run in a
worker thread to keep the event loop free.
"""

import asyncio
import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_account_service
from api.models import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    MessageResponse,
    RegisterRequest,
    UpdateUserRequest,
    UserResponse,
    UserSummaryResponse,
)
from api.security import get_current_user_id
from domain.model.errors import (
    DomainError,
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    RepositoryError,
    TokenError,
    ValidationError,
)
from services.account_service import AccountService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


def _to_http(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP response the client sees."""
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, DuplicateEmailError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, (InvalidCredentialsError, TokenError)):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(error),
            headers={"WWW-Authenticate": "Bearer"},
        )
    if isinstance(error, RepositoryError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable")
    logger.error("Unmapped domain error", extra={"error": str(error), "type": type(error).__name__})
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


@router.get("", response_model=list[UserSummaryResponse])
async def list_users(
    _caller_id: str = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
):
    """List every user by name and email."""
    try:
        users = await asyncio.to_thread(service.get_users)
    except DomainError as e:
        raise _to_http(e)
    return [asdict(u) for u in users]


@router.get("/me", response_model=MeResponse)
async def get_me(
    caller_id: str = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
):
    """Get the authenticated caller's profile."""
    try:
        profile = await asyncio.to_thread(service.get_me, caller_id)
    except DomainError as e:
        raise _to_http(e)
    return asdict(profile)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, service: AccountService = Depends(get_account_service)):
    """Register a new user.

    Raises:
        HTTPException: 409 if email already exists, 400 if validation fails
    """
    try:
        result = await asyncio.to_thread(
            service.register_user,
            request.first_name,
            request.last_name,
            request.email,
            request.password,
        )
    except DomainError as e:
        raise _to_http(e)
    return asdict(result)


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, service: AccountService = Depends(get_account_service)):
    """Login user and return a bearer token.

    Raises:
        HTTPException: 401 if credentials are invalid
    """
    try:
        result = await asyncio.to_thread(service.login_user, request.email, request.password)
    except DomainError as e:
        raise _to_http(e)
    return asdict(result)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    caller_id: str = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
):
    """Update a user's names, email or password."""
    fields = request.model_dump(exclude_unset=True)
    try:
        user = await asyncio.to_thread(service.update_user, user_id, fields)
    except DomainError as e:
        raise _to_http(e)

    logger.info("User update requested", extra={"userId": user_id, "callerId": caller_id})
    return asdict(user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    caller_id: str = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
):
    """Delete a user."""
    try:
        result = await asyncio.to_thread(service.delete_user, user_id)
    except DomainError as e:
        raise _to_http(e)

    logger.info("User deletion requested", extra={"userId": user_id, "callerId": caller_id})
    return asdict(result)
