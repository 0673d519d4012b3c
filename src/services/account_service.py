"""Account service: registration, authentication and profile management.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

from domain.model.account import AuthResult, CallerProfile, DeleteResult, UserSummary
from domain.model.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from domain.model.user import PublicUser, User, normalize_email, normalize_name
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
# bcrypt ignores input past 72 bytes
MAX_PASSWORD_BYTES = 72

UPDATABLE_FIELDS = frozenset({'first_name', 'last_name', 'email', 'password'})


def _validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


def _clean_name(value: str, field: str) -> str:
    name = normalize_name(value)
    if not name:
        raise ValidationError(f"{field} must not be empty")
    return name


def _clean_email(value: str) -> str:
    email = normalize_email(value)
    if not email:
        raise ValidationError("Email must not be empty")
    return email


class AccountService:
    """Orchestrates the user repository, password hasher and token service.

    Holds no per-request state; every method depends only on its arguments
    and what the repository returns.
    """

    def __init__(self, repo: UserRepository, hasher: PasswordHasher, tokens: TokenService):
        self.repo = repo
        self.hasher = hasher
        self.tokens = tokens

    def _auth_result(self, user: User) -> AuthResult:
        return AuthResult(
            id=user.id,
            name=user.full_name,
            email=user.email,
            token=self.tokens.issue(user.id),
        )

    def register_user(self, first_name: str, last_name: str, email: str, password: str) -> AuthResult:
        """Register a new user and log them in.

        Raises:
            ValidationError: empty name/email or password out of bounds
            DuplicateEmailError: email already registered
        """
        first_name = _clean_name(first_name, "First name")
        last_name = _clean_name(last_name, "Last name")
        email = _clean_email(email)
        _validate_password(password)

        if self.repo.find_by_email(email):
            raise DuplicateEmailError()

        password_hash = self.hasher.hash(password)
        # The repository enforces uniqueness again, covering a concurrent registration
        user = self.repo.create(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
        )

        logger.info("User registered", extra={"userId": user.id, "email": email})
        return self._auth_result(user)

    def login_user(self, email: str, password: str) -> AuthResult:
        """Authenticate by email and password.

        An unknown email and a wrong password fail identically, and both
        paths run one bcrypt verification. A password longer than any that
        registration accepts is rejected before the user is looked up.

        Raises:
            InvalidCredentialsError: credentials do not match a user
        """
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidCredentialsError()

        user = self.repo.find_by_email(normalize_email(email))
        if user is None:
            self.hasher.dummy_verify(password)
            raise InvalidCredentialsError()
        if not self.hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        logger.info("User logged in", extra={"userId": user.id, "email": user.email})
        return self._auth_result(user)

    def resolve_caller(self, token: str) -> str:
        """Return the user id carried by a valid, unexpired token.

        Raises:
            TokenInvalidError, TokenExpiredError
        """
        return self.tokens.verify(token)

    def get_me(self, user_id: str) -> CallerProfile:
        user = self.repo.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return CallerProfile(id=user.id, email=user.email, message=f"Logged in as {user.first_name}")

    def get_users(self) -> list[UserSummary]:
        return [UserSummary(name=u.full_name, email=u.email) for u in self.repo.list_all()]

    def update_user(self, user_id: str, fields: dict) -> PublicUser:
        """Apply a partial update.

        Touched fields follow the registration rules; a new password is
        hashed before it reaches the repository.

        Raises:
            NotFoundError: no user with this id
            ValidationError: unknown field or invalid value
            DuplicateEmailError: new email belongs to another user
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        current = self.repo.find_by_id(user_id)
        if not current:
            raise NotFoundError("User not found")

        changes: dict = {}
        if fields.get('first_name') is not None:
            changes['first_name'] = _clean_name(fields['first_name'], "First name")
        if fields.get('last_name') is not None:
            changes['last_name'] = _clean_name(fields['last_name'], "Last name")
        if fields.get('email') is not None:
            changes['email'] = _clean_email(fields['email'])
        if fields.get('password') is not None:
            _validate_password(fields['password'])
            changes['password_hash'] = self.hasher.hash(fields['password'])

        if not changes:
            return current.to_public()

        if 'email' in changes and changes['email'] != current.email:
            existing = self.repo.find_by_email(changes['email'])
            if existing and existing.id != user_id:
                raise DuplicateEmailError()

        updated = self.repo.update_by_id(user_id, changes)
        if not updated:
            # Deleted between the lookup and the write
            raise NotFoundError("User not found")

        logger.info("User updated", extra={"userId": user_id, "fields": sorted(changes)})
        return updated.to_public()

    def delete_user(self, user_id: str) -> DeleteResult:
        if not self.repo.find_by_id(user_id):
            raise NotFoundError("User not found")
        if not self.repo.delete_by_id(user_id):
            raise NotFoundError("User not found")

        logger.info("User deleted", extra={"userId": user_id})
        return DeleteResult(message=f"Deleted {user_id}")
