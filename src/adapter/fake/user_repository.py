"""In-memory implementation of UserRepository for testing."""

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone

from domain.model.errors import DuplicateEmailError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}
        self._lock = threading.Lock()

    def _email_taken(self, email: str, exclude_id: str | None = None) -> bool:
        return any(
            u.email == email and u.id != exclude_id for u in self.store.values()
        )

    # ── write operations ─────────────────────────────────────

    def create(self, first_name: str, last_name: str, email: str, password_hash: str) -> User:
        with self._lock:
            if self._email_taken(email):
                raise DuplicateEmailError()

            user_id = uuid.uuid4().hex
            now = datetime.now(timezone.utc)

            user = User(
                id=user_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
            )
            self.store[user_id] = user
            return replace(user)

    def update_by_id(self, user_id: str, fields: dict) -> User | None:
        with self._lock:
            user = self.store.get(user_id)
            if not user:
                return None
            if 'email' in fields and self._email_taken(fields['email'], exclude_id=user_id):
                raise DuplicateEmailError()

            updated = replace(user, **fields, updated_at=datetime.now(timezone.utc))
            self.store[user_id] = updated
            return replace(updated)

    def delete_by_id(self, user_id: str) -> bool:
        with self._lock:
            return self.store.pop(user_id, None) is not None

    # ── read operations ──────────────────────────────────────

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            for user in self.store.values():
                if user.email == email:
                    return replace(user)
        return None

    def find_by_id(self, user_id: str) -> User | None:
        with self._lock:
            user = self.store.get(user_id)
        return replace(user) if user else None

    def list_all(self) -> list[User]:
        with self._lock:
            return [replace(u) for u in self.store.values()]
