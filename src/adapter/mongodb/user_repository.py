"""MongoDB implementation of UserRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import DuplicateEmailError, RepositoryError
from domain.model.user import User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection.

        The unique email index is what keeps concurrent registrations
        with the same email from both succeeding.
        """
        from adapter.mongodb.indexes import ensure_index

        try:
            ensure_index(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            ensure_index(self.collection, [('created_at', -1)], 'idx_users_created_at')
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            first_name=doc['first_name'],
            last_name=doc['last_name'],
            email=doc['email'],
            password_hash=doc['password_hash'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
        )

    def create(self, first_name: str, last_name: str, email: str, password_hash: str) -> User:
        """Create a new user and return the User object."""
        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)
        user_doc = {
            '_id': user_id,
            'first_name': first_name,
            'last_name': last_name,
            'email': email,
            'password_hash': password_hash,
            'created_at': now,
            'updated_at': now,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            raise DuplicateEmailError()
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            raise RepositoryError("Failed to create user") from e

        logger.info("User created", extra={"userId": user_id})
        return self._to_domain(user_doc)

    def find_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'email': email})
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise RepositoryError("Failed to get user by email") from e
        return self._to_domain(doc) if doc else None

    def find_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            raise RepositoryError("Failed to get user by ID") from e
        return self._to_domain(doc) if doc else None

    def update_by_id(self, user_id: str, fields: dict) -> User | None:
        """Merge fields into the user document. Return the updated User or None if not found."""
        changes = {**fields, 'updated_at': datetime.now(timezone.utc)}
        try:
            doc = self.collection.find_one_and_update(
                {'_id': user_id},
                {'$set': changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            logger.warning("User update failed: email already exists", extra={"userId": user_id})
            raise DuplicateEmailError()
        except PyMongoError as e:
            logger.error("Failed to update user", extra={"userId": user_id, "error": str(e)})
            raise RepositoryError("Failed to update user") from e

        if not doc:
            return None
        logger.debug("User updated", extra={"userId": user_id, "fields": sorted(fields)})
        return self._to_domain(doc)

    def delete_by_id(self, user_id: str) -> bool:
        """Delete a user. Return True if a document was removed."""
        try:
            result = self.collection.delete_one({'_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to delete user", extra={"userId": user_id, "error": str(e)})
            raise RepositoryError("Failed to delete user") from e
        return result.deleted_count > 0

    def list_all(self) -> list[User]:
        """Return every user in natural collection order."""
        try:
            return [self._to_domain(doc) for doc in self.collection.find({})]
        except PyMongoError as e:
            logger.error("Failed to list users", extra={"error": str(e)})
            raise RepositoryError("Failed to list users") from e
