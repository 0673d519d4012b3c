"""MongoDB index management.

Indexes are reconciled against what the server already has, so a renamed
index or a changed key pattern is replaced instead of failing startup.
"""

from logging import getLogger

logger = getLogger(__name__)


def _matches(info: dict, keys: list, unique: bool) -> bool:
    return list(info.get('key', [])) == list(keys) and bool(info.get('unique', False)) == unique


def ensure_index(collection, keys: list, name: str, unique: bool = False) -> None:
    """Create `name` over `keys`, dropping any stale index that would clash with it."""
    for existing_name, info in collection.index_information().items():
        if existing_name == '_id_':
            continue
        if existing_name == name and _matches(info, keys, unique):
            return
        clashes = existing_name == name or list(info.get('key', [])) == list(keys)
        if clashes:
            logger.warning("Dropping stale index", extra={"index": existing_name, "collection": collection.name})
            collection.drop_index(existing_name)

    collection.create_index(keys, name=name, unique=unique)
    logger.info("Created index", extra={"index": name, "collection": collection.name})


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections. Called at app startup."""
    from adapter.mongodb.user_repository import MongoUserRepository

    return MongoUserRepository(db).ensure_indexes()
