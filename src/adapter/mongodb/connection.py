"""Process-wide MongoDB client.

The client is built lazily and pinged before every reuse. A client that
fails its ping is dropped and rebuilt. A failed connection attempt is
retried on a later call once RETRY_BACKOFF_SECONDS have passed, so a
database that comes up after the service recovers without a restart.
"""

import os
import logging
import time

from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Driver-level logs are noisy below WARNING
logging.getLogger('pymongo').setLevel(logging.WARNING)

MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'accounts')
USERS_COLLECTION_NAME = 'users'

RETRY_BACKOFF_SECONDS = 5.0

_client: MongoClient | None = None
_retry_after = 0.0


def reset_client() -> None:
    """Forget the cached client and any pending backoff."""
    global _client, _retry_after
    if _client is not None:
        _client.close()
    _client = None
    _retry_after = 0.0


def _connect(url: str) -> MongoClient:
    client = MongoClient(
        url,
        serverSelectionTimeoutMS=5000,
        connectTimeoutMS=5000,
        socketTimeoutMS=30000,
        maxPoolSize=10,
        minPoolSize=0,
        maxIdleTimeMS=30000,
        waitQueueTimeoutMS=10000,
        retryWrites=True,
        retryReads=True,
    )
    try:
        client.admin.command('ping')
    except PyMongoError:
        client.close()
        raise
    return client


def get_mongodb_client() -> MongoClient | None:
    """Return a healthy client, or None while MongoDB is unreachable.

    A missing MONGO_URL is a configuration error and is never retried.
    """
    global _client, _retry_after

    if not MONGO_URL:
        logger.error("[MONGODB] MONGO_URL not configured")
        return None

    if _client is not None:
        try:
            _client.admin.command('ping')
            return _client
        except PyMongoError as e:
            logger.warning("[MONGODB] Cached client failed ping, reconnecting", extra={"error": str(e)[:200]})
            reset_client()

    if time.monotonic() < _retry_after:
        return None

    try:
        _client = _connect(MONGO_URL)
    except PyMongoError as e:
        _retry_after = time.monotonic() + RETRY_BACKOFF_SECONDS
        logger.error(
            "[MONGODB] Connection failed",
            extra={"error": str(e)[:200], "retryInSeconds": RETRY_BACKOFF_SECONDS},
        )
        return None

    logger.info(f"[MONGODB] Connected to {DATABASE_NAME}")
    return _client
