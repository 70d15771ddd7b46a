import logging
import threading
from typing import Optional

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

from .config import settings

logger = logging.getLogger(__name__)

USERS = "users"
INFLUENCERS = "influencers"

_client: Optional[MongoClient] = None
_db: Optional[Database] = None
_init_lock = threading.Lock()


def _ensure_indexes(db: Database) -> None:
    db[USERS].create_index([("email", ASCENDING)], unique=True)
    db[INFLUENCERS].create_index([("user_id", ASCENDING), ("created_at", DESCENDING)])


def init_db(client: Optional[MongoClient] = None) -> Database:
    """Connect once, verify the server answers, and create indexes.

    Later calls return the already initialised database. A ``client`` may be
    passed in to reuse an existing connection (tests pass a mongomock client).
    """
    global _client, _db
    with _init_lock:
        if _db is not None:
            return _db

        if client is None:
            client = MongoClient(settings.mongodb_url, serverSelectionTimeoutMS=5000, tz_aware=True)
        client.admin.command("ping")

        db = client[settings.mongodb_db]
        _ensure_indexes(db)

        _client, _db = client, db
        logger.info("MongoDB connected (db=%s)", settings.mongodb_db)
        return db


def close_db() -> None:
    global _client, _db
    with _init_lock:
        if _client is not None:
            _client.close()
        _client, _db = None, None


def get_db() -> Database:
    if _db is None:
        raise RuntimeError("Database not initialised; init_db() must run at startup")
    return _db
