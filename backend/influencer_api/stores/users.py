from datetime import datetime, timezone
from typing import Optional

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from influencer_api.core.database import USERS
from influencer_api.models import User
from influencer_api.stores import to_object_id


class DuplicateEmailError(Exception):
    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


def create(db: Database, email: str, password_hash: str) -> User:
    doc = {
        "email": email,
        "password_hash": password_hash,
        "created_at": datetime.now(timezone.utc),
    }
    try:
        result = db[USERS].insert_one(doc)
    except DuplicateKeyError as e:
        raise DuplicateEmailError(email) from e
    doc["_id"] = result.inserted_id
    return User.from_doc(doc)


def find_by_email(db: Database, email: str) -> Optional[User]:
    doc = db[USERS].find_one({"email": email})
    return User.from_doc(doc) if doc else None


def find_by_id(db: Database, user_id: str) -> Optional[User]:
    oid = to_object_id(user_id)
    if oid is None:
        return None
    doc = db[USERS].find_one({"_id": oid})
    return User.from_doc(doc) if doc else None


def find_email_by_id(db: Database, user_id: str) -> Optional[str]:
    oid = to_object_id(user_id)
    if oid is None:
        return None
    doc = db[USERS].find_one({"_id": oid}, {"email": 1})
    return doc["email"] if doc else None
