from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel


class User(BaseModel):
    id: str
    email: str
    password_hash: str
    created_at: datetime

    @classmethod
    def from_doc(cls, doc: Mapping[str, Any]) -> "User":
        return cls(
            id=str(doc["_id"]),
            email=doc["email"],
            password_hash=doc["password_hash"],
            created_at=doc["created_at"],
        )
