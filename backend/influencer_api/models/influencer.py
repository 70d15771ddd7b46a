from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel

# Fields a client supplies when creating a profile (the image path excluded)
PROFILE_FIELDS = (
    "youtube_link",
    "instagram_link",
    "account_name",
    "email",
    "followers",
    "category",
)


class InfluencerProfile(BaseModel):
    id: str
    youtube_link: str
    instagram_link: str
    account_name: str
    email: str
    followers: str
    category: str
    profile_image: str
    user_id: str
    created_at: datetime

    @classmethod
    def from_doc(cls, doc: Mapping[str, Any]) -> "InfluencerProfile":
        data = {name: doc[name] for name in PROFILE_FIELDS}
        return cls(
            id=str(doc["_id"]),
            profile_image=doc["profile_image"],
            user_id=str(doc["user_id"]),
            created_at=doc["created_at"],
            **data,
        )
