from datetime import datetime, timezone
from typing import List, Mapping, Optional

from pymongo import DESCENDING
from pymongo.database import Database

from influencer_api.core.database import INFLUENCERS
from influencer_api.models import PROFILE_FIELDS, InfluencerProfile
from influencer_api.stores import to_object_id


def create(
    db: Database, fields: Mapping[str, str], profile_image: str, owner_user_id: str
) -> InfluencerProfile:
    if not profile_image:
        raise ValueError("profile_image is required")
    owner = to_object_id(owner_user_id)
    if owner is None:
        raise ValueError(f"Invalid owner id: {owner_user_id!r}")

    doc = {name: fields[name] for name in PROFILE_FIELDS}
    doc.update(
        profile_image=profile_image,
        user_id=owner,
        created_at=datetime.now(timezone.utc),
    )
    result = db[INFLUENCERS].insert_one(doc)
    doc["_id"] = result.inserted_id
    return InfluencerProfile.from_doc(doc)


def find_by_owner(db: Database, owner_user_id: str) -> Optional[InfluencerProfile]:
    """Most recently created profile of the owner, if any."""
    owner = to_object_id(owner_user_id)
    if owner is None:
        return None
    doc = db[INFLUENCERS].find_one(
        {"user_id": owner},
        sort=[("created_at", DESCENDING), ("_id", DESCENDING)],
    )
    return InfluencerProfile.from_doc(doc) if doc else None


def list_all(db: Database) -> List[InfluencerProfile]:
    return [InfluencerProfile.from_doc(doc) for doc in db[INFLUENCERS].find()]
