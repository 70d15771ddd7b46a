import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pymongo.database import Database
from pymongo.errors import PyMongoError

from influencer_api.api.deps import get_current_user_id
from influencer_api.core.database import get_db
from influencer_api.core.uploads import UPLOAD_FIELD, discard_upload, save_upload
from influencer_api.schemas.auth import MessageOut
from influencer_api.schemas.influencer import InfluencerOut
from influencer_api.stores import influencers

logger = logging.getLogger(__name__)

router = APIRouter(tags=["influencers"])


def _out(profile) -> InfluencerOut:
    return InfluencerOut(**profile.model_dump())


# Auth resolves as a dependency, so nothing is written to disk for rejected callers
@router.post("/influencers", response_model=MessageOut, status_code=201)
def create_influencer(
    youtube_link: str = Form(..., alias="youtubeLink", min_length=1),
    instagram_link: str = Form(..., alias="instagramLink", min_length=1),
    account_name: str = Form(..., alias="accountName", min_length=1),
    email: str = Form(..., min_length=1),
    followers: str = Form(..., min_length=1),
    category: str = Form(..., min_length=1),
    profile_image: Optional[UploadFile] = File(None, alias=UPLOAD_FIELD),
    user_id: str = Depends(get_current_user_id),
    db: Database = Depends(get_db),
):
    try:
        image_path = save_upload(profile_image)
    except OSError:
        logger.exception("Storing profile image failed for user %s", user_id)
        raise HTTPException(status_code=500, detail="Server error")
    if not image_path:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Profile image is required")

    fields = {
        "youtube_link": youtube_link,
        "instagram_link": instagram_link,
        "account_name": account_name,
        "email": email,
        "followers": followers,
        "category": category,
    }
    try:
        profile = influencers.create(db, fields, profile_image=image_path, owner_user_id=user_id)
    except (PyMongoError, ValueError):
        logger.exception("Creating influencer profile failed for user %s", user_id)
        discard_upload(image_path)
        raise HTTPException(status_code=500, detail="Server error")

    logger.info("Influencer profile %s created for user %s", profile.id, user_id)
    return MessageOut(message="Influencer created successfully")


@router.get("/influencers/me", response_model=InfluencerOut)
def my_influencer(user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    try:
        profile = influencers.find_by_owner(db, user_id)
    except PyMongoError:
        logger.exception("Fetching influencer profile failed for user %s", user_id)
        raise HTTPException(status_code=500, detail="Server error")

    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No influencer profile found")
    return _out(profile)


@router.get("/influencerprofile", response_model=List[InfluencerOut])
def list_influencers(db: Database = Depends(get_db)):
    try:
        profiles = influencers.list_all(db)
    except PyMongoError as e:
        logger.exception("Listing influencer profiles failed")
        raise HTTPException(status_code=500, detail=str(e))
    return [_out(p) for p in profiles]
