from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class InfluencerOut(BaseModel):
    """Profile as returned to clients, keeping the camelCase field names."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    youtube_link: str = Field(alias="youtubeLink")
    instagram_link: str = Field(alias="instagramLink")
    account_name: str = Field(alias="accountName")
    email: str
    followers: str
    category: str
    profile_image: str = Field(alias="profileImage")
    user_id: str = Field(alias="userId")
    created_at: datetime = Field(alias="createdAt")
