from .user import User
from .influencer import InfluencerProfile, PROFILE_FIELDS

__all__ = ["User", "InfluencerProfile", "PROFILE_FIELDS"]
