from .auth import router as auth_router
from .influencers import router as influencers_router

__all__ = ["auth_router", "influencers_router"]
