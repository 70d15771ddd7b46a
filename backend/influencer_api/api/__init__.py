from fastapi import APIRouter
from influencer_api.api.routes import auth_router, influencers_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(influencers_router)
