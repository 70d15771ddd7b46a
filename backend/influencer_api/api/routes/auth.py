import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.database import Database
from pymongo.errors import PyMongoError

from influencer_api.api.deps import get_current_user_id
from influencer_api.core.config import settings
from influencer_api.core.database import get_db
from influencer_api.core.security import (
    hash_password,
    verify_password,
    create_access_token,
)
from influencer_api.schemas.auth import SignupIn, LoginIn, TokenOut, MessageOut, MeOut
from influencer_api.stores import users
from influencer_api.stores.users import DuplicateEmailError


logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageOut, status_code=201)
def signup(payload: SignupIn, db: Database = Depends(get_db)):
    try:
        users.create(db, email=payload.email, password_hash=hash_password(payload.password))
    except DuplicateEmailError:
        logger.info("Signup rejected, email exists: %s", payload.email)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already exists or invalid data"
        )
    except PyMongoError:
        logger.exception("Signup failed for %s", payload.email)
        raise HTTPException(status_code=500, detail="Server error")

    logger.info("User created: %s", payload.email)
    return MessageOut(message="User created successfully")


@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn, db: Database = Depends(get_db)):
    try:
        user = users.find_by_email(db, payload.email)
    except PyMongoError:
        logger.exception("Login lookup failed for %s", payload.email)
        raise HTTPException(status_code=500, detail="Server error")

    if not user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User not found")

    if not verify_password(payload.password, user.password_hash):
        logger.info("Login rejected, bad password: %s", payload.email)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")

    token = create_access_token(
        subject=user.id,
        expires_minutes=settings.jwt_expire_minutes
    )

    return TokenOut(token=token)


@router.get("/me", response_model=MeOut)
def me(user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    try:
        email = users.find_email_by_id(db, user_id)
    except PyMongoError as e:
        logger.exception("Get user info error")
        raise HTTPException(status_code=500, detail=f"Server error: {e}")

    if email is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return MeOut(email=email)
