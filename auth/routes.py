"""
User API routes — register, login, profile.

Route prefix: /api/users
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from auth.models import (
    LoginRequest,
    MessageResponse,
    PublicUser,
    RegisterRequest,
    TokenResponse,
)
from auth.service import get_profile, login_user, register_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user."""
    await register_user(session, req)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=TokenResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Login with email + password."""
    token = await login_user(session, req)
    return {"token": token}


@router.get("/profile", response_model=PublicUser)
async def profile(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> PublicUser:
    """Return the authenticated user's profile (no password hash)."""
    return await get_profile(session, user_id)
