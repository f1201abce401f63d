"""
Registration, login and profile flows.

Each flow is a plain coroutine that receives the DB session explicitly, so
the routes stay thin and the flows can be exercised without HTTP.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from auth.exceptions import InvalidCredentialsError, UserNotFoundError
from auth.jwt import create_token
from auth.models import LoginRequest, PublicUser, RegisterRequest
from auth.password import hash_password, verify_password
from database.users import create_user, find_user_by_email, find_user_by_id

logger = logging.getLogger(__name__)


async def register_user(session: AsyncSession, req: RegisterRequest) -> None:
    """Hash the password, then store the user."""
    # bcrypt is CPU-bound; keep it off the event loop
    password_hash = await run_in_threadpool(hash_password, req.password)
    user = await create_user(session, req.username, req.email, password_hash)
    logger.info("Registered user %s (%s)", user.username, user.id)


async def login_user(session: AsyncSession, req: LoginRequest) -> str:
    """Check email + password and return a fresh token."""
    user = await find_user_by_email(session, req.email)

    # same error for unknown email and wrong password
    if user is None or not await run_in_threadpool(
        verify_password, req.password, user.password_hash
    ):
        raise InvalidCredentialsError()

    token = create_token(str(user.id))
    logger.info("Login: %s (%s)", user.username, user.id)
    return token


async def get_profile(session: AsyncSession, user_id: str) -> PublicUser:
    user = await find_user_by_id(session, user_id)
    if user is None:
        raise UserNotFoundError()
    return user
