"""
User record store — create and look up ``User`` rows.

Uniqueness of ``username`` and ``email`` is enforced by the database's
unique indexes; this module only translates the violation.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.exceptions import ConflictError
from auth.models import PublicUser
from database.models import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _to_uuid(value: str | uuid.UUID) -> Optional[uuid.UUID]:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return None


async def create_user(
    session: AsyncSession,
    username: str,
    email: str,
    password_hash: str,
) -> User:
    """Insert a new user.  Raises ``ConflictError`` on duplicate username/email."""
    user = User(
        username=username,
        email=normalize_email(email),
        password_hash=password_hash,
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError:
        await session.rollback()
        logger.info("Rejected duplicate registration for username %r", username)
        raise ConflictError()
    return user


async def find_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    """Return the full record (hash included) or ``None``."""
    result = await session.execute(
        select(User).where(User.email == normalize_email(email))
    )
    return result.scalar_one_or_none()


async def find_user_by_id(session: AsyncSession, user_id: str | uuid.UUID) -> Optional[PublicUser]:
    """Return the user without its password hash, or ``None``."""
    uid = _to_uuid(user_id)
    if uid is None:
        return None
    user = await session.get(User, uid)
    if user is None:
        return None
    return PublicUser.model_validate(user)
