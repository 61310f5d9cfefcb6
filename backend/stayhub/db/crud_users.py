# stayhub/db/crud_users.py

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from stayhub.db.models import User
from stayhub.core.security import get_password_hash


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    res = await db.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    res = await db.execute(select(User).where(User.email == email))
    return res.scalar_one_or_none()


async def create_user(
    db: AsyncSession,
    name: str,
    email: str,
    password: str,
    mobile: Optional[str] = None,
) -> User:
    """
    Create a user with hashed password.

    Accounts belong to the identity service; this is for seed data and tests.
    """
    user = User(
        name=name,
        email=email,
        mobile=mobile,
        hashed_password=get_password_hash(password),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user
