import logging
from typing import Optional

from fastapi import Header
from sqlalchemy.ext.asyncio import AsyncSession

from rollcall.core.exceptions import Unauthorized
from rollcall.core.security import verify_admin_key
from rollcall.database import database

logger = logging.getLogger(__name__)


async def get_db() -> AsyncSession:
    """
    Dependency function that yields db sessions
    """
    await database.connect()
    async with database.get_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def require_admin(x_admin_key: Optional[str] = Header(None)) -> None:
    """
    Dependency guarding mutation endpoints with the shared admin secret.

    Every protected call is checked on its own; nothing is remembered
    between requests.
    """
    if not verify_admin_key(x_admin_key):
        logger.warning("Rejected admin request: missing or invalid x-admin-key header")
        raise Unauthorized("Unauthorized")
