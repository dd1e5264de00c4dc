import asyncio
import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool

from rollcall.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    def __init__(self, url: Optional[str] = None):
        self.url = url
        self.engine = None
        self.async_session = None
        self.is_connected = False
        self._tables_ready = False
        self._connect_lock = None

    async def connect(self):
        """
        Connect to the database once and reuse the engine afterwards.

        Safe to call on every request: after the first successful call it
        returns immediately.
        """
        if self.is_connected and self._tables_ready:
            return True

        # Created lazily so the lock belongs to the running event loop
        if self._connect_lock is None:
            self._connect_lock = asyncio.Lock()

        async with self._connect_lock:
            # Another caller may have finished while we waited
            if self.is_connected and self._tables_ready:
                return True

            if not self.is_connected:
                url = self.url or settings.database_url

                self.engine = create_async_engine(
                    url,
                    echo=settings.sql_echo,
                    pool_pre_ping=True,
                    poolclass=NullPool
                )

                self.async_session = sessionmaker(
                    self.engine,
                    class_=AsyncSession,
                    expire_on_commit=False
                )

                self.is_connected = True
                logger.info(f"Database engine created for {self.engine.url.render_as_string(hide_password=True)}")

            await self.create_tables()
        return True

    async def disconnect(self):
        """Dispose the engine and forget the cached handle"""
        if self.engine:
            await self.engine.dispose()
            logger.info("Database connection closed")
        self.engine = None
        self.async_session = None
        self.is_connected = False
        self._tables_ready = False
        self._connect_lock = None

    def get_session(self) -> AsyncSession:
        """Get async database session"""
        if not self.is_connected:
            raise RuntimeError("Database is not connected. Call connect() first.")
        return self.async_session()

    async def create_tables(self):
        """Create all tables defined in Base metadata"""
        # Model modules register themselves on Base.metadata when imported.
        from rollcall.models import student, attendance  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            self._tables_ready = True
            logger.info("Tables created successfully")
        except Exception as e:
            logger.error(f"Error creating tables: {e}", exc_info=True)
            raise

    async def check_connection(self) -> bool:
        """Run a trivial query; raises if the database is unreachable"""
        await self.connect()
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True


# Process-wide database handle, connected lazily
database = Database()
