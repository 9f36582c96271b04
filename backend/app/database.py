"""
Zomato Backend — MongoDB Connector
====================================

What:  Makes exactly one connection attempt to MongoDB when the app starts.
Why:   The backend is wired to a document store, but no route depends on it.
       A missing database must never stop the HTTP server from serving.
How:   The attempt runs as a fire-and-forget asyncio task. Success is
       logged; failure is logged and recorded, and the process carries on.
Who:   Started and closed by the application lifespan (app.main).
When:  Once per process. There is no reconnect.

State Machine:
    IDLE ──start()/connect()──► CONNECTING ──ping ok──► CONNECTED
                                     │
                                     └──any error──► FAILED

    CONNECTED ──close()──► CLOSED

    FAILED and CLOSED are terminal. Calling connect() again is a no-op.

Why ping:
    AsyncMongoClient connects lazily; constructing it never touches the
    network. The `ping` admin command forces server selection, which is
    bounded by serverSelectionTimeoutMS.
"""

import asyncio
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.config import settings
from app.exceptions import DatabaseConnectionError, DatabaseUnavailableError

logger = logging.getLogger(__name__)

# Used when the connection URL names no database
DEFAULT_DATABASE = "zomato"


class DatabaseConnector:
    """
    One-shot MongoDB connector.

    The connection handle is kept for the life of the process but nothing
    reads from or writes to it.
    """

    IDLE = "idle"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"
    CLOSED = "closed"

    def __init__(self, url: str, timeout_ms: int = 5000):
        self.url = url
        self.timeout_ms = timeout_ms
        self.state = self.IDLE
        self.error: Optional[DatabaseConnectionError] = None
        self._client: Optional[AsyncMongoClient] = None
        self._database: Optional[AsyncDatabase] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def is_connected(self) -> bool:
        return self.state == self.CONNECTED

    @property
    def database(self) -> AsyncDatabase:
        """
        The database named in the connection URL ("zomato" if it names none).

        Raises:
            DatabaseUnavailableError: the attempt has not succeeded.
        """
        if self.state != self.CONNECTED or self._database is None:
            raise DatabaseUnavailableError(state=self.state)
        return self._database

    def start(self) -> asyncio.Task:
        """
        Schedule the connection attempt in the background and return at once.

        Must be called from inside a running event loop. Calling it twice
        returns the task created by the first call.
        """
        if self._task is None:
            self._task = asyncio.create_task(self.connect(), name="mongo-connect")
        return self._task

    async def connect(self) -> None:
        """
        Attempt the connection exactly once.

        Never raises for connection problems: the outcome is reported
        through `state`, `error` and the log.
        """
        if self.state != self.IDLE:
            logger.debug("Connection attempt already made (state=%s); skipping", self.state)
            return

        self.state = self.CONNECTING
        logger.info("Connecting to MongoDB at %s...", self.url)

        try:
            self._client = AsyncMongoClient(
                self.url,
                serverSelectionTimeoutMS=self.timeout_ms,
            )
            await self._client.admin.command("ping")
            self._database = self._client.get_default_database(default=DEFAULT_DATABASE)
        except (PyMongoError, ValueError, TypeError) as e:
            # The URI parser raises plain ValueError for some malformed URLs
            # (a non-numeric port, for one), not a PyMongoError
            self.state = self.FAILED
            await self._discard_client()
            self.error = DatabaseConnectionError(
                message=str(e),
                context={"url": self.url, "error_type": type(e).__name__},
            )
            logger.error("❌ MongoDB connection failed: %s", e)
            return

        self.state = self.CONNECTED
        logger.info("✅ Connected to MongoDB (database=%s)", self._database.name)

    async def close(self) -> None:
        """
        Cancel a pending attempt and close the client.

        Called during application shutdown.
        """
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            logger.info("Pending MongoDB connection attempt cancelled")
            if self.state == self.CONNECTING:
                self.state = self.FAILED

        if self._client is not None:
            await self._discard_client()
            if self.state == self.CONNECTED:
                self.state = self.CLOSED
            logger.info("MongoDB connection closed")

    async def _discard_client(self) -> None:
        if self._client is not None:
            await self._client.close()
        self._client = None
        self._database = None


# ── Singleton Instance ────────────────────────────────────────────────────
database_connector = DatabaseConnector(
    url=settings.mongo_url,
    timeout_ms=settings.mongo_connect_timeout_ms,
)
