"""MongoDB access through Motor.

Motor clients are bound to the event loop they were created on.  Sync
Django views drive coroutines through ``async_to_sync``, which may run
each call on its own loop, so one client is kept per running loop.
Clients whose loop has been closed are closed and dropped the next time
a client is requested.
"""

from __future__ import annotations

import asyncio
import time

import structlog
from django.conf import settings
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = structlog.get_logger(__name__)

_clients: dict[asyncio.AbstractEventLoop, AsyncIOMotorClient] = {}


def _evict_stale_clients() -> None:
    for loop in [loop for loop in _clients if loop.is_closed()]:
        _clients.pop(loop).close()
        logger.debug("mongo.client_closed")


def get_client() -> AsyncIOMotorClient:
    """Return the Motor client for the running event loop, creating it if needed."""
    loop = asyncio.get_running_loop()
    _evict_stale_clients()
    client = _clients.get(loop)
    if client is None:
        client = AsyncIOMotorClient(
            settings.MONGODB_URI,
            io_loop=loop,
            serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        )
        _clients[loop] = client
        logger.info("mongo.client_created", database=settings.MONGODB_DATABASE)
    return client


def close_clients() -> None:
    """Close every cached client."""
    while _clients:
        _, client = _clients.popitem()
        client.close()


def get_database() -> AsyncIOMotorDatabase:
    return get_client()[settings.MONGODB_DATABASE]


async def ping() -> float:
    """Round-trip a ``ping`` command; return the elapsed time in milliseconds."""
    start = time.monotonic()
    await get_client().admin.command("ping")
    return round((time.monotonic() - start) * 1000, 2)
