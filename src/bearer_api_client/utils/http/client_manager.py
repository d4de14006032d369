"""Process-wide HTTP client manager.

This module owns the lifecycle of the ``httpx.AsyncClient`` instances the
transport sends through. Clients are cached per configuration and per event loop, and closed
together on shutdown; the rest of the package never closes them itself.
"""

import asyncio
import logging
import weakref
from typing import Any, Dict, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)


class HTTPClientManager:
    """Manages shared HTTP clients with connection pooling.

    This singleton caches clients by base URL, timeout and limits so that
    every transport built with the same configuration shares one
    connection pool. A connection pool is bound to the event loop that
    opened it, so a client is only reused on the loop it was created on.
    """

    _instance: Optional["HTTPClientManager"] = None

    def __new__(cls):
        """Ensure singleton pattern - only one instance exists.

        :return: The single instance of HTTPClientManager
        :rtype: HTTPClientManager
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, "_initialized"):
            self._clients: Dict[str, Tuple[asyncio.AbstractEventLoop, httpx.AsyncClient]] = {}
            self._locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
                weakref.WeakKeyDictionary()
            )
            self._default_timeout = create_timeout()
            self._default_limits = create_limits()
            self._initialized = True

    def _lock_for(self, loop: asyncio.AbstractEventLoop) -> asyncio.Lock:
        lock = self._locks.get(loop)
        if lock is None:
            lock = self._locks[loop] = asyncio.Lock()
        return lock

    def _usable_client(
        self, cache_key: str, loop: asyncio.AbstractEventLoop
    ) -> Optional[httpx.AsyncClient]:
        entry = self._clients.get(cache_key)
        if entry is None:
            return None
        owner_loop, client = entry
        if client.is_closed:
            return None
        if owner_loop is not loop:
            # pool belongs to another (possibly closed) loop
            logger.debug("Replacing HTTP client %s created on another event loop", cache_key)
            return None
        return client

    async def get_client(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[httpx.Timeout] = None,
        limits: Optional[httpx.Limits] = None,
        **kwargs: Any,
    ) -> httpx.AsyncClient:
        """Get or create an HTTP client for the given configuration.

        :param base_url: Optional base URL for the client
        :type base_url: Optional[str]
        :param timeout: Optional custom timeout configuration
        :type timeout: Optional[httpx.Timeout]
        :param limits: Optional custom connection limits
        :type limits: Optional[httpx.Limits]
        :param **kwargs: Additional ``httpx.AsyncClient`` options
        :return: Configured HTTP client instance
        :rtype: httpx.AsyncClient
        """
        t = timeout or self._default_timeout
        lim = limits or self._default_limits
        cache_key = str(
            (
                base_url or "default",
                (t.connect, t.read, t.write, t.pool),
                (lim.max_keepalive_connections, lim.max_connections, lim.keepalive_expiry),
                tuple(sorted((k, repr(v)) for k, v in kwargs.items())),
            )
        )

        loop = asyncio.get_running_loop()
        client = self._usable_client(cache_key, loop)
        if client is None:
            async with self._lock_for(loop):
                client = self._usable_client(cache_key, loop)
                if client is None:
                    client_config: Dict[str, Any] = {
                        "timeout": t,
                        "limits": lim,
                        "follow_redirects": True,
                        **kwargs,
                    }
                    if base_url:
                        client_config["base_url"] = base_url
                    client = httpx.AsyncClient(**client_config)
                    self._clients[cache_key] = (loop, client)
                    logger.debug("Created new HTTP client for %s", cache_key)

        return client

    async def close_all(self) -> None:
        """Close all managed HTTP clients."""
        if not self._clients:
            logger.debug("No HTTP clients to close")
            return
        logger.info("Closing %d HTTP client(s)...", len(self._clients))
        for cache_key, (_, client) in list(self._clients.items()):
            try:
                await client.aclose()
            except Exception as e:
                logger.warning("Error closing HTTP client %s: %s", cache_key, e)
        self._clients.clear()


def create_timeout(
    connect: float = 5.0,
    read: float = 30.0,
    write: float = 10.0,
    pool: float = 5.0,
) -> httpx.Timeout:
    """Create a timeout configuration object.

    :param connect: Connection timeout in seconds
    :param read: Read timeout in seconds
    :param write: Write timeout in seconds
    :param pool: Pool timeout in seconds
    :return: Configured timeout object
    :rtype: httpx.Timeout
    """
    return httpx.Timeout(connect=connect, read=read, write=write, pool=pool)


def create_limits(
    max_keepalive_connections: int = 10,
    max_connections: int = 20,
    keepalive_expiry: float = 30.0,
) -> httpx.Limits:
    """Create a connection limits configuration object.

    :param max_keepalive_connections: Maximum number of keepalive connections
    :param max_connections: Maximum total number of connections
    :param keepalive_expiry: Keepalive connection expiry time in seconds
    :return: Configured limits object
    :rtype: httpx.Limits
    """
    return httpx.Limits(
        max_keepalive_connections=max_keepalive_connections,
        max_connections=max_connections,
        keepalive_expiry=keepalive_expiry,
    )


http_client_manager = HTTPClientManager()


async def get_http_client(**kwargs: Any) -> httpx.AsyncClient:
    """Get a shared HTTP client from the global manager.

    :param **kwargs: Client configuration parameters
    :return: Configured HTTP client instance
    :rtype: httpx.AsyncClient
    """
    return await http_client_manager.get_client(**kwargs)
