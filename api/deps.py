"""FastAPI dependencies for dependency injection."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from redis import ConnectionPool, Redis

from api.config import Settings, get_settings
from citeready.crawler.cache import PermissionCache
from citeready.crawler.permissions import PermissionResolver
from citeready.fetcher import HttpPageFetcher, PageFetcher

__all__ = ["SettingsDep", "CacheDep", "ResolverDep", "FetcherDep"]


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache
def get_cache_pool() -> ConnectionPool:
    """
    Get the shared Redis pool for the permission cache.

    Socket timeouts are kept short so a slow Redis degrades to a cache
    miss instead of stalling the permission check.
    """
    settings = get_settings()
    return ConnectionPool.from_url(
        str(settings.redis_url),
        decode_responses=True,
        max_connections=settings.redis_max_connections,
        socket_timeout=settings.redis_socket_timeout_seconds,
        socket_connect_timeout=settings.redis_socket_timeout_seconds,
    )


def close_cache_pool() -> None:
    """Disconnect the permission cache pool if it was ever created."""
    if get_cache_pool.cache_info().currsize:
        get_cache_pool().disconnect()
        get_cache_pool.cache_clear()


def get_permission_cache(settings: SettingsDep) -> PermissionCache | None:
    """Build the permission cache, or None when caching is disabled."""
    if not settings.permission_cache_enabled:
        return None

    return PermissionCache(
        redis=Redis(connection_pool=get_cache_pool()),
        ttl_seconds=settings.permission_cache_ttl_seconds,
        prefix=settings.permission_cache_prefix,
    )


CacheDep = Annotated[PermissionCache | None, Depends(get_permission_cache)]


def get_permission_resolver(settings: SettingsDep, cache: CacheDep) -> PermissionResolver:
    """Build a resolver from settings."""
    return PermissionResolver(
        user_agent=settings.permission_user_agent,
        crawler_name=settings.permission_crawler_name,
        timeout=settings.permission_timeout_seconds,
        max_crawl_delay=settings.permission_max_crawl_delay_seconds,
        cache=cache,
    )


def get_page_fetcher(settings: SettingsDep) -> PageFetcher:
    """Build the page fetcher from settings."""
    return HttpPageFetcher(
        user_agent=settings.permission_user_agent,
        timeout=settings.fetch_timeout_seconds,
        max_retries=settings.fetch_max_retries,
    )


ResolverDep = Annotated[PermissionResolver, Depends(get_permission_resolver)]
FetcherDep = Annotated[PageFetcher, Depends(get_page_fetcher)]
