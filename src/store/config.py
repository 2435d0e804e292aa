from __future__ import annotations

from dataclasses import dataclass

import redis

from .base import ResourceStore

BACKEND_HTTP = "http"
BACKEND_REDIS = "redis"


@dataclass(slots=True)
class StoreConfig:
    """Connection information for the snippet resource store."""

    backend: str = BACKEND_HTTP
    url: str = "https://store.homebots.io"
    store_id: str | None = None
    resource: str = "s"
    timeout: float = 10.0
    redis_url: str = "redis://127.0.0.1:6379/0"


def create_store(config: StoreConfig) -> ResourceStore:
    """Instantiate the resource store selected by ``config.backend``."""

    if config.backend == BACKEND_REDIS:
        from .redis_store import RedisResourceStore

        return RedisResourceStore(
            redis.Redis.from_url(config.redis_url),
            store_id=config.store_id or "local",
            resource=config.resource,
        )
    if config.backend == BACKEND_HTTP:
        from .http_store import HttpResourceStore

        return HttpResourceStore(config)
    raise ValueError(f"Unknown store backend: {config.backend!r}")


__all__ = ["BACKEND_HTTP", "BACKEND_REDIS", "StoreConfig", "create_store"]
