"""Resource store adapters backing the snippet repository."""

from .base import ResourceStore
from .config import BACKEND_HTTP, BACKEND_REDIS, StoreConfig, create_store
from .http_store import HttpResourceStore, create_remote_store
from .redis_store import RedisResourceStore

__all__ = [
    "ResourceStore",
    "StoreConfig",
    "create_store",
    "BACKEND_HTTP",
    "BACKEND_REDIS",
    "HttpResourceStore",
    "RedisResourceStore",
    "create_remote_store",
]
