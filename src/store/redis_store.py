"""Redis-backed resource store, one hash per resource kind."""

from __future__ import annotations

import json
import logging
from typing import Any, List

import redis

from ..snippet.errors import ResourceNotFoundError, StorageError

logger = logging.getLogger("snippets")


class RedisResourceStore:
    """Store and retrieve JSON values for one resource kind in Redis."""

    KEY_PREFIX = "store:"

    def __init__(self, redis_client: redis.Redis, *, store_id: str, resource: str) -> None:
        if not store_id:
            raise ValueError("Store id is missing")
        if not resource:
            raise ValueError("Resource name is missing")
        self.redis = redis_client
        self.hash_key = f"{self.KEY_PREFIX}{store_id}:{resource}"

    def close(self) -> None:
        self.redis.close()

    def list(self) -> List[Any]:
        try:
            raw_values = self.redis.hvals(self.hash_key)
        except redis.RedisError:
            logger.debug("Failed to list %s", self.hash_key, exc_info=True)
            return []
        values: List[Any] = []
        for raw in raw_values:
            try:
                values.append(self._decode(raw))
            except (TypeError, ValueError):
                logger.debug("Skipping undecodable entry in %s", self.hash_key)
        return values

    def get(self, key: str) -> Any:
        if not key:
            raise ValueError("Id is missing")
        try:
            raw = self.redis.hget(self.hash_key, key)
        except redis.RedisError as exc:
            raise StorageError(f"Redis read failed: {exc}") from exc
        if raw is None:
            raise ResourceNotFoundError(key)
        try:
            return self._decode(raw)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Stored value for {key} is not valid JSON") from exc

    def set(self, key: str, value: Any) -> bool:
        if not key:
            raise ValueError("Id is missing")
        payload = json.dumps(value if value is not None else {}, separators=(",", ":"))
        try:
            self.redis.hset(self.hash_key, key, payload)
        except redis.RedisError as exc:
            raise StorageError(f"Redis write failed: {exc}") from exc
        return True

    def remove(self, key: str) -> bool:
        if not key:
            raise ValueError("Id is missing")
        try:
            return bool(self.redis.hdel(self.hash_key, key))
        except redis.RedisError:
            logger.debug("Failed to remove %s from %s", key, self.hash_key, exc_info=True)
            return False

    def remove_all(self) -> bool:
        try:
            self.redis.delete(self.hash_key)
        except redis.RedisError:
            logger.debug("Failed to clear %s", self.hash_key, exc_info=True)
            return False
        return True

    @staticmethod
    def _decode(raw: Any) -> Any:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        return json.loads(raw)


__all__ = ["RedisResourceStore"]
