"""Client for the remote JSON resource store."""

from __future__ import annotations

import logging
from typing import Any, Callable, List
from urllib.parse import quote

import httpx

from ..snippet.errors import ResourceNotFoundError, StorageError
from .config import StoreConfig

logger = logging.getLogger("snippets")


def _default_client_factory(config: StoreConfig) -> httpx.Client:
    return httpx.Client(base_url=config.url, timeout=config.timeout)


class HttpResourceStore:
    """One resource kind inside a remote store, addressed as ``/{store_id}/{resource}/{key}``."""

    def __init__(
        self,
        config: StoreConfig,
        *,
        client_factory: Callable[[StoreConfig], httpx.Client] | None = None,
    ) -> None:
        if not config.store_id:
            raise ValueError("Store id is missing")
        if not config.resource:
            raise ValueError("Resource name is missing")
        self.config = config
        factory = client_factory or _default_client_factory
        self._client = factory(config)
        self._resource_path = f"/{config.store_id}/{config.resource}/"

    def close(self) -> None:
        self._client.close()

    def list(self) -> List[Any]:
        try:
            response = self._client.get(self._resource_path)
            response.raise_for_status()
            items = response.json()
        except (httpx.HTTPError, ValueError):
            logger.debug("Failed to list resource %s", self.config.resource, exc_info=True)
            return []
        if not isinstance(items, list):
            logger.debug("Unexpected listing payload for %s: %r", self.config.resource, type(items))
            return []
        return items

    def get(self, key: str) -> Any:
        if not key:
            raise ValueError("Id is missing")
        try:
            response = self._client.get(self._item_path(key))
        except httpx.HTTPError as exc:
            raise StorageError(f"Resource store request failed: {exc}") from exc

        if response.status_code == 404:
            raise ResourceNotFoundError(key)
        if response.is_error:
            raise StorageError(
                f"Resource store returned {response.status_code} for {key}",
                status=response.status_code,
            )
        try:
            value = response.json()
        except ValueError as exc:
            raise StorageError(f"Resource store returned invalid JSON for {key}") from exc
        if value is None:
            raise ResourceNotFoundError(key)
        return value

    def set(self, key: str, value: Any) -> bool:
        if not key:
            raise ValueError("Id is missing")
        try:
            response = self._client.put(self._item_path(key), json=value if value is not None else {})
        except httpx.HTTPError as exc:
            raise StorageError(f"Resource store request failed: {exc}") from exc
        if response.is_error:
            raise StorageError(str(response.status_code), status=response.status_code)
        return True

    def remove(self, key: str) -> bool:
        if not key:
            raise ValueError("Id is missing")
        try:
            response = self._client.delete(self._item_path(key))
        except httpx.HTTPError:
            logger.debug("Failed to remove %s", key, exc_info=True)
            return False
        return response.is_success

    def remove_all(self) -> bool:
        try:
            response = self._client.delete(self._resource_path)
        except httpx.HTTPError:
            logger.debug("Failed to clear resource %s", self.config.resource, exc_info=True)
            return False
        return response.is_success

    def resource_names(self) -> List[str]:
        """Names of every resource kind held by the store."""
        try:
            response = self._client.get(f"/{self.config.store_id}")
            response.raise_for_status()
            names = response.json()
        except (httpx.HTTPError, ValueError):
            return []
        return [str(name) for name in names] if isinstance(names, list) else []

    def drop_store(self) -> bool:
        """Delete the whole store, every resource kind included."""
        try:
            response = self._client.delete(f"/{self.config.store_id}")
        except httpx.HTTPError:
            logger.debug("Failed to drop store %s", self.config.store_id, exc_info=True)
            return False
        return response.is_success

    def _item_path(self, key: str) -> str:
        # composite keys contain "/" and must stay a single path segment
        return self._resource_path + quote(key, safe="")


def create_remote_store(
    url: str,
    *,
    timeout: float = 10.0,
    client: httpx.Client | None = None,
) -> str:
    """Ask the remote service for a new, empty store and return its id."""

    owns_client = client is None
    http = client or httpx.Client(base_url=url, timeout=timeout)
    try:
        response = http.get("/new")
        response.raise_for_status()
        payload = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise StorageError(f"Failed to create a store at {url}") from exc
    finally:
        if owns_client:
            http.close()

    store_id = payload.get("id") if isinstance(payload, dict) else None
    if not store_id:
        raise StorageError("Store service did not return an id")
    return str(store_id)


__all__ = ["HttpResourceStore", "create_remote_store"]
