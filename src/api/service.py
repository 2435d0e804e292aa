"""Service-layer helpers for snippet storage and rendering."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, List

from fastapi import HTTPException

from ..snippet import (
    IdentityResolver,
    KeyScheme,
    Platform,
    RenderedArtifact,
    SnippetError,
    SnippetReader,
    SnippetRecord,
    SnippetSummary,
    SnippetWriter,
    StorageError,
    ValidationError,
    render,
)
from ..store import BACKEND_HTTP, BACKEND_REDIS, StoreConfig

logger = logging.getLogger("snippets")

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class ApiSettings:
    """Runtime configuration for the API server."""

    store_backend: str
    store_url: str
    store_id: str | None
    store_resource: str
    store_timeout: float
    redis_url: str
    key_scheme: KeyScheme
    search_full_records: bool
    log_level: str

    @classmethod
    def from_env(cls) -> "ApiSettings":
        def _float_env(name: str, default: float) -> float:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return float(raw)
            except ValueError:
                logger.warning("Invalid number for %s: %s", name, raw)
                return default

        backend = os.getenv("STORE_BACKEND", BACKEND_HTTP).strip().lower()
        if backend not in (BACKEND_HTTP, BACKEND_REDIS):
            raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")

        return cls(
            store_backend=backend,
            store_url=os.getenv("STORE_URL", "https://store.homebots.io"),
            store_id=os.getenv("STORE_ID") or None,
            store_resource=os.getenv("STORE_RESOURCE", "s"),
            store_timeout=_float_env("STORE_TIMEOUT", 10.0),
            redis_url=os.getenv("REDIS_URL", "redis://127.0.0.1:6379/0"),
            key_scheme=KeyScheme.parse(os.getenv("SNIPPETS_KEY_SCHEME", KeyScheme.HASHED.value)),
            search_full_records=os.getenv("SNIPPETS_SEARCH_FULL_RECORDS", "").strip().lower()
            in _TRUE_VALUES,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def store_config(self) -> StoreConfig:
        return StoreConfig(
            backend=self.store_backend,
            url=self.store_url,
            store_id=self.store_id,
            resource=self.store_resource,
            timeout=self.store_timeout,
            redis_url=self.redis_url,
        )

    def resolver(self) -> IdentityResolver:
        return IdentityResolver(self.key_scheme)


def _to_http_exception(exc: SnippetError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=str(exc))


def parse_snippet_payload(body: bytes) -> Any:
    """Decode a write request body; an empty body decodes to ``None``."""
    try:
        return json.loads(body or b"null")
    except ValueError as exc:
        error = ValidationError("Snippet payload must be a JSON object")
        raise _to_http_exception(error) from exc


def read_snippet_service(
    platform: str,
    owner: str | None,
    name: str,
    reader: SnippetReader,
) -> SnippetRecord:
    try:
        return reader.read(platform, owner, name)
    except SnippetError as exc:
        raise _to_http_exception(exc) from exc


def render_snippet_service(
    platform: str,
    owner: str | None,
    name: str,
    reader: SnippetReader,
) -> RenderedArtifact:
    try:
        # reject unknown platforms before touching the store
        Platform.parse(platform)
        record = reader.read(platform, owner, name)
        return render(platform, record)
    except SnippetError as exc:
        raise _to_http_exception(exc) from exc


def write_snippet_service(
    platform: str,
    owner: str | None,
    name: str,
    payload: Any,
    writer: SnippetWriter,
) -> SnippetRecord:
    try:
        return writer.write(platform, owner, name, payload)
    except StorageError as exc:
        logger.exception("Failed to store snippet %s:%s/%s", platform, owner, name)
        raise _to_http_exception(exc) from exc
    except SnippetError as exc:
        raise _to_http_exception(exc) from exc


def list_snippets_service(reader: SnippetReader) -> List[SnippetSummary]:
    return [record.summary() for record in reader.list()]


def search_snippets_service(
    reader: SnippetReader,
    settings: ApiSettings,
    *,
    query: str | None = None,
    platform: str | None = None,
    owner: str | None = None,
) -> List[SnippetRecord] | List[SnippetSummary]:
    records = reader.search(query, platform=platform, owner=owner)
    if settings.search_full_records:
        return records
    return [record.summary() for record in records]


def snippet_uid_service(
    platform: str,
    owner: str | None,
    name: str,
    resolver: IdentityResolver,
) -> str:
    if not resolver.binds_platform:
        raise HTTPException(status_code=404, detail="Identity lookup requires hashed keys")
    return resolver.resolve(platform, owner, name)


__all__ = [
    "ApiSettings",
    "parse_snippet_payload",
    "read_snippet_service",
    "render_snippet_service",
    "write_snippet_service",
    "list_snippets_service",
    "search_snippets_service",
    "snippet_uid_service",
]
