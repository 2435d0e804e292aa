from __future__ import annotations

import logging
from typing import Any, List

from pydantic import ValidationError as PydanticValidationError

from ..store.base import ResourceStore
from .errors import NotFoundError, PlatformMismatchError, StorageError
from .identity import IdentityResolver, normalize_owner
from .model import SnippetRecord

logger = logging.getLogger("snippets")


class SnippetReader:
    """Fetch stored snippets by identity."""

    def __init__(self, repository: ResourceStore, resolver: IdentityResolver) -> None:
        self.repository = repository
        self.resolver = resolver

    def read(self, platform: str, owner: str | None, name: str) -> SnippetRecord:
        """Return the record for an identity.

        Missing keys and transport failures both surface as ``NotFoundError``.
        A record stored for a different platform raises
        ``PlatformMismatchError`` instead.
        """
        owner = normalize_owner(owner)
        key = self.resolver.resolve(platform, owner, name)
        try:
            raw = self.repository.get(key)
        except StorageError as exc:
            logger.info("Snippet %s:%s/%s unavailable: %s", platform, owner, name, exc)
            raise NotFoundError() from exc

        record = self._decode(raw)
        if record is None:
            logger.info("Snippet %s:%s/%s has an unreadable record", platform, owner, name)
            raise NotFoundError()

        if record.platform != platform:
            raise PlatformMismatchError(requested=platform, stored=record.platform)
        return record

    def list(self) -> List[SnippetRecord]:
        records: List[SnippetRecord] = []
        for raw in self.repository.list():
            record = self._decode(raw)
            if record is not None:
                records.append(record)
        return records

    def search(
        self,
        query: str | None = None,
        *,
        platform: str | None = None,
        owner: str | None = None,
    ) -> List[SnippetRecord]:
        needle = query.strip().lower() if query else ""
        results: List[SnippetRecord] = []
        for record in self.list():
            if platform and record.platform != platform:
                continue
            if owner and record.owner != owner:
                continue
            if needle:
                haystack = " ".join((record.name, record.owner, record.description)).lower()
                if needle not in haystack:
                    continue
            results.append(record)
        return results

    @staticmethod
    def _decode(raw: Any) -> SnippetRecord | None:
        if not isinstance(raw, dict):
            return None
        try:
            return SnippetRecord.model_validate(raw)
        except PydanticValidationError:
            logger.debug("Skipping malformed snippet record %r", raw.get("id"))
            return None


__all__ = ["SnippetReader"]
