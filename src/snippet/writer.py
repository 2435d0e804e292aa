from __future__ import annotations

import logging
from typing import Any, List, Mapping

from pydantic import ValidationError as PydanticValidationError

from ..store.base import ResourceStore
from .errors import EmptyScriptError, ValidationError
from .identity import IdentityResolver, normalize_owner
from .model import SnippetInput, SnippetRecord

logger = logging.getLogger("snippets")


class SnippetWriter:
    """Validate inbound snippet payloads and persist them under their identity."""

    def __init__(self, repository: ResourceStore, resolver: IdentityResolver) -> None:
        self.repository = repository
        self.resolver = resolver

    def write(
        self,
        platform: str,
        owner: str | None,
        name: str,
        payload: Mapping[str, Any],
    ) -> SnippetRecord:
        """Build the normalized record and store it with a single ``set``.

        Nothing reaches the store unless the whole payload validates. Two
        writes to the same identity overwrite each other; the last one wins.
        """
        if not isinstance(payload, Mapping):
            raise ValidationError("Snippet payload must be a JSON object")

        script = payload.get("script")
        if not script:
            raise EmptyScriptError()
        if not isinstance(script, str):
            raise ValidationError("Script must be a string")

        inputs = self._normalize_inputs(payload.get("inputs"))

        description = payload.get("description")
        if description is None:
            description = ""
        elif not isinstance(description, str):
            raise ValidationError("Description must be a string")

        owner = normalize_owner(owner)
        record = SnippetRecord(
            id=self.resolver.resolve(platform, owner, name),
            platform=platform,
            owner=owner,
            name=name,
            script=script,
            inputs=inputs,
            description=description,
        )

        self.repository.set(record.id, record.to_store())
        logger.info("Stored snippet %s:%s/%s as %s", platform, owner, name, record.id)
        return record

    @staticmethod
    def _normalize_inputs(raw: Any) -> List[SnippetInput]:
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise ValidationError("Inputs must be a list")

        inputs: List[SnippetInput] = []
        seen: set[str] = set()
        for position, item in enumerate(raw):
            try:
                snippet_input = SnippetInput.model_validate(item)
            except PydanticValidationError as exc:
                raise ValidationError(f"Invalid input at position {position}") from exc
            if snippet_input.name in seen:
                raise ValidationError(f"Duplicate input name: {snippet_input.name}")
            seen.add(snippet_input.name)
            inputs.append(snippet_input)
        return inputs


__all__ = ["SnippetWriter"]
