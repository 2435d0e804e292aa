from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .identity import DEFAULT_OWNER


class SnippetInput(BaseModel):
    """One interactive parameter a shell rendering prompts for."""

    name: str = Field(..., min_length=1)
    description: str | None = None

    model_config = ConfigDict(extra="ignore")


class SnippetSummary(BaseModel):
    """Public projection of a stored snippet."""

    platform: str
    owner: str
    name: str


class SnippetRecord(BaseModel):
    """Snippet as persisted in the resource store."""

    id: str
    platform: str
    owner: str = DEFAULT_OWNER
    name: str
    script: str = Field(..., min_length=1)
    inputs: List[SnippetInput] = Field(default_factory=list)
    description: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("inputs", mode="before")
    @classmethod
    def _null_inputs(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_store(self) -> dict[str, Any]:
        payload = self.model_dump()
        payload["inputs"] = [item.model_dump(exclude_none=True) for item in self.inputs]
        return payload

    def summary(self) -> SnippetSummary:
        return SnippetSummary(platform=self.platform, owner=self.owner, name=self.name)


__all__ = ["SnippetInput", "SnippetRecord", "SnippetSummary"]
