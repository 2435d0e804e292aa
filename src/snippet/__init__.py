"""Snippet identity, persistence and rendering."""

from .errors import (
    EmptyScriptError,
    NotFoundError,
    PlatformMismatchError,
    ResourceNotFoundError,
    SnippetError,
    StorageError,
    UnsupportedPlatformError,
    ValidationError,
)
from .identity import DEFAULT_OWNER, IdentityResolver, KeyScheme, resolve
from .model import SnippetInput, SnippetRecord, SnippetSummary
from .reader import SnippetReader
from .renderer import Platform, RenderedArtifact, render
from .writer import SnippetWriter

__all__ = [
    "DEFAULT_OWNER",
    "EmptyScriptError",
    "IdentityResolver",
    "KeyScheme",
    "NotFoundError",
    "Platform",
    "PlatformMismatchError",
    "RenderedArtifact",
    "ResourceNotFoundError",
    "SnippetError",
    "SnippetInput",
    "SnippetReader",
    "SnippetRecord",
    "SnippetSummary",
    "SnippetWriter",
    "StorageError",
    "UnsupportedPlatformError",
    "ValidationError",
    "render",
    "resolve",
]
