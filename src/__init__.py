"""Core package for the snippet store service."""

from .snippet import (
    IdentityResolver,
    KeyScheme,
    Platform,
    SnippetReader,
    SnippetRecord,
    SnippetWriter,
    render,
)
from .store import ResourceStore, StoreConfig, create_store

__all__ = [
    "IdentityResolver",
    "KeyScheme",
    "Platform",
    "SnippetReader",
    "SnippetRecord",
    "SnippetWriter",
    "render",
    "ResourceStore",
    "StoreConfig",
    "create_store",
]
