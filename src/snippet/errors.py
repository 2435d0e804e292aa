"""Typed failures raised by the snippet core."""

from __future__ import annotations


class SnippetError(Exception):
    """Base class for snippet failures; carries the HTTP-like status it maps to."""

    status_code: int = 500


class ValidationError(SnippetError):
    status_code = 400


class EmptyScriptError(ValidationError):
    def __init__(self, message: str = "Script cannot be empty") -> None:
        super().__init__(message)


class NotFoundError(SnippetError):
    status_code = 404

    def __init__(self, message: str = "Snippet not found") -> None:
        super().__init__(message)


class PlatformMismatchError(SnippetError):
    """The identity resolves to a record stored for another platform."""

    status_code = 415

    def __init__(self, requested: str, stored: str) -> None:
        super().__init__(f"Snippet is stored for platform {stored!r}, not {requested!r}")
        self.requested = requested
        self.stored = stored


class UnsupportedPlatformError(SnippetError):
    status_code = 400

    def __init__(self, platform: str) -> None:
        super().__init__(f"Invalid snippet format: {platform}")
        self.platform = platform


class StorageError(SnippetError):
    """The external resource store rejected or failed a call."""

    status_code = 500

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ResourceNotFoundError(StorageError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Resource not found: {key}", status=404)
        self.key = key


__all__ = [
    "SnippetError",
    "ValidationError",
    "EmptyScriptError",
    "NotFoundError",
    "PlatformMismatchError",
    "UnsupportedPlatformError",
    "StorageError",
    "ResourceNotFoundError",
]
