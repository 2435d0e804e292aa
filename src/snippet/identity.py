"""Map a snippet identity ``(platform, owner, name)`` to a storage key."""

from __future__ import annotations

import hashlib
from enum import Enum

DEFAULT_OWNER = "snippets"


class KeyScheme(str, Enum):
    """How identities are turned into store keys.

    ``hashed`` keys are the hex SHA-256 of ``"{platform}:{owner}/{name}"``.
    ``composite`` keys are the readable ``"{owner}/{name}"`` path and do not
    encode the platform, so the same owner/name collides across platforms.
    """

    HASHED = "hashed"
    COMPOSITE = "composite"

    @classmethod
    def parse(cls, value: str | KeyScheme) -> "KeyScheme":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown key scheme: {value!r}") from None


def normalize_owner(owner: str | None) -> str:
    return owner or DEFAULT_OWNER


def resolve(
    platform: str,
    owner: str | None,
    name: str,
    scheme: KeyScheme = KeyScheme.HASHED,
) -> str:
    owner = normalize_owner(owner)
    if scheme is KeyScheme.COMPOSITE:
        return f"{owner}/{name}"
    identity = f"{platform}:{owner}/{name}"
    return hashlib.sha256(identity.encode("utf-8")).hexdigest()


class IdentityResolver:
    """Resolver bound to one key scheme for the lifetime of the process."""

    def __init__(self, scheme: KeyScheme | str = KeyScheme.HASHED) -> None:
        self.scheme = KeyScheme.parse(scheme)

    @property
    def binds_platform(self) -> bool:
        return self.scheme is KeyScheme.HASHED

    def resolve(self, platform: str, owner: str | None, name: str) -> str:
        return resolve(platform, owner, name, self.scheme)


__all__ = ["DEFAULT_OWNER", "KeyScheme", "IdentityResolver", "normalize_owner", "resolve"]
