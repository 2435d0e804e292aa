from __future__ import annotations

from typing import Any, List, Protocol


class ResourceStore(Protocol):
    """Key-value access to one resource kind of a store.

    ``list`` never raises; it returns an empty list when the store cannot be
    read. ``get`` and ``set`` raise :class:`~src.snippet.errors.StorageError`.
    """

    def list(self) -> List[Any]: ...

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> bool: ...

    def remove(self, key: str) -> bool: ...

    def remove_all(self) -> bool: ...

    def close(self) -> None: ...


__all__ = ["ResourceStore"]
