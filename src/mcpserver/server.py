"""FastMCP server exposing snippet lookups as MCP tools."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from ..snippet import (
    IdentityResolver,
    Platform,
    SnippetError,
    SnippetReader,
    render,
)
from ..api.service import ApiSettings
from ..store import ResourceStore, create_store

logger = logging.getLogger("snippets")


class ServiceContext:
    """Lazy dependency container for MCP tool handlers."""

    def __init__(self, settings: ApiSettings | None = None, store: ResourceStore | None = None) -> None:
        self._settings = settings
        self._store = store

    @property
    def settings(self) -> ApiSettings:
        if self._settings is None:
            self._settings = ApiSettings.from_env()
        return self._settings

    def store(self) -> ResourceStore:
        if self._store is None:
            self._store = create_store(self.settings.store_config())
        return self._store

    def resolver(self) -> IdentityResolver:
        return self.settings.resolver()

    def reader(self) -> SnippetReader:
        return SnippetReader(self.store(), self.resolver())


def _handle_snippet_error(exc: SnippetError) -> ToolError:
    return ToolError(str(exc))


def get_snippet_tool(
    services: ServiceContext,
    platform: str,
    name: str,
    owner: str | None = None,
) -> Dict[str, Any]:
    try:
        Platform.parse(platform)
        record = services.reader().read(platform, owner, name)
        artifact = render(platform, record)
    except SnippetError as exc:
        logger.debug("get_snippet %s:%s/%s failed: %s", platform, owner, name, exc)
        raise _handle_snippet_error(exc) from exc
    return {"media_type": artifact.media_type, "content": artifact.body}


def list_snippets_tool(services: ServiceContext) -> List[Dict[str, Any]]:
    return [record.summary().model_dump() for record in services.reader().list()]


def snippet_uid_tool(
    services: ServiceContext,
    platform: str,
    name: str,
    owner: str | None = None,
) -> str:
    resolver = services.resolver()
    if not resolver.binds_platform:
        raise ToolError("Identity lookup requires hashed keys.")
    return resolver.resolve(platform, owner, name)


def create_server(services: ServiceContext | None = None) -> FastMCP:
    """Create a FastMCP server wired to the snippet store."""

    services = services or ServiceContext()
    server = FastMCP("Snippets MCP Server")

    @server.tool(
        name="get_snippet",
        description=(
            "Fetch a stored snippet rendered for its platform. `platform` is `shell` (returns a"
            " bash script that prompts for each input) or `node` (returns inputs, script and"
            " description as data). `owner` defaults to `snippets`."
        ),
        tags={"snippets"},
    )
    def get_snippet(platform: str, name: str, owner: str | None = None) -> Dict[str, Any]:
        """Return the rendered artifact for one snippet."""
        if not name or not name.strip():
            raise ToolError("Snippet name is required.")
        return get_snippet_tool(services, platform, name, owner)

    @server.tool(
        name="list_snippets",
        description="List the platform, owner and name of every stored snippet.",
        tags={"snippets"},
    )
    def list_snippets() -> List[Dict[str, Any]]:
        return list_snippets_tool(services)

    @server.tool(
        name="snippet_uid",
        description="Return the storage key computed for a snippet identity.",
        tags={"snippets"},
    )
    def snippet_uid(platform: str, name: str, owner: str | None = None) -> str:
        return snippet_uid_tool(services, platform, name, owner)

    return server


__all__ = [
    "ServiceContext",
    "create_server",
    "get_snippet_tool",
    "list_snippets_tool",
    "snippet_uid_tool",
]
