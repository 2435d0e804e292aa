"""MCP tool surface for the snippet store."""

from .server import ServiceContext, create_server

__all__ = ["ServiceContext", "create_server"]
