"""FastAPI routes for snippet storage, lookup and rendering."""

from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from ..snippet import (
    IdentityResolver,
    RenderedArtifact,
    SnippetReader,
    SnippetRecord,
    SnippetSummary,
    SnippetWriter,
)
from ..store import ResourceStore
from .service import (
    ApiSettings,
    list_snippets_service,
    parse_snippet_payload,
    read_snippet_service,
    render_snippet_service,
    search_snippets_service,
    snippet_uid_service,
    write_snippet_service,
)


def get_settings(request: Request) -> ApiSettings:
    settings = getattr(request.app.state, "settings", None)
    if not isinstance(settings, ApiSettings):
        raise RuntimeError("API settings have not been initialised")
    return settings


def get_store(request: Request) -> ResourceStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Resource store has not been initialised")
    return store


def get_resolver(settings: ApiSettings = Depends(get_settings)) -> IdentityResolver:
    return settings.resolver()


def get_reader(
    store: ResourceStore = Depends(get_store),
    resolver: IdentityResolver = Depends(get_resolver),
) -> SnippetReader:
    return SnippetReader(store, resolver)


def get_writer(
    store: ResourceStore = Depends(get_store),
    resolver: IdentityResolver = Depends(get_resolver),
) -> SnippetWriter:
    return SnippetWriter(store, resolver)


async def get_write_payload(request: Request) -> Any:
    # body is JSON whatever the content-type header says
    return parse_snippet_payload(await request.body())


def _artifact_response(artifact: RenderedArtifact) -> Response:
    if isinstance(artifact.body, str):
        return PlainTextResponse(artifact.body, media_type=artifact.media_type)
    return JSONResponse(artifact.body, media_type=artifact.media_type)


router = APIRouter()


@router.get("/index", response_model=List[SnippetSummary])
def list_snippets(reader: SnippetReader = Depends(get_reader)) -> List[SnippetSummary]:
    return list_snippets_service(reader)


@router.get("/search", response_model=None)
def search_snippets(
    q: str | None = Query(None, description="Text to match against name, owner and description"),
    platform: str | None = Query(None, description="Only return snippets for this platform"),
    owner: str | None = Query(None, description="Only return snippets of this owner"),
    reader: SnippetReader = Depends(get_reader),
    settings: ApiSettings = Depends(get_settings),
) -> List[SnippetRecord] | List[SnippetSummary]:
    return search_snippets_service(reader, settings, query=q, platform=platform, owner=owner)


@router.get("/uid/{platform}/{owner}/{name}", response_class=PlainTextResponse)
def snippet_uid(
    platform: str,
    owner: str,
    name: str,
    resolver: IdentityResolver = Depends(get_resolver),
) -> str:
    return snippet_uid_service(platform, owner, name, resolver)


@router.get("/uid/{platform}/{name}", response_class=PlainTextResponse)
def default_owner_snippet_uid(
    platform: str,
    name: str,
    resolver: IdentityResolver = Depends(get_resolver),
) -> str:
    return snippet_uid_service(platform, None, name, resolver)


@router.get("/snippets/{platform}/{owner}/{name}", response_model=SnippetRecord)
def get_snippet(
    platform: str,
    owner: str,
    name: str,
    reader: SnippetReader = Depends(get_reader),
) -> SnippetRecord:
    return read_snippet_service(platform, owner, name, reader)


@router.get("/s/{platform}/{owner}/{name}")
def read_snippet(
    platform: str,
    owner: str,
    name: str,
    reader: SnippetReader = Depends(get_reader),
) -> Response:
    return _artifact_response(render_snippet_service(platform, owner, name, reader))


@router.get("/s/{platform}/{name}")
def read_default_owner_snippet(
    platform: str,
    name: str,
    reader: SnippetReader = Depends(get_reader),
) -> Response:
    return _artifact_response(render_snippet_service(platform, None, name, reader))


@router.put("/s/{platform}/{owner}/{name}", response_class=PlainTextResponse)
def write_snippet(
    platform: str,
    owner: str,
    name: str,
    payload: Any = Depends(get_write_payload),
    writer: SnippetWriter = Depends(get_writer),
) -> str:
    write_snippet_service(platform, owner, name, payload, writer)
    return "OK"


@router.put("/s/{platform}/{name}", response_class=PlainTextResponse)
def write_default_owner_snippet(
    platform: str,
    name: str,
    payload: Any = Depends(get_write_payload),
    writer: SnippetWriter = Depends(get_writer),
) -> str:
    write_snippet_service(platform, None, name, payload, writer)
    return "OK"


__all__ = ["router", "get_settings", "get_store", "get_reader", "get_writer", "get_resolver"]
