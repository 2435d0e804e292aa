import pytest
from fastmcp.exceptions import ToolError

from src.api.service import ApiSettings
from src.mcpserver.server import (
    ServiceContext,
    create_server,
    get_snippet_tool,
    list_snippets_tool,
    snippet_uid_tool,
)
from src.snippet.errors import ResourceNotFoundError
from src.snippet.identity import KeyScheme, resolve


class _MemoryStore:
    def __init__(self, items=None):
        self.items = dict(items or {})

    def list(self):
        return list(self.items.values())

    def get(self, key):
        if key not in self.items:
            raise ResourceNotFoundError(key)
        return self.items[key]


def _settings(key_scheme=KeyScheme.HASHED):
    return ApiSettings(
        store_backend="http",
        store_url="https://store.example",
        store_id="test",
        store_resource="s",
        store_timeout=5.0,
        redis_url="redis://127.0.0.1:6379/0",
        key_scheme=key_scheme,
        search_full_records=False,
        log_level="WARNING",
    )


def _services(key_scheme=KeyScheme.HASHED):
    key = resolve("shell", "snippets", "uptime", key_scheme)
    store = _MemoryStore(
        {
            key: {
                "id": key,
                "platform": "shell",
                "owner": "snippets",
                "name": "uptime",
                "script": "uptime",
            }
        }
    )
    return ServiceContext(settings=_settings(key_scheme), store=store)


def test_get_snippet_renders_artifact():
    result = get_snippet_tool(_services(), "shell", "uptime")

    assert result == {"media_type": "text/x-shellscript", "content": "#!/bin/bash\nuptime"}


@pytest.mark.parametrize(
    ("platform", "name"),
    [("shell", "missing"), ("cobol", "uptime")],
)
def test_get_snippet_errors_become_tool_errors(platform, name):
    with pytest.raises(ToolError):
        get_snippet_tool(_services(), platform, name)


def test_list_snippets_returns_projection():
    assert list_snippets_tool(_services()) == [
        {"platform": "shell", "owner": "snippets", "name": "uptime"}
    ]


def test_snippet_uid_requires_hashed_scheme():
    assert snippet_uid_tool(_services(), "shell", "uptime") == resolve("shell", "snippets", "uptime")
    with pytest.raises(ToolError):
        snippet_uid_tool(_services(KeyScheme.COMPOSITE), "shell", "uptime")


def test_create_server_builds_named_server():
    server = create_server(_services())

    assert server.name == "Snippets MCP Server"
