"""Turn stored snippets into the artifact each platform expects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict

from .errors import UnsupportedPlatformError
from .model import SnippetRecord

SHEBANG = "#!/bin/bash"


class Platform(str, Enum):
    SHELL = "shell"
    # generic runtime consumer, receives the snippet as structured data
    NODE = "node"

    @classmethod
    def parse(cls, value: str | Platform) -> Platform:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedPlatformError(str(value)) from None


@dataclass(frozen=True, slots=True)
class RenderedArtifact:
    media_type: str
    body: Any


def render_shell(record: SnippetRecord) -> RenderedArtifact:
    """Prompt for every declared input, then run the stored script.

    Names and descriptions are emitted verbatim, without shell escaping.
    """

    lines = [SHEBANG]
    for item in record.inputs:
        lines.append(f"echo {item.description or item.name}?")
        lines.append(f"read {item.name}")
    lines.append(record.script)
    return RenderedArtifact(media_type="text/x-shellscript", body="\n".join(lines))


def render_node(record: SnippetRecord) -> RenderedArtifact:
    body = {
        "inputs": [item.model_dump(exclude_none=True) for item in record.inputs],
        "script": record.script,
        "description": record.description,
    }
    return RenderedArtifact(media_type="application/json", body=body)


RENDERERS: Dict[str, Callable[[SnippetRecord], RenderedArtifact]] = {
    Platform.SHELL.value: render_shell,
    Platform.NODE.value: render_node,
}


def render(platform: str | Platform, record: SnippetRecord) -> RenderedArtifact:
    name = platform.value if isinstance(platform, Platform) else str(platform)
    renderer = RENDERERS.get(name)
    if renderer is None:
        raise UnsupportedPlatformError(name)
    return renderer(record)


__all__ = [
    "Platform",
    "RenderedArtifact",
    "RENDERERS",
    "SHEBANG",
    "render",
    "render_node",
    "render_shell",
]
