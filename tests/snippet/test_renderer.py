import pytest

from src.snippet.errors import UnsupportedPlatformError
from src.snippet.model import SnippetInput, SnippetRecord
from src.snippet.renderer import RENDERERS, Platform, render


def _record(**overrides):
    data = {
        "id": "key",
        "platform": "shell",
        "owner": "snippets",
        "name": "greet",
        "script": "echo hi $user",
        "inputs": [SnippetInput(name="user", description="Your username")],
        "description": "Say hello",
    }
    data.update(overrides)
    return SnippetRecord(**data)


def test_shell_rendering_prompts_for_inputs_before_script():
    artifact = render("shell", _record())

    assert artifact.body == "#!/bin/bash\necho Your username?\nread user\necho hi $user"
    assert artifact.media_type == "text/x-shellscript"


def test_shell_prompt_falls_back_to_input_name():
    record = _record(
        inputs=[SnippetInput(name="host"), SnippetInput(name="port", description="Port")],
        script="ssh $host -p $port",
    )

    artifact = render(Platform.SHELL, record)

    assert artifact.body.splitlines() == [
        "#!/bin/bash",
        "echo host?",
        "read host",
        "echo Port?",
        "read port",
        "ssh $host -p $port",
    ]


def test_shell_rendering_without_inputs_is_shebang_and_script():
    artifact = render("shell", _record(inputs=[], script="uptime"))

    assert artifact.body == "#!/bin/bash\nuptime"


def test_shell_rendering_does_not_escape_descriptions():
    record = _record(inputs=[SnippetInput(name="x", description="$(whoami) `id`")])

    assert "echo $(whoami) `id`?" in render("shell", record).body


def test_node_rendering_reproduces_inputs_script_and_description():
    artifact = render("node", _record(platform="node"))

    assert artifact.media_type == "application/json"
    assert artifact.body == {
        "inputs": [{"name": "user", "description": "Your username"}],
        "script": "echo hi $user",
        "description": "Say hello",
    }


def test_unknown_platform_is_unsupported():
    with pytest.raises(UnsupportedPlatformError) as excinfo:
        render("cobol", _record())

    assert excinfo.value.status_code == 400
    assert excinfo.value.platform == "cobol"


def test_platform_without_registered_renderer_is_unsupported(monkeypatch):
    monkeypatch.delitem(RENDERERS, "node")

    with pytest.raises(UnsupportedPlatformError) as excinfo:
        render(Platform.NODE, _record(platform="node"))

    assert excinfo.value.platform == "node"
