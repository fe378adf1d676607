from __future__ import annotations

import pytest

from bridgeai.base.errors import ConfigurationError
from bridgeai.base.models import (
    ChatRequest,
    ChatResponse,
    ImageInput,
    MemoryDirective,
    MemoryMode,
    Message,
    ProviderMetadata,
    ResponseFormat,
    StreamChunk,
    ToolSpec,
    render_content,
)


def test_chat_request_normalizes_convenience_inputs():
    req = ChatRequest(
        prompt="hi",
        messages=[{"role": "user", "content": "earlier"}],
        tools=[{"name": "lookup", "description": "find", "parameters": {"type": "object"}}],
        images=[{"type": "url", "data": "https://x/y.png"}],
        response_format="json",
        memory=True,
    )
    assert req.messages == (Message(role="user", content="earlier"),)  # nosec B101
    assert req.tools[0] == ToolSpec(name="lookup", description="find", parameters={"type": "object"})  # nosec B101
    assert req.images[0] == ImageInput(type="url", data="https://x/y.png")  # nosec B101
    assert req.wants_json  # nosec B101
    assert req.memory.mode is MemoryMode.ENABLED  # nosec B101


def test_chat_request_evolve_leaves_original_untouched():
    req = ChatRequest(prompt="a")
    other = req.evolve(prompt="b", model="m")
    assert req.prompt == "a" and req.model is None  # nosec B101
    assert other.prompt == "b" and other.model == "m"  # nosec B101


def test_chat_request_rejects_non_positive_max_tokens():
    with pytest.raises(ValueError):
        ChatRequest(prompt="x", max_tokens=0)


def test_structured_prompt_renders_canonically():
    a = ChatRequest(prompt={"b": 1, "a": [1, 2]})
    b = ChatRequest(prompt={"a": [1, 2], "b": 1})
    assert a.prompt_text() == b.prompt_text() == '{"a":[1,2],"b":1}'  # nosec B101
    assert render_content("plain") == "plain"  # nosec B101


def test_message_rejects_unknown_role():
    with pytest.raises(ValueError):
        Message(role="tool", content="x")


def test_memory_directive_variants():
    assert MemoryDirective.coerce(None).mode is MemoryMode.DISABLED  # nosec B101
    assert MemoryDirective.coerce(False).enabled is False  # nosec B101
    windowed = MemoryDirective.coerce({"strategy": "sliding-window", "limit": 3})
    assert windowed.mode is MemoryMode.WINDOWED and windowed.limit == 3  # nosec B101


@pytest.mark.parametrize(
    "value",
    [
        {"strategy": "summarize", "limit": 3},
        {"strategy": "sliding-window", "limit": 0},
        {"strategy": "sliding-window"},
        "always",
    ],
)
def test_memory_directive_rejects_invalid(value):
    with pytest.raises(ConfigurationError):
        MemoryDirective.coerce(value)


def test_response_format_forms():
    assert ResponseFormat.coerce("text").wants_json is False  # nosec B101
    schema = {"type": "object", "properties": {"a": {"type": "string"}}}
    fmt = ResponseFormat.coerce({"type": "json_object", "schema": schema})
    assert fmt.wants_json and fmt.schema == schema  # nosec B101
    with pytest.raises(ValueError):
        ResponseFormat.coerce("yaml")


def test_image_input_data_url():
    img = ImageInput(type="base64", data="QUJD", media_type="image/png")
    assert img.as_url() == "data:image/png;base64,QUJD"  # nosec B101
    assert ImageInput(type="base64", data="QUJD").resolved_media_type == "image/jpeg"  # nosec B101


def test_response_hash_assigned_once():
    resp = ChatResponse(text="t", meta=ProviderMetadata(provider_name="p", model_name="m"))
    resp.assign_hash("abc")
    assert resp.hash == "abc"  # nosec B101
    with pytest.raises(RuntimeError):
        resp.assign_hash("def")


def test_response_to_dict_excludes_raw():
    resp = ChatResponse(text="t", meta=ProviderMetadata(provider_name="p", model_name="m"), raw=object())
    data = resp.to_dict()
    assert "raw" not in data  # nosec B101
    assert data["meta"]["provider_name"] == "p"  # nosec B101
    assert resp.provider == "p"  # nosec B101


def test_stream_chunk_done():
    chunk = StreamChunk.done()
    assert chunk.is_done and chunk.text == "" and chunk.tool_calls is None  # nosec B101
    assert StreamChunk.done(tool_calls=[]).tool_calls is None  # nosec B101
