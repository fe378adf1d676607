from __future__ import annotations

import pytest

from bridgeai.base.errors import UnknownProviderError
from bridgeai.base.logging import get_logger
from bridgeai.base.models import ChatRequest
from bridgeai.base.resilience import FallbackResult, run_fallback_chain
from fakes import ScriptedAdapter, terminal, transient

_LOGGER = get_logger("bridgeai.tests.fallback")


def _builder(adapters):
    built = []

    def build(name):
        built.append(name)
        adapter = adapters[name]
        if isinstance(adapter, BaseException):
            raise adapter
        return adapter

    build.built = built
    return build


@pytest.mark.asyncio
async def test_first_success_short_circuits():
    b = ScriptedAdapter("b", outcomes=[terminal(provider="b")])
    c = ScriptedAdapter("c", outcomes=["from c"])
    d = ScriptedAdapter("d")
    build = _builder({"b": b, "c": c, "d": d})
    request = ChatRequest(prompt="hi")

    result = await run_fallback_chain(terminal(), ["b", "c", "d"], build, request, logger=_LOGGER)

    assert isinstance(result, FallbackResult)  # nosec B101
    assert result.provider == "c" and result.response.text == "from c"  # nosec B101
    assert build.built == ["b", "c"]  # nosec B101
    assert len(b.calls) == 1 and d.calls == []  # nosec B101
    assert c.calls[0] is request  # nosec B101


@pytest.mark.asyncio
async def test_exhausted_chain_raises_primary_error():
    primary = transient(503)
    b = ScriptedAdapter("b", outcomes=[terminal(provider="b")])
    c = ScriptedAdapter("c", outcomes=[transient(500, provider="c")])
    with pytest.raises(Exception) as ei:
        await run_fallback_chain(primary, ["b", "c"], _builder({"b": b, "c": c}), ChatRequest(prompt="x"), logger=_LOGGER)
    assert ei.value is primary  # nosec B101


@pytest.mark.asyncio
async def test_fallback_attempts_are_not_retried():
    b = ScriptedAdapter("b", outcomes=[transient(503, provider="b"), "never"])
    primary = terminal()
    with pytest.raises(Exception) as ei:
        await run_fallback_chain(primary, ["b"], _builder({"b": b}), ChatRequest(prompt="x"), logger=_LOGGER)
    assert ei.value is primary  # nosec B101
    assert len(b.calls) == 1  # nosec B101


@pytest.mark.asyncio
async def test_empty_chain_raises_primary_error():
    primary = terminal()
    with pytest.raises(Exception) as ei:
        await run_fallback_chain(primary, [], _builder({}), ChatRequest(prompt="x"), logger=_LOGGER)
    assert ei.value is primary  # nosec B101


@pytest.mark.asyncio
async def test_construction_failure_is_absorbed(log_capture):
    c = ScriptedAdapter("c", outcomes=["ok"])
    build = _builder({"bad": UnknownProviderError("no such provider", provider="bad"), "c": c})
    result = await run_fallback_chain(terminal(), ["bad", "c"], build, ChatRequest(prompt="x"), logger=_LOGGER)
    assert result.provider == "c"  # nosec B101

    events = log_capture.events()
    attempts = [e for e in events if e["event"] == "fallback.attempt"]
    assert attempts and attempts[0]["provider"] == "bad"  # nosec B101
    assert attempts[0]["error_code"] == "configuration"  # nosec B101
    assert attempts[0]["ok"] is False  # nosec B101
    assert any(e["event"] == "fallback.success" and e["provider"] == "c" for e in events)  # nosec B101


@pytest.mark.asyncio
async def test_exhaustion_is_logged_at_error(log_capture):
    with pytest.raises(Exception):
        await run_fallback_chain(
            terminal(),
            ["b"],
            _builder({"b": ScriptedAdapter("b", outcomes=[terminal(provider="b")])}),
            ChatRequest(prompt="x"),
            logger=_LOGGER,
        )
    assert "fallback.exhausted" in log_capture.names()  # nosec B101
