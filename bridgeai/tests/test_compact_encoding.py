from __future__ import annotations

import pytest

from bridgeai.base.encoding import compact, default_compact_encoder, encode_payload
from bridgeai.base.errors import ConfigurationError
from bridgeai.client import BridgeAIClient


def test_strings_pass_through_untouched():
    assert encode_payload("already text", lambda v: "ENCODED") == "already text"  # nosec B101
    assert encode_payload({"a": 1}, lambda v: "ENCODED") == "ENCODED"  # nosec B101


def test_default_encoder_requires_optional_package(monkeypatch):
    def _missing(name):
        raise ImportError(name)

    monkeypatch.setattr(compact.importlib, "import_module", _missing)
    with pytest.raises(ConfigurationError, match="toon-format") as ei:
        default_compact_encoder({"a": 1})
    assert isinstance(ei.value.__cause__, ImportError)  # nosec B101


def test_default_encoder_delegates_to_toon(monkeypatch):
    class _Toon:
        @staticmethod
        def encode(value):
            return f"toon:{sorted(value)}"

    monkeypatch.setattr(compact.importlib, "import_module", lambda name: _Toon)
    assert default_compact_encoder({"b": 1, "a": 2}) == "toon:['a', 'b']"  # nosec B101


@pytest.mark.asyncio
async def test_client_uses_configured_encoder():
    client = BridgeAIClient(provider="mock", compact_encoder=lambda v: "|".join(f"{k}={v[k]}" for k in sorted(v)))
    resp = await client.chat(prompt={"y": 2, "x": 1}, use_compact_encoding=True)
    assert resp.text == "Mock response to: x=1|y=2"  # nosec B101


@pytest.mark.asyncio
async def test_missing_encoder_fails_before_backend_call(monkeypatch):
    def _missing(name):
        raise ImportError(name)

    monkeypatch.setattr(compact.importlib, "import_module", _missing)
    client = BridgeAIClient(provider="mock")
    with pytest.raises(ConfigurationError):
        await client.chat(prompt={"x": 1}, use_compact_encoding=True)
    assert client.memory == ()  # nosec B101
