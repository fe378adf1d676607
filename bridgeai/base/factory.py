"""Provider registry.

Purpose
-------
Map canonical provider identifiers to adapter constructors. Built-in adapters
are imported lazily with ``importlib`` so that a missing optional SDK only
matters when that provider is actually used. Additional backends can be
plugged in at runtime with :meth:`ProviderFactory.register`.

The registry performs no retries or fallbacks; it either returns an adapter
or raises a ``ConfigurationError`` subclass.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from importlib import import_module
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from .dto.adapter_params import AdapterParams
from .errors import ConfigurationError, UnknownProviderError
from .interfaces import LLMProvider

AdapterConstructor = Callable[..., LLMProvider]


@dataclass(frozen=True)
class _ModuleSpec:
    module: str
    cls: str


@dataclass(frozen=True)
class _Entry:
    target: Union[_ModuleSpec, AdapterConstructor]
    requires_api_key: bool = True


def _builtin_entries() -> Dict[str, _Entry]:
    return {
        "openai": _Entry(_ModuleSpec("bridgeai.openai.client", "OpenAIProvider")),
        "gemini": _Entry(_ModuleSpec("bridgeai.gemini.client", "GeminiProvider")),
        "claude": _Entry(_ModuleSpec("bridgeai.claude.client", "ClaudeProvider")),
        "perplexity": _Entry(_ModuleSpec("bridgeai.perplexity.client", "PerplexityProvider")),
        "deepseek": _Entry(_ModuleSpec("bridgeai.deepseek.client", "DeepSeekProvider")),
        "mock": _Entry(_ModuleSpec("bridgeai.mock.client", "MockProvider"), requires_api_key=False),
    }


class ProviderFactory:
    """Create adapters by canonical name (e.g. ``"openai"``).

    Design notes
    ------------
    - Identifiers are case-insensitive and whitespace-trimmed.
    - Unknown identifiers raise :class:`UnknownProviderError`; import and
      constructor failures raise :class:`ConfigurationError` with the
      original exception chained.
    """

    _PROVIDERS: Dict[str, _Entry] = _builtin_entries()
    _lock = threading.Lock()

    @staticmethod
    def _normalize(provider: str) -> str:
        return (provider or "").lower().strip()

    @classmethod
    def _entry(cls, provider: str) -> _Entry:
        entry = cls._PROVIDERS.get(cls._normalize(provider))
        if entry is None:
            supported = ", ".join(cls.supported())
            raise UnknownProviderError(f"Unsupported provider '{provider}' (supported: {supported})", provider=provider)
        return entry

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        params: Optional[AdapterParams] = None,
        **kwargs: Any,
    ) -> LLMProvider:
        """Create an adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name.
        params:
            Optional :class:`AdapterParams`; explicit ``kwargs`` take precedence.
        **kwargs:
            Adapter constructor keyword arguments.

        Raises
        ------
        UnknownProviderError
            The identifier is not registered.
        ConfigurationError
            The adapter module could not be imported or its constructor failed.
        """
        name = cls._normalize(provider)
        entry = cls._entry(name)
        merged = cls._coerce_params(params, kwargs)

        if isinstance(entry.target, _ModuleSpec):
            try:
                mod = import_module(entry.target.module)
                constructor = getattr(mod, entry.target.cls)
            except (ImportError, AttributeError) as exc:
                raise ConfigurationError(
                    f"Failed to load adapter '{entry.target.module}.{entry.target.cls}': {exc}", provider=name
                ) from exc
        else:
            constructor = entry.target

        try:
            return constructor(**merged)
        except ConfigurationError:
            raise
        except TypeError as exc:
            raise ConfigurationError(f"Invalid arguments for '{name}' adapter: {exc}", provider=name) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return registered identifiers in registration order."""
        return tuple(cls._PROVIDERS.keys())

    @classmethod
    def requires_api_key(cls, provider: str) -> bool:
        return cls._entry(provider).requires_api_key

    @classmethod
    def register(cls, provider: str, constructor: AdapterConstructor, *, requires_api_key: bool = True) -> None:
        """Register (or replace) a backend under ``provider``."""
        name = cls._normalize(provider)
        if not name:
            raise ValueError("provider name must be non-empty")
        with cls._lock:
            cls._PROVIDERS[name] = _Entry(constructor, requires_api_key)

    @classmethod
    def unregister(cls, provider: str) -> None:
        with cls._lock:
            cls._PROVIDERS.pop(cls._normalize(provider), None)

    @classmethod
    def reset(cls) -> None:
        """Restore the built-in registry."""
        with cls._lock:
            cls._PROVIDERS = _builtin_entries()

    @staticmethod
    def _coerce_params(params: Optional[AdapterParams], kwargs: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``params`` into ``kwargs``.

        ``None`` fields of ``params`` are ignored; ``extra`` mappings are
        shallow-merged with ``kwargs`` winning conflicts; every other explicit
        kwarg overrides the params value.
        """
        if params is None:
            return dict(kwargs)
        merged: Dict[str, Any] = params.model_dump(exclude_none=True)
        if "extra" in kwargs:
            extra = dict(merged.get("extra") or {})
            extra.update(kwargs["extra"] or {})
            merged["extra"] = extra
        merged.update({k: v for k, v in kwargs.items() if k != "extra"})
        return merged


__all__ = ["ProviderFactory", "UnknownProviderError", "AdapterConstructor"]
