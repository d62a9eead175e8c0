"""Provider Factory utilities.

Purpose
-------
Centralize creation of adapter instances implementing ``ProviderInterface``.
Adapters are imported lazily using ``importlib`` so listing providers or
building one adapter never imports the others.

External dependencies
---------------------
- Standard library only (``importlib``).

Timeout and fallback semantics
------------------------------
- No timeouts are introduced here. The factory performs no retries or
  fallbacks; it either returns an instance or raises a clear error.

Scope
-----
Supported providers: ``openai``, ``anthropic``, ``gemini``, ``deepseek`` and
``xai``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from .dto.adapter_params import AdapterParams


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter constructor rejected its arguments.
    """


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Shortcut for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create provider adapters based on a canonical name (e.g., ``"openai"``)."""

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "metadesc_providers.openai.client", "class": "OpenAIProvider"},
        "anthropic": {"module": "metadesc_providers.anthropic.client", "class": "AnthropicProvider"},
        "gemini": {"module": "metadesc_providers.gemini.client", "class": "GeminiProvider"},
        "deepseek": {"module": "metadesc_providers.deepseek.client", "class": "DeepseekProvider"},
        "xai": {"module": "metadesc_providers.xai.client", "class": "XAIProvider"},
    }

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        params: Optional[AdapterParams] = None,
        **kwargs: Any,
    ) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name (e.g., ``"openai"``); case-insensitive.
        params:
            Optional structured :class:`AdapterParams` instance; merged with
            ``kwargs``, explicit kwargs taking precedence.
        **kwargs:
            Constructor kwargs (``api_key``, ``model``, ``base_url``,
            ``timeout_seconds``, ``headers``, ``transport``).

        Raises
        ------
        UnknownProviderError
            If provider is unknown, the adapter module fails to import, the
            adapter class is missing, or the adapter constructor raises.
        """
        merged_kwargs = cls._coerce_params(params, kwargs)
        klass = cls._resolve_class(provider)
        try:
            return klass(**merged_kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the canonical provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())

    @classmethod
    def describe(cls) -> List[Dict[str, str]]:
        """Return identity metadata for every registered provider.

        Reads class constants only; no adapter is instantiated and no
        configuration or credentials are consulted.
        """
        rows: List[Dict[str, str]] = []
        for name in cls.supported():
            klass = cls._resolve_class(name)
            rows.append(
                {
                    "name": klass.NAME,
                    "title": klass.TITLE,
                    "default_model": klass.DEFAULT_MODEL,
                    "api_key_url": klass.API_KEY_URL,
                }
            )
        return rows

    @classmethod
    def _resolve_class(cls, provider: str) -> Type:
        name = (provider or "").lower().strip()
        entry = cls._PROVIDERS.get(name)
        if not entry:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = entry["module"], entry["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc
        try:
            return getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

    @staticmethod
    def _coerce_params(params: Optional[AdapterParams], kwargs: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``AdapterParams`` into ``kwargs``.

        - Values explicitly provided in ``kwargs`` take precedence over ``params``.
        - ``None`` values in ``params`` are ignored to keep adapter defaults.
        - ``headers`` are shallow-merged, kwargs winning conflicts.
        """
        if params is None:
            return dict(kwargs)
        merged: Dict[str, Any] = dict(params.model_dump(exclude_none=True))
        # Adapters take the provider from their class, not from kwargs
        merged.pop("provider", None)
        if "headers" in merged and "headers" in kwargs:
            h = dict(merged["headers"])
            h |= kwargs["headers"]
            merged["headers"] = h
            kwargs = {k: v for k, v in kwargs.items() if k != "headers"}
        merged.update(kwargs)
        return merged


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
