"""metadesc_providers package

Provider abstraction layer for generating SEO meta descriptions through
interchangeable text-generation APIs.

Public API (re-exported):
    - Version: ``__version__``
    - Errors: :class:`ProviderError`, :class:`ErrorCode`
    - Results: :class:`SummaryResult`, :class:`ModelListResult`,
      :class:`ModelDescriptor`
    - Contracts: :class:`ProviderInterface`, :class:`AbstractProvider`
    - Factory: :func:`create`, :class:`ProviderFactory`, :class:`AdapterParams`
    - Prompting: :func:`build_meta_description_prompt`

Example::

    from metadesc_providers import build_meta_description_prompt, create

    provider = create("anthropic", api_key=key)
    result = provider.generate_summary(build_meta_description_prompt(page_html))
    if result.ok:
        save(result.text)
"""

from typing import Any, Optional

from .base.abstract_provider import AbstractProvider
from .base.dto import AdapterParams
from .base.errors import ErrorCode, ProviderError
from .base.factory import ProviderFactory, UnknownProviderError
from .base.interfaces import ProviderInterface
from .base.models import ModelDescriptor, ModelListResult, SummaryResult
from .prompts import build_meta_description_prompt

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Errors
    "ProviderError",
    "ErrorCode",
    "UnknownProviderError",
    # Results
    "SummaryResult",
    "ModelListResult",
    "ModelDescriptor",
    # Contracts
    "ProviderInterface",
    "AbstractProvider",
    # Factory
    "create",
    "ProviderFactory",
    "AdapterParams",
    # Prompting
    "build_meta_description_prompt",
]


def create(provider_name: str, *, params: Optional[AdapterParams] = None, **kwargs: Any) -> AbstractProvider:
    """Instantiate a provider adapter via :class:`ProviderFactory`.

    Parameters
    ----------
    provider_name:
        Canonical provider name (for example, ``"openai"``).
    params:
        Optional :class:`AdapterParams` carrying common initialization fields.
    **kwargs:
        Adapter constructor keyword arguments; these win over ``params``.

    Raises
    ------
    UnknownProviderError
        If the name is not registered or the constructor rejects arguments.
    """
    return ProviderFactory.create(provider_name, params=params, **kwargs)
