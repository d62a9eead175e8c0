"""Protocol parts package.

Re-exports one-Protocol-per-file modules. Prefer importing from
``metadesc_providers.base.interfaces``.
"""

from .provider_identity import ProviderIdentity
from .model_listing_provider import ModelListingProvider
from .summary_provider import SummaryProvider
from .provider_interface import ProviderInterface

__all__ = [
    "ProviderIdentity",
    "ModelListingProvider",
    "SummaryProvider",
    "ProviderInterface",
]
