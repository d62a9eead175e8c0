"""Pydantic DTOs validated at the provider boundary."""

from .adapter_params import AdapterParams
from .summary_request import SummaryRequestDTO

__all__ = ["AdapterParams", "SummaryRequestDTO"]
