"""
OpenAI provider package.

Exports:
- OpenAIProvider: adapter implementing ProviderInterface for OpenAI
"""

from .client import OpenAIProvider

__all__ = ["OpenAIProvider"]
