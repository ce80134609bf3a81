"""
Errors raised by the brand bible pipeline and the chat assistant.

Every failure of an in-flight operation surfaces as one of these. The core
never recovers locally; callers decide what the user sees.
"""

from __future__ import annotations


class BrandBibleError(Exception):
    """Base class for all brandbible errors."""


class ConfigError(BrandBibleError):
    """Required configuration (e.g. GEMINI_API_KEY) is missing."""


class ValidationError(BrandBibleError):
    """User input was rejected before any remote call was made."""


class SchemaError(BrandBibleError):
    """The structured-generation response could not be parsed or validated."""


class AssetGenerationError(BrandBibleError):
    """An image request came back without any generated image."""


class TransportError(BrandBibleError):
    """The remote generative service failed (network, quota, server error)."""
