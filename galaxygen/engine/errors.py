"""Exceptions raised by the generation pipeline."""
from __future__ import annotations


class GenerationError(Exception):
    """Base class for generation failures."""


class ConfigurationError(GenerationError, ValueError):
    """Raised when generation parameters are invalid."""


__all__ = ["GenerationError", "ConfigurationError"]
