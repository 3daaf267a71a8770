"""Error types raised by the generation engine."""

from __future__ import annotations


class GenerationError(RuntimeError):
    """Raised when a test suite cannot be generated from the submitted source."""


class MalformedInputError(GenerationError):
    """Raised when the source text is not a syntactically valid compilation unit."""


class NoDeclarationFoundError(GenerationError):
    """Raised when the source parses but declares no class or interface."""


__all__ = ["GenerationError", "MalformedInputError", "NoDeclarationFoundError"]
