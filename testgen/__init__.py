"""Generate JUnit 5 / Mockito test skeletons from the source of a Java class."""

from .errors import GenerationError, MalformedInputError, NoDeclarationFoundError
from .orchestrator import GenerationEngine, generate

__version__ = "1.0.0"

__all__ = [
    "GenerationEngine",
    "GenerationError",
    "MalformedInputError",
    "NoDeclarationFoundError",
    "generate",
]
