"""Generation engine tying model building, classification and assembly together."""

from __future__ import annotations

from .analyzers.classifier import classify_class
from .analyzers.tree_sitter import JavaSourceAnalyzer
from .errors import GenerationError
from .logging import get_logger
from .models import ClassCategory, ClassModel
from .templating.builder import SkeletonBuilder

ERROR_PREFIX = "Failed to generate tests: "


class GenerationEngine:
    """Turns the source text of one class into the text of its test skeleton.

    The engine keeps no per-call state; a single instance may serve any number
    of concurrent callers.
    """

    def __init__(
        self,
        analyzer: JavaSourceAnalyzer | None = None,
        builder: SkeletonBuilder | None = None,
    ) -> None:
        self.analyzer = analyzer or JavaSourceAnalyzer()
        self.builder = builder or SkeletonBuilder()
        self.logger = get_logger("orchestrator")

    def generate(self, source: str) -> str:
        """Return the generated test suite, or raise a GenerationError subclass."""
        try:
            model = self.analyzer.build(source)
            category = classify_class(model)
            self._log_model(model, category)
            return self.builder.build(model, category)
        except GenerationError as exc:
            self.logger.warning("Test generation failed: %s", exc)
            raise type(exc)(f"{ERROR_PREFIX}{exc}") from exc
        except Exception as exc:
            self.logger.warning("Unexpected failure during test generation", exc_info=True)
            raise GenerationError(f"{ERROR_PREFIX}{exc}") from exc

    def _log_model(self, model: ClassModel, category: ClassCategory) -> None:
        self.logger.debug(
            "Parsed %s with %d field(s) and %d method(s)",
            model.name,
            len(model.fields),
            len(model.methods),
        )
        self.logger.debug(
            "Class %s: service_like=%s, dependency_injection_target=%s",
            model.name,
            category.is_service_like,
            category.is_dependency_injection_target,
        )


def generate(source: str) -> str:
    """Generate a test skeleton for the first class declared in ``source``."""
    return GenerationEngine().generate(source)


__all__ = ["ERROR_PREFIX", "GenerationEngine", "generate"]
