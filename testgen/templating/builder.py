"""Assembles JUnit/Mockito test skeletons from a classified class model."""

from __future__ import annotations

from typing import Callable, Dict, List

from ..analyzers.classifier import classify_method
from ..logging import get_logger
from ..models import ClassCategory, ClassModel, MethodCategory, MethodModel
from .constants import (
    BASE_IMPORTS,
    BODY_INDENT,
    DEFAULT_TODOS,
    EXTENSION_MARKER,
    INDENT,
    INJECT_MARKER,
    MOCK_MARKER,
    PLACEHOLDER_VERIFICATION,
    TEST_CLASS_SUFFIX,
    TEST_MARKER,
    TEST_NAME_SUFFIX,
    WIRING_IMPORTS,
)


class _LineBuffer:
    """Append-only sequence of output lines."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    def add(self, line: str = "") -> None:
        self._lines.append(line)

    def extend(self, lines: List[str]) -> None:
        self._lines.extend(lines)

    def render(self) -> str:
        return "\n".join(self._lines) + "\n"


class SkeletonBuilder:
    """Renders one test class per source class, one test method per source method."""

    def __init__(self) -> None:
        self._body_renderers: Dict[MethodCategory, Callable[[MethodModel], List[str]]] = {
            MethodCategory.REPOSITORY: self._repository_body,
            MethodCategory.SERVICE: self._service_body,
            MethodCategory.DEFAULT: self._default_body,
        }
        self.logger = get_logger("templating")

    def build(self, model: ClassModel, category: ClassCategory) -> str:
        buffer = _LineBuffer()
        self._render_header(buffer, category)
        buffer.add(EXTENSION_MARKER)
        buffer.add(f"class {model.name}{TEST_CLASS_SUFFIX} {{")
        buffer.add()
        self._render_mocks(buffer, model)
        for method in model.methods:
            method_category = classify_method(method, category)
            self.logger.debug("Method %s uses the %s template", method.name, method_category.value)
            self._render_test_method(buffer, method, method_category)
        buffer.add("}")
        return buffer.render()

    @staticmethod
    def _render_header(buffer: _LineBuffer, category: ClassCategory) -> None:
        buffer.extend(list(BASE_IMPORTS))
        buffer.add()
        if category.is_dependency_injection_target:
            buffer.extend(list(WIRING_IMPORTS))
        buffer.add()

    @staticmethod
    def _render_mocks(buffer: _LineBuffer, model: ClassModel) -> None:
        buffer.add(f"{INDENT}{INJECT_MARKER}")
        buffer.add(f"{INDENT}private {model.name} {lower_first(model.name)};")
        buffer.add()
        for field in model.fields:
            buffer.add(f"{INDENT}{MOCK_MARKER}")
            buffer.add(f"{INDENT}private {field.declared_type} {field.name};")
            buffer.add()

    def _render_test_method(
        self, buffer: _LineBuffer, method: MethodModel, method_category: MethodCategory
    ) -> None:
        buffer.add(f"{INDENT}{TEST_MARKER}")
        buffer.add(f"{INDENT}void {method.name}{TEST_NAME_SUFFIX}() {{")
        buffer.extend(self._body_renderers[method_category](method))
        buffer.add(f"{INDENT}}}")
        buffer.add()

    @staticmethod
    def _repository_body(method: MethodModel) -> List[str]:
        accessor = lower_first(method.name)
        lines = [f"{BODY_INDENT}// Given"]
        if method.name.startswith("findBy"):
            lines.extend(
                [
                    f"{BODY_INDENT}var expectedEntity = new {method.declared_return_type}();",
                    f"{BODY_INDENT}when({accessor}(any()))",
                    f"{BODY_INDENT}    .thenReturn(Optional.of(expectedEntity));",
                    "",
                ]
            )
        lines.extend(
            [
                f"{BODY_INDENT}// When",
                f"{BODY_INDENT}var result = {accessor}();",
                "",
                f"{BODY_INDENT}// Then",
                f"{BODY_INDENT}assertNotNull(result);",
            ]
        )
        return lines

    @staticmethod
    def _service_body(method: MethodModel) -> List[str]:
        lines = [f"{BODY_INDENT}// Given"]
        if method.returns_value:
            lines.append(f"{BODY_INDENT}var expectedResult = new {method.declared_return_type}();")
            for param in method.parameters:
                lines.append(f"{BODY_INDENT}var {param.name} = new {param.declared_type}();")

        lines.append(f"{BODY_INDENT}// When")
        arguments = ", ".join(param.name for param in method.parameters)
        call = f"{method.name}({arguments})"
        if method.returns_value:
            lines.append(f"{BODY_INDENT}var result = {call};")
        else:
            lines.append(f"{BODY_INDENT}{call};")
        lines.append("")

        lines.append(f"{BODY_INDENT}// Then")
        if method.returns_value:
            lines.append(f"{BODY_INDENT}assertNotNull(result);")
        lines.append(f"{BODY_INDENT}{PLACEHOLDER_VERIFICATION}")
        return lines

    @staticmethod
    def _default_body(method: MethodModel) -> List[str]:
        lines: List[str] = []
        for phase, todo in DEFAULT_TODOS.items():
            if lines:
                lines.append("")
            lines.append(f"{BODY_INDENT}// {phase}")
            lines.append(f"{BODY_INDENT}{todo}")
        return lines


def lower_first(value: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    return value[:1].lower() + value[1:]


def assemble(model: ClassModel, category: ClassCategory) -> str:
    """Render the complete test suite text for a classified class model."""
    return SkeletonBuilder().build(model, category)


__all__ = ["SkeletonBuilder", "assemble", "lower_first"]
