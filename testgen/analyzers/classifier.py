"""Marker-annotation and naming-convention classification rules."""

from __future__ import annotations

from ..models import ClassCategory, ClassModel, MethodCategory, MethodModel

SERVICE_MARKER = "Service"

WIRING_MARKERS: frozenset[str] = frozenset({"Service", "Repository", "Component", "Controller"})

# Matched literally: `saveAndFlush` and `deleteAll` are repository-style,
# `findSomething` is not.
REPOSITORY_PREFIXES: tuple[str, ...] = ("findBy", "save", "delete")
REPOSITORY_EXACT_NAMES: frozenset[str] = frozenset({"findAll"})


def classify_class(model: ClassModel) -> ClassCategory:
    """Return the class-level category from exact annotation names."""
    return ClassCategory(
        is_service_like=SERVICE_MARKER in model.annotations,
        is_dependency_injection_target=not WIRING_MARKERS.isdisjoint(model.annotations),
    )


def is_repository_method(name: str) -> bool:
    return name.startswith(REPOSITORY_PREFIXES) or name in REPOSITORY_EXACT_NAMES


def classify_method(method: MethodModel, category: ClassCategory) -> MethodCategory:
    """Pick the body template for a method of a class with the given category."""
    if is_repository_method(method.name):
        return MethodCategory.REPOSITORY
    if category.is_service_like:
        return MethodCategory.SERVICE
    return MethodCategory.DEFAULT


__all__ = [
    "REPOSITORY_EXACT_NAMES",
    "REPOSITORY_PREFIXES",
    "SERVICE_MARKER",
    "WIRING_MARKERS",
    "classify_class",
    "classify_method",
    "is_repository_method",
]
