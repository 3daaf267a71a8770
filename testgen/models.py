"""Core data models shared across testgen components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class FieldModel:
    """A field declared on the class under test."""

    name: str
    declared_type: str


@dataclass(frozen=True)
class ParameterModel:
    """A single formal parameter of a method."""

    name: str
    declared_type: str


@dataclass(frozen=True)
class MethodModel:
    """A method declared on the class under test."""

    name: str
    declared_return_type: str
    parameters: Tuple[ParameterModel, ...] = ()

    @property
    def returns_value(self) -> bool:
        return self.declared_return_type != "void"


@dataclass(frozen=True)
class ClassModel:
    """Structural view of the first top-level type in a source unit."""

    name: str
    annotations: FrozenSet[str] = field(default_factory=frozenset)
    fields: Tuple[FieldModel, ...] = ()
    methods: Tuple[MethodModel, ...] = ()


@dataclass(frozen=True)
class ClassCategory:
    """Class-level classification derived from marker annotations."""

    is_service_like: bool
    is_dependency_injection_target: bool


class MethodCategory(str, Enum):
    """Selects which body template a generated test method uses."""

    REPOSITORY = "repository"
    SERVICE = "service"
    DEFAULT = "default"


__all__ = [
    "ClassCategory",
    "ClassModel",
    "FieldModel",
    "MethodCategory",
    "MethodModel",
    "ParameterModel",
]
