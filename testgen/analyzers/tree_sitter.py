"""Tree-sitter powered model builder for Java source units."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import tree_sitter_java
from tree_sitter import Language, Node, Parser

from ..errors import MalformedInputError, NoDeclarationFoundError
from ..models import ClassModel, FieldModel, MethodModel, ParameterModel

JAVA_LANGUAGE = Language(tree_sitter_java.language())

_TYPE_DECLARATIONS = {"class_declaration", "interface_declaration"}
# Everything a compilation unit may hold at the top level; tree-sitter also
# accepts bare statements there.
_COMPILATION_UNIT_MEMBERS = {
    "package_declaration",
    "import_declaration",
    "module_declaration",
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "record_declaration",
    "annotation_type_declaration",
    "line_comment",
    "block_comment",
}
_FIELD_DECLARATIONS = {"field_declaration", "constant_declaration"}
_ANNOTATIONS = {"annotation", "marker_annotation"}
_SPREAD_NON_TYPE_CHILDREN = {
    "modifiers",
    "variable_declarator",
    "identifier",
    "annotation",
    "marker_annotation",
    "dimensions",
}


class JavaSourceAnalyzer:
    """Extracts the structural model of the first top-level class or interface.

    A parser is created per call; only the immutable grammar is shared.
    """

    def build(self, source: str) -> ClassModel:
        source_bytes = source.encode("utf-8")
        tree = Parser(JAVA_LANGUAGE).parse(source_bytes)
        root = tree.root_node
        if root.has_error:
            raise MalformedInputError(_describe_error(root))
        stray = next(
            (child for child in root.named_children if child.type not in _COMPILATION_UNIT_MEMBERS),
            None,
        )
        if stray is not None:
            raise MalformedInputError(f"Unexpected {stray.type} at {_location(stray)}")

        declaration = next(
            (child for child in root.named_children if child.type in _TYPE_DECLARATIONS),
            None,
        )
        if declaration is None:
            raise NoDeclarationFoundError("No class or interface declaration found in source")
        return self._build_class(declaration, source_bytes)

    def _build_class(self, declaration: Node, source_bytes: bytes) -> ClassModel:
        name_node = declaration.child_by_field_name("name")
        body = declaration.child_by_field_name("body")
        members: Sequence[Node] = body.named_children if body is not None else []
        return ClassModel(
            name=_node_text(name_node, source_bytes) if name_node else "",
            annotations=frozenset(self._collect_annotations(declaration, source_bytes)),
            fields=tuple(self._collect_fields(members, source_bytes)),
            methods=tuple(self._collect_methods(members, source_bytes)),
        )

    @staticmethod
    def _collect_annotations(declaration: Node, source_bytes: bytes) -> Iterable[str]:
        for child in declaration.children:
            if child.type != "modifiers":
                continue
            for modifier in child.named_children:
                if modifier.type not in _ANNOTATIONS:
                    continue
                name_node = modifier.child_by_field_name("name")
                if name_node is not None:
                    yield _node_text(name_node, source_bytes)

    @staticmethod
    def _collect_fields(members: Sequence[Node], source_bytes: bytes) -> Iterable[FieldModel]:
        for member in members:
            if member.type not in _FIELD_DECLARATIONS:
                continue
            type_node = member.child_by_field_name("type")
            declarators = member.children_by_field_name("declarator")
            if type_node is None or not declarators:
                continue
            name_node = declarators[0].child_by_field_name("name")
            if name_node is None:
                continue
            yield FieldModel(
                name=_node_text(name_node, source_bytes),
                declared_type=_type_text(type_node, source_bytes),
            )

    def _collect_methods(self, members: Sequence[Node], source_bytes: bytes) -> Iterable[MethodModel]:
        for member in members:
            if member.type != "method_declaration":
                continue
            name_node = member.child_by_field_name("name")
            type_node = member.child_by_field_name("type")
            if name_node is None or type_node is None:
                continue
            parameters_node = member.child_by_field_name("parameters")
            yield MethodModel(
                name=_node_text(name_node, source_bytes),
                declared_return_type=_type_text(type_node, source_bytes),
                parameters=tuple(self._collect_parameters(parameters_node, source_bytes)),
            )

    @staticmethod
    def _collect_parameters(node: Optional[Node], source_bytes: bytes) -> List[ParameterModel]:
        if node is None:
            return []
        parameters: List[ParameterModel] = []
        for param in node.named_children:
            if param.type == "formal_parameter":
                type_node = param.child_by_field_name("type")
                name_node = param.child_by_field_name("name")
            elif param.type == "spread_parameter":
                # Varargs: `String... names` contributes `String names`.
                type_node, name_node = _spread_parts(param)
            else:
                continue
            if type_node is None or name_node is None:
                continue
            parameters.append(
                ParameterModel(
                    name=_node_text(name_node, source_bytes),
                    declared_type=_type_text(type_node, source_bytes),
                )
            )
        return parameters


def _spread_parts(param: Node) -> tuple[Optional[Node], Optional[Node]]:
    named = param.named_children
    type_node = next((c for c in named if c.type not in _SPREAD_NON_TYPE_CHILDREN), None)
    declarator = next((c for c in named if c.type == "variable_declarator"), None)
    if declarator is not None:
        return type_node, declarator.child_by_field_name("name")
    identifiers = [c for c in named if c.type == "identifier"]
    return type_node, identifiers[-1] if identifiers else None


def _node_text(node: Node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


def _type_text(node: Node, source_bytes: bytes) -> str:
    return " ".join(_node_text(node, source_bytes).split())


def _first_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _describe_error(root: Node) -> str:
    node = _first_error(root)
    if node is None:
        return "Source is not a valid Java compilation unit"
    if node.is_missing:
        return f"Missing '{node.type}' at {_location(node)}"
    return f"Unexpected syntax at {_location(node)}"


def _location(node: Node) -> str:
    row, column = node.start_point[0], node.start_point[1]
    return f"line {row + 1}, column {column + 1}"


__all__ = ["JAVA_LANGUAGE", "JavaSourceAnalyzer"]
