"""Classify identifier nodes by the name-binding position they occupy."""

from __future__ import annotations

from typing import Literal

from fastpy.parser import SyntaxNode
from fastpy.rules.base import NodeContext

BindingRole = Literal["variable", "parameter", "function", "class"]

# Parents whose identifier children are always binding targets.
_TARGET_PATTERNS = {
    "pattern_list",
    "tuple_pattern",
    "list_pattern",
    "as_pattern_target",
    "splat_pattern",
}
_PARAMETER_CONTAINERS = {
    "parameters",
    "lambda_parameters",
    "typed_parameter",
    "list_splat_pattern",
    "dictionary_splat_pattern",
}
# Containers that may nest inside a `with ... as (...)` target.
_NESTED_TARGETS = {"tuple", "list", "parenthesized_expression", *_TARGET_PATTERNS}
# Parents where a name placed right after an `as` token is bound.
_AS_BINDINGS = {"as_pattern", "except_clause"}
# Match patterns whose single-name dotted_name is a capture.
_CAPTURE_PATTERNS = {"case_pattern", "keyword_pattern"}

# (parent type, field name) pairs that bind the identifier in that field.
_FIELD_BINDINGS: dict[tuple[str, str], BindingRole] = {
    ("assignment", "left"): "variable",
    ("augmented_assignment", "left"): "variable",
    ("for_statement", "left"): "variable",
    ("for_in_clause", "left"): "variable",
    ("named_expression", "name"): "variable",
    ("as_pattern", "alias"): "variable",
    ("aliased_import", "alias"): "variable",
    ("default_parameter", "name"): "parameter",
    ("typed_default_parameter", "name"): "parameter",
    ("function_definition", "name"): "function",
    ("class_definition", "name"): "class",
}


def binding_role(node: SyntaxNode, context: NodeContext) -> BindingRole | None:
    """Return how an identifier binds a name, or None for a plain use."""
    if node.kind != "identifier":
        return None
    parent = context.parent(node)
    if parent is None:
        return None

    if node.field_name is not None:
        role = _FIELD_BINDINGS.get((parent.type, node.field_name))
        if role is not None:
            return role

    if parent.type in _PARAMETER_CONTAINERS:
        return "parameter"
    if parent.type in _TARGET_PATTERNS:
        return "variable"
    if parent.type in _AS_BINDINGS and _follows_as(node, parent):
        return "variable"
    if parent.type == "dotted_name" and _is_capture(parent, context):
        return "variable"
    if parent.type == "type":
        return _type_binding(parent, context)
    if parent.type in _NESTED_TARGETS and _inside_with_target(parent, context):
        return "variable"
    return None


def _follows_as(node: SyntaxNode, parent: SyntaxNode) -> bool:
    position = parent.children.index(node)
    if position == 0:
        return False
    previous = parent.children[position - 1]
    return not previous.is_named and previous.type == "as"


def _is_capture(dotted: SyntaxNode, context: NodeContext) -> bool:
    if len(dotted.children) != 1:
        return False
    holder = context.parent(dotted)
    if holder is None or holder.type not in _CAPTURE_PATTERNS:
        return False
    # `case Point(x=l)`: the keyword itself is not a capture
    return holder.type == "case_pattern" or holder.children.index(dotted) > 0


def _type_binding(type_node: SyntaxNode, context: NodeContext) -> BindingRole | None:
    holder = context.parent(type_node)
    if holder is None:
        return None
    if holder.type == "type_parameter":
        return "parameter"
    if holder.type == "type_alias_statement" and type_node.field_name == "left":
        return "variable"
    return None


def _inside_with_target(container: SyntaxNode, context: NodeContext) -> bool:
    current: SyntaxNode | None = container
    while current is not None and current.type in _NESTED_TARGETS:
        if current.type == "as_pattern_target":
            return True
        current = context.parent(current)
    return False
