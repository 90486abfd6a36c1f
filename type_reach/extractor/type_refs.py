"""Type reference extraction over tree-sitter Rust type nodes.

Every type expression is classified into a :class:`TypeShape` and handed to
one handler per shape. Each handler returns the set of type names that appear
structurally inside the expression. The walk is total: shapes that carry no
concrete reference resolve to an empty set instead of failing.
"""

from __future__ import annotations

from typing import Callable

from type_reach.models import TypeShape

# Grammar node type -> shape. Anything missing here is OPAQUE.
_NODE_SHAPES: dict[str, TypeShape] = {
    "array_type": TypeShape.SEQUENCE,
    "tuple_type": TypeShape.TUPLE,
    "pointer_type": TypeShape.INDIRECTION,
    "reference_type": TypeShape.INDIRECTION,
    "type_identifier": TypeShape.PATH,
    "primitive_type": TypeShape.PATH,
    "scoped_type_identifier": TypeShape.PATH,
    "generic_type": TypeShape.PATH,
    "abstract_type": TypeShape.OPAQUE,
    "dynamic_type": TypeShape.OPAQUE,
    "bounded_type": TypeShape.OPAQUE,
    "macro_invocation": TypeShape.OPAQUE,
    "never_type": TypeShape.OPAQUE,
    "unit_type": TypeShape.OPAQUE,
    "removed_trait_bound": TypeShape.OPAQUE,
    "metavariable": TypeShape.OPAQUE,
    "variadic_parameter": TypeShape.OPAQUE,
    "_": TypeShape.OPAQUE,
    "ERROR": TypeShape.OPAQUE,
}


def classify(node) -> TypeShape:
    """Return the shape of a type node."""
    if node.type == "function_type":
        # `Fn(A) -> B` is a path with parenthesised arguments; `fn(A) -> B` is not
        if node.child_by_field_name("trait") is not None:
            return TypeShape.PATH
        return TypeShape.FUNCTION_POINTER
    return _NODE_SHAPES.get(node.type, TypeShape.OPAQUE)


def type_names(node) -> set[str]:
    """Return the type names referenced by a type node (``None`` -> empty)."""
    if node is None:
        return set()
    return _HANDLERS[classify(node)](node)


def struct_references(node) -> set[str]:
    """Union of the field types of a ``struct_item`` (named or tuple form)."""
    names: set[str] = set()
    body = node.child_by_field_name("body")
    if body is None:
        return names

    if body.type == "field_declaration_list":
        for field_node in body.named_children:
            if field_node.type == "field_declaration":
                names |= type_names(field_node.child_by_field_name("type"))
    elif body.type == "ordered_field_declaration_list":
        for type_node in body.children_by_field_name("type"):
            names |= type_names(type_node)
    return names


def alias_references(node) -> set[str]:
    """References of an alias target; an alias without a target has none."""
    return type_names(node.child_by_field_name("type"))


def definition_references(node) -> set[str]:
    if node.type == "struct_item":
        return struct_references(node)
    if node.type in ("type_item", "associated_type"):
        return alias_references(node)
    return set()


# ── Shape handlers ────────────────────────────────────────────

def _sequence(node) -> set[str]:
    return type_names(node.child_by_field_name("element"))


def _tuple(node) -> set[str]:
    names: set[str] = set()
    for child in node.named_children:
        names |= type_names(child)
    return names


def _nothing(node) -> set[str]:
    return set()


def _path(node) -> set[str]:
    if node.type == "generic_type":
        names = _generic_args(node.child_by_field_name("type_arguments"))
        names.add(_last_segment(node.child_by_field_name("type")))
        return names
    if node.type == "function_type":
        names = _parenthesized_args(node)
        names.add(_last_segment(node.child_by_field_name("trait")))
        return names
    return {_last_segment(node)}


def _last_segment(node) -> str:
    if node.type == "scoped_type_identifier":
        name = node.child_by_field_name("name")
        if name is not None:
            node = name
    return node.text.decode("utf-8")


def _generic_args(args_node) -> set[str]:
    """Names in an angle-bracketed argument list."""
    names: set[str] = set()
    if args_node is None:
        return names

    children = args_node.named_children
    for i, child in enumerate(children):
        if child.type == "trait_bounds":
            continue
        # `Item: Bound` names an associated type, it is not a type argument
        if i + 1 < len(children) and children[i + 1].type == "trait_bounds":
            continue
        if child.type == "type_binding":
            names |= type_names(child.child_by_field_name("type"))
        else:
            names |= type_names(child)
    return names


def _parenthesized_args(node) -> set[str]:
    """Inputs and output of `Fn(A, B) -> C` sugar."""
    names: set[str] = set()
    params = node.child_by_field_name("parameters")
    if params is not None:
        for child in params.named_children:
            if child.type == "parameter":
                child = child.child_by_field_name("type")
            names |= type_names(child)
    names |= type_names(node.child_by_field_name("return_type"))
    return names


_HANDLERS: dict[TypeShape, Callable[..., set[str]]] = {
    TypeShape.SEQUENCE: _sequence,
    TypeShape.TUPLE: _tuple,
    # Pointee types are not traversed: indirection is not containment.
    TypeShape.INDIRECTION: _nothing,
    TypeShape.FUNCTION_POINTER: _nothing,
    TypeShape.PATH: _path,
    TypeShape.OPAQUE: _nothing,
}
