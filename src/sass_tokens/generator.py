"""SCSS generation from resolved token records."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from sass_tokens.converter import camel_to_dash, convert_value
from sass_tokens.errors import OutputMode
from sass_tokens.tokens import TokenRecord

INDENT = "  "

_INVALID_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_-]")
_REPEATED_DASHES = re.compile(r"-{2,}")


def sanitize_name(name: str) -> str:
    """Turn a token path segment into a valid SCSS variable or map key."""
    name = camel_to_dash(name)
    name = _INVALID_NAME_CHARS.sub("-", name)
    name = _REPEATED_DASHES.sub("-", name)
    return name.strip("-")


@dataclass
class MapNode:
    """Node of the path-prefix tree used for map output."""

    token: TokenRecord | None = None
    children: dict[str, MapNode] = field(default_factory=dict)


def generate_scss(records: list[TokenRecord], mode: OutputMode = OutputMode.VARIABLES) -> str:
    """Generate SCSS source from token records.

    Args:
        records: Tokens, normally alias-resolved.
        mode: Flat variables or nested maps grouped by top-level segment.

    Returns:
        SCSS text ending in a newline, or an empty string for no tokens.
    """
    if not records:
        return ""
    if mode == OutputMode.MAP:
        return _generate_maps(records)
    return _generate_variables(records)


def variable_name(record: TokenRecord) -> str:
    return "-".join(sanitize_name(segment) for segment in record.path)


def _render_token(record: TokenRecord) -> str:
    return convert_value(record.value, record.type)


def _generate_variables(records: list[TokenRecord]) -> str:
    lines = [f"${variable_name(record)}: {_render_token(record)};" for record in records]
    return "\n".join(lines) + "\n"


def build_map_tree(records: list[TokenRecord]) -> MapNode:
    """Group records by sanitized path segments.

    A later token whose path equals an existing group replaces that group.
    """
    root = MapNode()
    for record in records:
        if not record.path:
            continue
        node = root
        for segment in record.path[:-1]:
            node = node.children.setdefault(sanitize_name(segment), MapNode())
        node.children[sanitize_name(record.path[-1])] = MapNode(token=record)
    return root


def _generate_maps(records: list[TokenRecord]) -> str:
    tree = build_map_tree(records)
    declarations = []
    for name, subtree in tree.children.items():
        if subtree.token is not None:
            value = _render_token(subtree.token)
        else:
            value = _render_map_node(subtree, 1)
        declarations.append(f"${name}: {value};")
    return "\n\n".join(declarations) + "\n"


def _render_map_node(node: MapNode, depth: int) -> str:
    indent = INDENT * depth
    entries = []
    for name, child in node.children.items():
        if child.token is not None:
            value = _render_token(child.token)
        else:
            value = _render_map_node(child, depth + 1)
        entries.append(f"{indent}{name}: {value},")

    outer_indent = INDENT * (depth - 1)
    return "(\n" + "\n".join(entries) + f"\n{outer_indent})"
