"""Serialize a Stylesheet model back to CSS text.

Output is canonical rather than byte-identical to the input: two-space
indentation, one declaration per line, each top-level node followed by a
newline. Parsing the output yields the same nodes in the same order.
"""

from __future__ import annotations

from typing import Iterable

from csstokens.model.stylesheet import (
    AtRule,
    BlockItem,
    Comment,
    Declaration,
    GroupRule,
    Keyframe,
    KeyframesRule,
    Node,
    Rule,
    Stylesheet,
)

__all__ = ["serialize_stylesheet", "serialize_node"]

INDENT = "  "


def _block(items: Iterable[BlockItem | Keyframe], depth: int) -> list[str]:
    lines: list[str] = []
    pad = INDENT * depth
    for item in items:
        if isinstance(item, Declaration):
            lines.append(f"{pad}{item.name}: {item.value};")
        elif isinstance(item, Comment):
            lines.append(f"{pad}/*{item.text}*/")
        elif isinstance(item, Keyframe):
            lines.append(f"{pad}{', '.join(item.selectors)} {{")
            lines.extend(_block(item.declarations, depth + 1))
            lines.append(f"{pad}}}")
    return lines


def _node_lines(node: Node, depth: int) -> list[str]:
    pad = INDENT * depth
    if isinstance(node, Comment):
        return [f"{pad}/*{node.text}*/"]
    if isinstance(node, Rule):
        return [
            f"{pad}{', '.join(node.selectors)} {{",
            *_block(node.declarations, depth + 1),
            f"{pad}}}",
        ]
    if isinstance(node, KeyframesRule):
        return [
            f"{pad}@{node.vendor}keyframes {node.name} {{",
            *_block(node.frames, depth + 1),
            f"{pad}}}",
        ]
    if isinstance(node, GroupRule):
        head = f"@{node.keyword} {node.prelude}" if node.prelude else f"@{node.keyword}"
        lines = [f"{pad}{head} {{"]
        for child in node.rules:
            lines.extend(_node_lines(child, depth + 1))
        lines.append(f"{pad}}}")
        return lines
    if isinstance(node, AtRule):
        head = f"@{node.keyword} {node.prelude}" if node.prelude else f"@{node.keyword}"
        if node.declarations is None:
            return [f"{pad}{head};"]
        return [f"{pad}{head} {{", *_block(node.declarations, depth + 1), f"{pad}}}"]
    raise TypeError(f"Cannot serialize node of type {type(node).__name__}")


def serialize_node(node: Node) -> str:
    """Serialize a single top-level node, including its trailing newline."""
    return "\n".join(_node_lines(node, 0)) + "\n"


def serialize_stylesheet(stylesheet: Stylesheet) -> str:
    """Serialize every top-level node of *stylesheet*, in order."""
    return "".join(serialize_node(node) for node in stylesheet.rules)
