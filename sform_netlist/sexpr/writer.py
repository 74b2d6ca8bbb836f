"""
S-expression writer for netlist debug dumps.

Renders the nested lists built by NetlistItem.to_sexpr() as indented text:

    (net_item
     (ndx 0)
     (type label)
     (label "RESET")
    )

The output is for people reading a build, not for other programs.
"""

from __future__ import annotations

import re
from typing import Union

# Type alias for S-expression data
SExpr = Union[str, int, float, list["SExpr"]]

# Lists that open an indented block; everything else is written on one line
BLOCK_TOKENS = {"netlist", "net_item", "component"}

_BARE_ATOM = re.compile(r"^[a-z_][a-z0-9_]*$")

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _quote(s: str) -> str:
    return '"' + "".join(_ESCAPES.get(c, c) for c in s) + '"'


def format_atom(value: SExpr) -> str:
    """
    Format one atom.

    Lowercase tokens are written bare, other strings quoted, floats without
    trailing zeros.
    """
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.6f}".rstrip("0").rstrip(".")
    if isinstance(value, str):
        return value if _BARE_ATOM.match(value) else _quote(value)
    raise TypeError(f"Unsupported value type: {type(value)}")


def _is_block(data: list) -> bool:
    return bool(data) and isinstance(data[0], str) and data[0] in BLOCK_TOKENS


def _inline(data: SExpr) -> str:
    if isinstance(data, list):
        return "(" + " ".join(_inline(item) for item in data) + ")"
    return format_atom(data)


def _write(data: list, depth: int, indent: int, lines: list[str]):
    prefix = " " * (depth * indent)
    if not _is_block(data):
        lines.append(prefix + _inline(data))
        return

    # Leading atoms stay on the opening line
    split = next((i for i, item in enumerate(data) if isinstance(item, list)), len(data))
    opening = " ".join(format_atom(item) for item in data[:split])
    if split == len(data):
        lines.append(f"{prefix}({opening})")
        return

    lines.append(f"{prefix}({opening}")
    for item in data[split:]:
        if isinstance(item, list):
            _write(item, depth + 1, indent, lines)
        else:
            lines.append(" " * ((depth + 1) * indent) + format_atom(item))
    lines.append(f"{prefix})")


def serialize(data: SExpr, indent: int = 1) -> str:
    """
    Serialize nested Python lists to S-expression text.

    Args:
        data: Nested list structure, or a single atom.
        indent: Spaces per nesting level.

    Returns:
        Formatted S-expression string.

    Example:
        >>> serialize(['net_item', ['ndx', 0], ['label', 'CLK']])
        '(net_item\\n (ndx 0)\\n (label "CLK")\\n)'
    """
    if not isinstance(data, list):
        return format_atom(data)
    lines: list[str] = []
    _write(data, 0, indent, lines)
    return "\n".join(lines)
