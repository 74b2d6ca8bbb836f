"""
Label connectivity across the sheet hierarchy.

Only label-to-label joins that do not come from shared wires are decided
here: hierarchical labels to the sheet pins that lead into their sheet, and
global labels to each other. Wire and coordinate based connectivity belongs
to the connectivity builder.
"""

from __future__ import annotations

from .models.item import NetlistItem, NetlistItemType

HIERARCHICAL_TYPES = frozenset({
    NetlistItemType.HIERLABEL,
    NetlistItemType.HIERBUSLABELMEMBER,
})

SHEET_PIN_TYPES = frozenset({
    NetlistItemType.SHEETLABEL,
    NetlistItemType.SHEETBUSLABELMEMBER,
})


def is_label_connected(item: NetlistItem, other: NetlistItem) -> bool:
    """
    True if ``item`` is joined to ``other`` by label rules.

    The test is one-way: a hierarchical label is connected to a sheet pin,
    but not the other way round. Use are_labels_connected() for both.

    - A hierarchical label (or member) is connected to a sheet pin (or
      member) leading into the sheet the label is on. Label text is not
      compared.
    - Two global labels are connected when their text is equal, on any
      sheet.
    - An item is never connected to itself.
    """
    if item is other:
        return False

    if item.kind in HIERARCHICAL_TYPES and other.kind in SHEET_PIN_TYPES:
        return item.sheet_path == other.sheet_path_include

    if item.kind is NetlistItemType.GLOBLABEL and other.kind is NetlistItemType.GLOBLABEL:
        return item.label == other.label

    return False


def are_labels_connected(item: NetlistItem, other: NetlistItem) -> bool:
    """is_label_connected() in either direction."""
    return is_label_connected(item, other) or is_label_connected(other, item)
