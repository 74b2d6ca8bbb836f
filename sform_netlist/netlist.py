"""
Netlist item collection for one build pass.

The connectivity builder creates one item per schematic element, expands
bus labels, joins items into nets and picks net names. All items of a build
live in one NetlistItemList and are dropped together by clear().
"""

from __future__ import annotations

import logging
from typing import Iterator

from .bus.alias import AliasDirectory
from .bus.expander import MEMBER_TYPES, Aliases, alias_lookup, expand_bus_item
from .bus.grammar import is_bus_label
from .connectivity import are_labels_connected
from .models.item import NetlistItem, NetlistItemType, PinDetail, SheetLabelDetail
from .models.pin import PinType
from .models.sheet_path import SheetPath
from .sexpr import serialize

logger = logging.getLogger(__name__)


class NetlistItemList:
    """
    Ordered collection of netlist items.

    Example:
        items = NetlistItemList(aliases)
        items.add(NetlistItemType.LABEL, label="D[0..7]", sheet_path=path)
        items.expand_buses()
        len(items)    # 8
    """

    def __init__(self, aliases: Aliases = None):
        self.aliases = aliases if aliases is not None else _default_aliases
        self._items: list[NetlistItem] = []

    def add(
        self,
        kind: NetlistItemType,
        sheet_path_include: SheetPath | None = None,
        pin_number: str | None = None,
        electrical_pin_type: PinType | None = None,
        **fields,
    ) -> NetlistItem:
        """
        Create an item and append it.

        Args:
            kind: Item kind.
            sheet_path_include: Sheet pins only: the sheet the pin leads into.
            pin_number: Pins only: pin number (taken from the owner pin if
                omitted).
            electrical_pin_type: Pins only: electrical type.
            **fields: Other NetlistItem fields (label, sheet_path, owner, ...).
                A pin item with no ``link`` is linked to its owner pin's
                component.

        Returns:
            The new item.
        """
        if sheet_path_include is not None:
            fields["detail"] = SheetLabelDetail(sheet_path_include)
        elif pin_number is not None or electrical_pin_type is not None:
            owner = fields.get("owner")
            fields["detail"] = PinDetail(
                number=pin_number if pin_number is not None else getattr(owner, "number", ""),
                electrical_type=electrical_pin_type or getattr(owner, "pin_type", PinType.INPUT),
            )
        item = NetlistItem(kind=kind, **fields)
        self._items.append(item)
        return item

    def append(self, item: NetlistItem):
        self._items.append(item)

    def extend(self, items):
        self._items.extend(items)

    def expand_buses(self) -> int:
        """
        Expand every label item whose text is a bus label.

        Returns:
            Number of items added.
        """
        before = len(self._items)
        # New members are appended while iterating; snapshot first
        for item in list(self._items):
            if item.kind in MEMBER_TYPES and self._is_bus(item.label):
                expand_bus_item(item, self._items, self.aliases)
        added = len(self._items) - before
        logger.debug("Bus expansion added %d item(s)", added)
        return added

    def _is_bus(self, label: str) -> bool:
        return is_bus_label(label) or alias_lookup(self.aliases)(label) is not None

    def of_type(self, *kinds: NetlistItemType) -> list[NetlistItem]:
        """Items of the given kinds, in order."""
        return [item for item in self._items if item.kind in kinds]

    def labels_connected_to(self, item: NetlistItem) -> list[NetlistItem]:
        """Items joined to ``item`` by hierarchical or global label rules."""
        return [other for other in self._items if are_labels_connected(item, other)]

    def clear(self):
        """Drop every item of the build."""
        for item in self._items:
            item.net_name_candidate = None
        self._items.clear()

    def to_sexpr(self) -> list:
        return ["netlist", *(item.to_sexpr(i) for i, item in enumerate(self._items))]

    def dump(self) -> str:
        """Debug listing of all items."""
        return serialize(self.to_sexpr())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[NetlistItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> NetlistItem:
        return self._items[index]

    def __contains__(self, item: NetlistItem) -> bool:
        return any(existing is item for existing in self._items)

    def __repr__(self) -> str:
        return f"NetlistItemList({len(self._items)} items)"


# Alias directory used by builds created without one
_default_aliases: Aliases = AliasDirectory()

_netlist = NetlistItemList()


def set_bus_aliases(aliases: Aliases):
    """
    Set the alias directory for new builds and the current build.

    Accepts an AliasDirectory, a mapping of alias names to members, or any
    callable returning an alias's members.
    """
    global _default_aliases
    _default_aliases = aliases if aliases is not None else AliasDirectory()
    _netlist.aliases = _default_aliases


def get_bus_aliases() -> Aliases:
    """Alias directory used by new builds."""
    return _default_aliases


def get_netlist() -> NetlistItemList:
    """Get the current build."""
    return _netlist


def reset_netlist():
    """Discard the current build."""
    _netlist.clear()
