"""
Bus label expansion.

Turns one netlist item carrying a bus label into one item per scalar bus
member. The item itself becomes the first member; the others are copies
appended to the build's item list.

    D[0..2]         -> D0 (member 0), D1 (member 1), D2 (member 2)
    USB{DP DM}      -> USB.DP (member 0), USB.DM (member 1)
    {A[0..1] C}     -> A0 (member 0), A1 (member 1), C (member 2)

Vector members keep their index as member number. Group members are
numbered by position across the whole group so every member of one bus
label gets a distinct number.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping
from typing import Union

from ..errors import CyclicAliasReference, InvalidBusExpansion, InvalidBusLabel
from ..models.item import NetlistItem, NetlistItemType
from .alias import AliasLookup
from .grammar import BusVector, parse_bus_group, parse_bus_vector

logger = logging.getLogger(__name__)

# Label kind -> bus member kind
MEMBER_TYPES = {
    NetlistItemType.HIERLABEL: NetlistItemType.HIERBUSLABELMEMBER,
    NetlistItemType.GLOBLABEL: NetlistItemType.GLOBBUSLABELMEMBER,
    NetlistItemType.SHEETLABEL: NetlistItemType.SHEETBUSLABELMEMBER,
    NetlistItemType.LABEL: NetlistItemType.BUSLABELMEMBER,
}

Aliases = Union[AliasLookup, Mapping, None]


def alias_lookup(aliases: Aliases) -> AliasLookup:
    if aliases is None:
        return lambda name: None
    if isinstance(aliases, Mapping):
        return aliases.get
    return aliases


class _MemberWriter:
    """Assigns member names, reusing the expanded item for the first one."""

    def __init__(self, item: NetlistItem, items):
        self.item = item
        self.items = items
        self.created: list[NetlistItem] = [item]
        self.self_set = False

    def add(self, label: str, member: int):
        if not self.self_set:
            self.item.label = label
            self.item.member = member
            self.self_set = True
            return

        new_item = self.item.copy()
        new_item.label = label
        new_item.member = member
        self.items.append(new_item)
        self.created.append(new_item)


def expand_bus_item(item: NetlistItem, items, aliases: Aliases = None) -> list[NetlistItem]:
    """
    Expand a bus label item into scalar member items.

    The item is changed in place into the first member (its kind becomes the
    matching bus member kind) and a copy is appended to ``items`` for every
    further member.

    Args:
        item: Item whose label is a bus vector, a bus group or an alias name.
        items: List (or anything with append) receiving the new items.
        aliases: Alias lookup: a callable returning the member names of an
            alias (or None), a mapping of alias names to members, or None.

    Returns:
        All member items, the original item first.

    Raises:
        InvalidBusLabel: The label is not a bus label.
        InvalidBusExpansion: The item is not a label, hierarchical label,
            global label or sheet label.
        CyclicAliasReference: An alias contains itself.

    Example:
        >>> item = NetlistItem(kind=NetlistItemType.LABEL, label="D[0..1]")
        >>> [m.label for m in expand_bus_item(item, [])]
        ['D0', 'D1']
    """
    lookup = alias_lookup(aliases)
    label = item.label

    alias_members = lookup(label)
    group = parse_bus_group(label)
    vector = None
    if alias_members is None and group is None:
        vector = parse_bus_vector(label)
        if vector is None:
            raise InvalidBusLabel(label)

    member_type = MEMBER_TYPES.get(item.kind)
    if member_type is None:
        raise InvalidBusExpansion(item.kind, label)
    item.kind = member_type

    writer = _MemberWriter(item, items)

    if vector is not None:
        _write_vector(writer, vector)
    else:
        if alias_members is not None:
            members = list(alias_members)
            path = (label,)
        else:
            members = list(group.members)
            path = ()
        prefix = group.member_prefix if group is not None else ""
        _write_group(writer, members, prefix, path, lookup)

    if not writer.self_set:
        logger.warning("Bus label %r has no members", label)

    logger.debug("Expanded bus label %r into %d member(s)", label, len(writer.created))
    return writer.created


def _write_vector(writer: _MemberWriter, vector: BusVector):
    """Members of a plain vector label, numbered by their index."""
    for index in vector.indices():
        writer.add(f"{vector.prefix}{index}", index)


def _write_group(
    writer: _MemberWriter,
    members: list[str],
    prefix: str,
    path: tuple[str, ...],
    lookup: AliasLookup,
):
    """
    Members of a bus group or alias.

    Pending tokens are kept in a work list; an alias token is replaced by
    its members at the same position. Each entry carries the chain of
    aliases it came from, which is what cycle detection checks against.
    """
    pending = deque((token, path) for token in members)
    member_offset = 0

    while pending:
        token, alias_path = pending.popleft()

        vector = parse_bus_vector(token)
        if vector is not None:
            # Named group prefix covers nested vector members too
            for index in vector.indices():
                writer.add(f"{prefix}{vector.prefix}{index}", member_offset)
                member_offset += 1
            continue

        nested = lookup(token)
        if nested is not None:
            if token in alias_path:
                raise CyclicAliasReference(alias_path + (token,))
            nested_path = alias_path + (token,)
            pending.extendleft((name, nested_path) for name in reversed(list(nested)))
            continue

        writer.add(f"{prefix}{token}", member_offset)
        member_offset += 1
