"""
Net naming.

Every item of a connected cluster points at one candidate item whose label
(or, failing any label, whose pin) names the net. Choosing the best
candidate is up to the connectivity builder: set_net_name_candidate() has no
notion of priority and the last accepted call wins. The builder is expected
to rank candidates (hierarchical label before local label before pin, and
so on) and call it once per item with the winner.
"""

from __future__ import annotations

import logging

from .models.item import NetlistItem, NetlistItemType

logger = logging.getLogger(__name__)

# Kinds an item may take its net name from
ACCEPTED_CANDIDATE_TYPES = frozenset({
    NetlistItemType.HIERLABEL,
    NetlistItemType.LABEL,
    NetlistItemType.PINLABEL,
    NetlistItemType.GLOBLABEL,
    NetlistItemType.GLOBBUSLABELMEMBER,
    NetlistItemType.SHEETBUSLABELMEMBER,
    NetlistItemType.PIN,
})


def set_net_name_candidate(item: NetlistItem, candidate: NetlistItem) -> bool:
    """
    Make ``candidate`` the source of ``item``'s net name.

    Candidates of other kinds (wires, junctions, plain bus members, ...)
    are ignored without error.

    Returns:
        True if the candidate was accepted.
    """
    if candidate.kind not in ACCEPTED_CANDIDATE_TYPES:
        logger.debug("Ignoring %s as net name candidate", candidate.kind.name)
        return False
    item.net_name_candidate = candidate
    return True


def get_net_name(item: NetlistItem) -> str:
    """
    Full net name of the item.

    Local names are prefixed with the candidate's sheet path ("/sub/RESET");
    global names are not. Nets named after a pin use the short name.
    """
    candidate = item.net_name_candidate
    if candidate is None:
        return ""

    if candidate.kind is NetlistItemType.PIN:
        return get_short_net_name(item)

    net_name = ""
    if not candidate.is_label_global():
        net_name = candidate.sheet_path.path_human_readable()
    return net_name + candidate.label


def get_short_net_name(item: NetlistItem) -> str:
    """
    Net name without sheet path.

    Two different nets can share a short name. A net without labels is
    named after a pin: "Net-(U1-Pad3)".
    """
    candidate = item.net_name_candidate
    if candidate is None:
        return ""

    if candidate.kind is NetlistItemType.PIN:
        component = candidate.component
        if component is None:
            return ""
        ref = component.get_ref(candidate.sheet_path)
        return f"Net-({ref}-Pad{candidate.pin_number})"

    return candidate.label
