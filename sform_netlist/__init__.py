"""
sform-netlist: flat connectivity model for schematic netlisting.

Expands bus labels (vectors, groups and aliases) into scalar netlist items,
joins hierarchical and global labels across sheets, and names nets from a
chosen candidate item.

Example:
    from sform_netlist import *

    aliases = AliasDirectory()
    aliases.add("I2C", "SDA", "SCL")

    items = NetlistItemList(aliases)
    items.add(NetlistItemType.LABEL, label="D[0..7]")
    items.add(NetlistItemType.GLOBLABEL, label="{I2C}")
    items.expand_buses()         # 8 + 2 scalar items

    reset = items.add(NetlistItemType.LABEL, label="RESET")
    wire = items.add(NetlistItemType.SEGMENT)
    wire.set_net_name_candidate(reset)
    wire.get_net_name()          # '/RESET'
"""

__version__ = "0.1.0"

# Logging
from .log import enable_verbose, disable_verbose

# Models
from .models import (
    SheetPath, SheetInstance, Pin, PinType, Component,
    NetlistItem, NetlistItemType, ConnectionType,
    SheetLabelDetail, PinDetail,
)

# Bus labels
from .bus import (
    BusGroup, BusVector, is_bus_label, parse_bus_group, parse_bus_vector,
    AliasDirectory, BusAlias, expand_bus_item,
)

# Connectivity and naming
from .connectivity import is_label_connected, are_labels_connected
from .naming import (
    ACCEPTED_CANDIDATE_TYPES,
    set_net_name_candidate, get_net_name, get_short_net_name,
)

# Build collection
from .netlist import (
    NetlistItemList,
    get_netlist, reset_netlist, set_bus_aliases, get_bus_aliases,
)

# Errors
from .errors import NetlistError, InvalidBusExpansion, InvalidBusLabel, CyclicAliasReference

# Debug output
from .sexpr import serialize

__all__ = [
    # Version
    "__version__",
    # Logging
    "enable_verbose", "disable_verbose",
    # Models
    "SheetPath", "SheetInstance", "Pin", "PinType", "Component",
    "NetlistItem", "NetlistItemType", "ConnectionType",
    "SheetLabelDetail", "PinDetail",
    # Bus labels
    "BusGroup", "BusVector", "is_bus_label", "parse_bus_group", "parse_bus_vector",
    "AliasDirectory", "BusAlias", "expand_bus_item",
    # Connectivity and naming
    "is_label_connected", "are_labels_connected",
    "ACCEPTED_CANDIDATE_TYPES",
    "set_net_name_candidate", "get_net_name", "get_short_net_name",
    # Build collection
    "NetlistItemList",
    "get_netlist", "reset_netlist", "set_bus_aliases", "get_bus_aliases",
    # Errors
    "NetlistError", "InvalidBusExpansion", "InvalidBusLabel", "CyclicAliasReference",
    # Debug output
    "serialize",
]
