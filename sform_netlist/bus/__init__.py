"""Bus label grammar, aliases and expansion."""

from .grammar import BusGroup, BusVector, is_bus_label, parse_bus_group, parse_bus_vector
from .alias import AliasDirectory, BusAlias
from .expander import expand_bus_item

__all__ = [
    "BusGroup", "BusVector", "is_bus_label", "parse_bus_group", "parse_bus_vector",
    "AliasDirectory", "BusAlias",
    "expand_bus_item",
]
