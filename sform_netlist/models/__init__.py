"""Data models for netlist items and their owners."""

from .sheet_path import SheetPath, SheetInstance
from .pin import Pin, PinType
from .component import Component
from .item import (
    NetlistItem, NetlistItemType, ConnectionType,
    SheetLabelDetail, PinDetail,
)

__all__ = [
    "SheetPath", "SheetInstance", "Pin", "PinType", "Component",
    "NetlistItem", "NetlistItemType", "ConnectionType",
    "SheetLabelDetail", "PinDetail",
]
