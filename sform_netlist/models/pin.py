"""
Symbol pin model.

Pins are the owners of PIN netlist items. Electrical types match KiCad's
pin_electrical_type names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .component import Component


# Name KiCad uses for a pin without a visible name
EMPTY_PIN_NAME = "~"


class PinType(Enum):
    """Electrical type of a pin, used for ERC."""
    INPUT = "input"
    OUTPUT = "output"
    BIDIRECTIONAL = "bidirectional"
    TRI_STATE = "tri_state"
    PASSIVE = "passive"
    FREE = "free"
    UNSPECIFIED = "unspecified"
    POWER_IN = "power_in"
    POWER_OUT = "power_out"
    OPEN_COLLECTOR = "open_collector"
    OPEN_EMITTER = "open_emitter"
    NO_CONNECT = "no_connect"


@dataclass
class Pin:
    """
    A pin of a placed symbol.

    Attributes:
        number: Pin number (string, e.g., "1", "A1").
        name: Pin name (e.g., "VCC", "~" when unnamed).
        pin_type: Electrical type for ERC.
        position: (x, y) coordinates of the pin's connection point.
    """
    number: str
    name: str = ""
    pin_type: PinType = PinType.INPUT
    position: tuple[float, float] = (0.0, 0.0)

    _component: Component | None = field(default=None, repr=False, compare=False)

    @property
    def component(self) -> Component | None:
        """Component this pin belongs to."""
        return self._component

    @property
    def display_name(self) -> str:
        """Pin name with the unnamed placeholder mapped to ""."""
        return "" if self.name == EMPTY_PIN_NAME else self.name

    @property
    def is_power(self) -> bool:
        return self.pin_type in (PinType.POWER_IN, PinType.POWER_OUT)

    @property
    def ref(self) -> str:
        """Full reference like 'U1.3'."""
        if self._component:
            return f"{self._component.ref}.{self.number}"
        return self.number
