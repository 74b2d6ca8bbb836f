"""
Placed symbol (component) model.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .pin import Pin, PinType
from .sheet_path import SheetPath


@dataclass
class Component:
    """
    A symbol placed on a schematic sheet.

    A symbol inside a sub-sheet that is placed more than once is annotated
    once per sheet instance, so references are kept per sheet path.

        u = Component("U1")
        ch2 = SheetPath.from_names("ch2")
        u.set_ref(ch2, "U101")
        u.get_ref(ch2)            # 'U101'
        u.get_ref(SheetPath())    # 'U1'

    Attributes:
        ref: Default reference designator.
        value: Component value.
        references: Per-sheet-path reference designators.
    """
    ref: str
    value: str = ""
    references: dict[SheetPath, str] = field(default_factory=dict, repr=False)

    _pins: dict[str, Pin] = field(default_factory=dict, repr=False)

    def get_ref(self, sheet_path: SheetPath | None = None) -> str:
        """Reference designator within the given sheet path."""
        if sheet_path is not None and sheet_path in self.references:
            return self.references[sheet_path]
        return self.ref

    def set_ref(self, sheet_path: SheetPath, ref: str) -> "Component":
        self.references[sheet_path] = ref
        return self

    def add_pin(
        self,
        number: str | Pin,
        name: str = "",
        pin_type: PinType = PinType.INPUT,
    ) -> Pin:
        """Add a pin (by number or as a Pin object) and return it."""
        pin = number if isinstance(number, Pin) else Pin(number, name, pin_type)
        pin._component = self
        self._pins[pin.number] = pin
        return pin

    @property
    def pins(self) -> list[Pin]:
        return list(self._pins.values())

    def __getitem__(self, key: str | int) -> Pin:
        """Pin by number, or by name when no number matches."""
        key = str(key)
        if key in self._pins:
            return self._pins[key]
        for pin in self._pins.values():
            if pin.name == key:
                return pin
        raise KeyError(f"Component {self.ref} has no pin {key!r}")
