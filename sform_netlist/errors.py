"""
Exceptions raised while building netlist connectivity.

All of these signal a defect in the caller (the connectivity builder), not
bad user data: malformed bus text simply fails to parse.
"""

from __future__ import annotations


class NetlistError(Exception):
    """Base class for netlist build errors."""


class InvalidBusExpansion(NetlistError):
    """Raised when an item of a non-label kind is handed to the bus expander."""

    def __init__(self, kind, label: str = ""):
        self.kind = kind
        self.label = label
        name = getattr(kind, "name", str(kind))
        super().__init__(
            f"Cannot expand {name} item into bus members"
            + (f": {label!r}" if label else "")
        )


class InvalidBusLabel(NetlistError, ValueError):
    """Raised when the bus expander is given a label that is not a bus."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"<{label}> is not a valid bus label")


class CyclicAliasReference(NetlistError):
    """Raised when a bus alias refers back to itself, directly or not."""

    def __init__(self, path: tuple[str, ...]):
        self.path = tuple(path)
        super().__init__(f"Bus alias cycle: {' -> '.join(self.path)}")
