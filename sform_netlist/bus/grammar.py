"""
Bus label grammar.

Recognizes the two bus label shapes used on schematics:

    DATA[0..7]          vector: prefix plus an inclusive numeric range
    USB{DP DM}          group: optional name plus whitespace separated members
    {SDA SCL A[0..2]}   unnamed group, members may themselves be vectors

Anything else is a plain (scalar) label. The functions here only recognize
text; deciding what a group member means is the expander's job.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# PREFIX[start..end]
VECTOR_PATTERN = re.compile(r"^(?P<prefix>[^\s\[\]{}]+)\[(?P<start>\d+)\.\.(?P<end>\d+)\]$")

# [NAME]{member member ...}
GROUP_PATTERN = re.compile(r"^(?P<name>[^\s{}]*)\{(?P<members>[^{}]*)\}$")


@dataclass(frozen=True)
class BusVector:
    """
    A parsed ``PREFIX[start..end]`` label.

    ``start`` may be greater than ``end``; members are then listed from
    ``start`` down to ``end``.
    """
    prefix: str
    start: int
    end: int

    @property
    def width(self) -> int:
        """Number of scalar members."""
        return abs(self.end - self.start) + 1

    @property
    def step(self) -> int:
        return 1 if self.end >= self.start else -1

    def indices(self) -> range:
        """Member indices in written order."""
        return range(self.start, self.end + self.step, self.step)

    def members(self) -> list[str]:
        """Member labels in written order, e.g. ['D0', 'D1']."""
        return [f"{self.prefix}{index}" for index in self.indices()]


@dataclass(frozen=True)
class BusGroup:
    """A parsed ``[NAME]{member ...}`` label. ``name`` is "" when unnamed."""
    name: str
    members: tuple[str, ...]

    @property
    def member_prefix(self) -> str:
        """Prefix applied to each member label: "NAME." or ""."""
        return f"{self.name}." if self.name else ""


def parse_bus_vector(text: str) -> BusVector | None:
    """
    Parse a bus vector label.

    Args:
        text: Label text.

    Returns:
        BusVector, or None when the text is not a vector.

    Example:
        >>> parse_bus_vector("DATA[0..7]")
        BusVector(prefix='DATA', start=0, end=7)
    """
    match = VECTOR_PATTERN.match(text)
    if not match:
        return None
    return BusVector(
        prefix=match.group("prefix"),
        start=int(match.group("start")),
        end=int(match.group("end")),
    )


def parse_bus_group(text: str) -> BusGroup | None:
    """
    Parse a bus group label.

    Args:
        text: Label text.

    Returns:
        BusGroup, or None when the text is not a group (including a group
        with no members).

    Example:
        >>> parse_bus_group("USB{DP DM}")
        BusGroup(name='USB', members=('DP', 'DM'))
    """
    match = GROUP_PATTERN.match(text)
    if not match:
        return None
    members = tuple(match.group("members").split())
    if not members:
        return None
    return BusGroup(name=match.group("name"), members=members)


def is_bus_label(text: str) -> bool:
    """True if the text is a bus vector or bus group label."""
    return parse_bus_vector(text) is not None or parse_bus_group(text) is not None
