"""
Bus aliases.

A bus alias is a named list of member names that can stand in for a bus
group, e.g. an alias ``I2C`` with members ``SDA SCL``. Aliases are defined
by the schematic; the expander only looks them up by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Sequence

# Lookup signature accepted by the expander
AliasLookup = Callable[[str], Optional[Sequence[str]]]


@dataclass
class BusAlias:
    """
    A named bus alias.

    Attributes:
        name: Alias name as used in labels (e.g. "I2C").
        members: Ordered member names. Members may be scalars, vectors
            ("A[0..3]") or the names of other aliases.
    """
    name: str
    members: list[str] = field(default_factory=list)

    def add_member(self, *names: str) -> "BusAlias":
        for name in names:
            self.members.append(name)
        return self


class AliasDirectory:
    """
    In-memory alias registry.

    Calling the directory with a name returns that alias's members (or
    None), so it can be passed anywhere an alias lookup function is expected.

    Example:
        aliases = AliasDirectory()
        aliases.add("I2C", "SDA", "SCL")
        aliases("I2C")      # ['SDA', 'SCL']
        aliases("SPI")      # None
    """

    def __init__(self, aliases: Sequence[BusAlias] = ()):
        self._aliases: dict[str, BusAlias] = {}
        for alias in aliases:
            self._aliases[alias.name] = alias

    def add(self, name: str, *members: str) -> BusAlias:
        """Define (or replace) an alias."""
        alias = BusAlias(name, list(members))
        self._aliases[name] = alias
        return alias

    def remove(self, name: str):
        """Remove an alias. Raises KeyError if it is not defined."""
        try:
            del self._aliases[name]
        except KeyError:
            raise KeyError(f"No bus alias named {name!r}") from None

    def get(self, name: str) -> BusAlias | None:
        return self._aliases.get(name)

    def members(self, name: str) -> list[str] | None:
        """Members of the named alias, or None if undefined."""
        alias = self._aliases.get(name)
        if alias is None:
            return None
        return list(alias.members)

    def clear(self):
        self._aliases.clear()

    def __call__(self, name: str) -> list[str] | None:
        return self.members(name)

    def __contains__(self, name: str) -> bool:
        return name in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)

    def __iter__(self) -> Iterator[BusAlias]:
        return iter(self._aliases.values())

    def __repr__(self) -> str:
        names = ", ".join(self._aliases)
        return f"AliasDirectory([{names}])"
