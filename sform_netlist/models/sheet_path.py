"""
Sheet paths: where an item lives in the design hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator
import uuid


@dataclass(frozen=True)
class SheetInstance:
    """
    One placed hierarchical sheet.

    Two placements of the same sub-sheet file are different instances, so
    identity is the (name, uuid) pair.
    """
    name: str
    uuid: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass(frozen=True)
class SheetPath:
    """
    Sequence of sheet instances from the root sheet down to one sheet.

    The empty path is the root sheet. Paths are values: equal when they
    list the same instances.

    Example:
        root = SheetPath()
        power = root.push(SheetInstance("power"))
        power.path_human_readable()   # '/power/'
    """
    sheets: tuple[SheetInstance, ...] = ()

    @classmethod
    def from_names(cls, *names: str) -> "SheetPath":
        """
        Build a path from sheet names.

        Each call makes new sheet instances, so two calls with the same names
        give unequal paths. Keep the returned path to refer to the same sheet.
        """
        return cls(tuple(SheetInstance(name) for name in names))

    def push(self, sheet: SheetInstance) -> "SheetPath":
        """Path one level deeper."""
        return SheetPath(self.sheets + (sheet,))

    def parent(self) -> "SheetPath":
        """Path one level up. The root's parent is the root."""
        return SheetPath(self.sheets[:-1])

    def last(self) -> SheetInstance | None:
        """Innermost sheet, or None for the root."""
        return self.sheets[-1] if self.sheets else None

    @property
    def is_root(self) -> bool:
        return not self.sheets

    def path_human_readable(self) -> str:
        """Slash separated sheet names with leading and trailing '/'."""
        if not self.sheets:
            return "/"
        return "/" + "/".join(sheet.name for sheet in self.sheets) + "/"

    def __len__(self) -> int:
        return len(self.sheets)

    def __iter__(self) -> Iterator[SheetInstance]:
        return iter(self.sheets)

    def __str__(self) -> str:
        return self.path_human_readable()


ROOT = SheetPath()
