"""
Netlist items: the scalar unit of connectivity.

One item is created for each pin, wire, junction and label found while
walking the schematic. Bus labels are later expanded into one item per bus
member, and each connected cluster is given a net name through a candidate
item.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from .pin import Pin, PinType
from .sheet_path import SheetPath

if TYPE_CHECKING:
    from .component import Component


class NetlistItemType(Enum):
    """Kind of schematic element an item was created from."""
    UNSPECIFIED = "??"
    SEGMENT = "segment"
    BUS = "bus"
    JUNCTION = "junction"
    LABEL = "label"
    HIERLABEL = "hierlabel"
    GLOBLABEL = "glabel"
    BUSLABELMEMBER = "buslblmember"
    HIERBUSLABELMEMBER = "hierbuslblmember"
    GLOBBUSLABELMEMBER = "gbuslblmember"
    SHEETBUSLABELMEMBER = "sbuslblmember"
    SHEETLABEL = "sheetlabel"
    PINLABEL = "pinlabel"
    PIN = "pin"
    NOCONNECT = "noconnect"


class ConnectionType(Enum):
    """Connection state, set by the connectivity builder."""
    UNCONNECTED = "unconnected"
    NOCONNECT_SYMBOL_PRESENT = "noconnect_symbol_present"
    PAD_CONNECT = "pad_connect"


LABEL_TYPES = frozenset({
    NetlistItemType.LABEL,
    NetlistItemType.GLOBLABEL,
    NetlistItemType.HIERLABEL,
    NetlistItemType.BUSLABELMEMBER,
    NetlistItemType.GLOBBUSLABELMEMBER,
    NetlistItemType.HIERBUSLABELMEMBER,
    NetlistItemType.PINLABEL,
})

# Global labels and labels from invisible power pins
GLOBAL_LABEL_TYPES = frozenset({
    NetlistItemType.PINLABEL,
    NetlistItemType.GLOBLABEL,
    NetlistItemType.GLOBBUSLABELMEMBER,
})

BUS_MEMBER_TYPES = frozenset({
    NetlistItemType.SHEETBUSLABELMEMBER,
    NetlistItemType.BUSLABELMEMBER,
    NetlistItemType.HIERBUSLABELMEMBER,
    NetlistItemType.GLOBBUSLABELMEMBER,
})

SHEET_LABEL_TYPES = frozenset({
    NetlistItemType.SHEETLABEL,
    NetlistItemType.SHEETBUSLABELMEMBER,
})


@dataclass(frozen=True)
class SheetLabelDetail:
    """
    Payload of sheet pin items.

    Attributes:
        sheet_path_include: Path of the sub-sheet the pin leads into; a
            hierarchical label on that sheet connects to this pin.
    """
    sheet_path_include: SheetPath = field(default_factory=SheetPath)


@dataclass(frozen=True)
class PinDetail:
    """Payload of symbol pin items."""
    number: str = ""
    electrical_type: PinType = PinType.INPUT


ItemDetail = Union[SheetLabelDetail, PinDetail, None]


def _detail_type(kind: NetlistItemType):
    if kind in SHEET_LABEL_TYPES:
        return SheetLabelDetail
    if kind is NetlistItemType.PIN:
        return PinDetail
    return None


@dataclass(eq=False)
class NetlistItem:
    """
    One connection record.

    Items compare by identity: two items with the same fields are still
    different records.

    Attributes:
        kind: What the item was created from.
        owner: Schematic element that produced the item (not owned).
        link: For sheet pins, the hierarchy sheet; for pins, the component.
        sheet_path: Sheet the item lives on.
        start, end: Endpoints of the wire or pin.
        label: Label text (bus members get their member name).
        member: Member number for bus label members.
        net_code, bus_net_code: Codes assigned by the connectivity builder.
        flag: Scratch flag for the connectivity builder.
        connection_type: Connection state.
        detail: Kind specific payload (SheetLabelDetail or PinDetail).
        net_name_candidate: Item supplying the net name (not owned).
    """
    kind: NetlistItemType = NetlistItemType.UNSPECIFIED
    owner: Any = field(default=None, repr=False)
    link: Any = field(default=None, repr=False)
    sheet_path: SheetPath = field(default_factory=SheetPath)
    start: tuple[float, float] = (0, 0)
    end: tuple[float, float] = (0, 0)
    label: str = ""
    member: int = 0
    net_code: int = 0
    bus_net_code: int = 0
    flag: int = 0
    connection_type: ConnectionType = ConnectionType.UNCONNECTED
    detail: ItemDetail = None
    net_name_candidate: NetlistItem | None = field(default=None, repr=False)

    def __post_init__(self):
        if self.link is None and self.kind is NetlistItemType.PIN and isinstance(self.owner, Pin):
            self.link = self.owner.component

        expected = _detail_type(self.kind)
        if expected is None:
            if self.detail is not None:
                raise TypeError(
                    f"{self.kind.name} items carry no {type(self.detail).__name__}"
                )
        elif self.detail is None:
            self.detail = self._default_detail(expected)
        elif not isinstance(self.detail, expected):
            raise TypeError(
                f"{self.kind.name} items need {expected.__name__}, "
                f"got {type(self.detail).__name__}"
            )

    def _default_detail(self, detail_type):
        if detail_type is PinDetail and isinstance(self.owner, Pin):
            return PinDetail(self.owner.number, self.owner.pin_type)
        return detail_type()

    @classmethod
    def for_pin(
        cls,
        pin: Pin,
        sheet_path: SheetPath | None = None,
        component: Component | None = None,
        **fields,
    ) -> "NetlistItem":
        """Create a PIN item for a symbol pin."""
        return cls(
            kind=NetlistItemType.PIN,
            owner=pin,
            link=component if component is not None else pin.component,
            sheet_path=sheet_path if sheet_path is not None else SheetPath(),
            start=fields.pop("start", pin.position),
            end=fields.pop("end", pin.position),
            detail=PinDetail(pin.number, pin.pin_type),
            **fields,
        )

    @classmethod
    def for_sheet_pin(
        cls,
        label: str,
        sheet_path: SheetPath,
        sheet_path_include: SheetPath,
        **fields,
    ) -> "NetlistItem":
        """Create a SHEETLABEL item for a pin on a hierarchical sheet symbol."""
        return cls(
            kind=NetlistItemType.SHEETLABEL,
            label=label,
            sheet_path=sheet_path,
            detail=SheetLabelDetail(sheet_path_include),
            **fields,
        )

    # Kind specific payload

    @property
    def sheet_path_include(self) -> SheetPath:
        if not isinstance(self.detail, SheetLabelDetail):
            raise AttributeError(f"{self.kind.name} items have no sheet_path_include")
        return self.detail.sheet_path_include

    @property
    def pin_number(self) -> str:
        if not isinstance(self.detail, PinDetail):
            raise AttributeError(f"{self.kind.name} items have no pin number")
        return self.detail.number

    @property
    def electrical_pin_type(self) -> PinType:
        if not isinstance(self.detail, PinDetail):
            raise AttributeError(f"{self.kind.name} items have no electrical pin type")
        return self.detail.electrical_type

    @property
    def component(self) -> Component | None:
        """Component owning a PIN item, None for other kinds."""
        if self.kind is NetlistItemType.PIN:
            return self.link
        return None

    # Kind predicates

    def is_label_type(self) -> bool:
        """True for labels of any type, including bus members and pin labels."""
        return self.kind in LABEL_TYPES

    def is_label_global(self) -> bool:
        """True for global labels and labels from invisible power pins."""
        return self.kind in GLOBAL_LABEL_TYPES

    def is_label_bus_member_type(self) -> bool:
        """
        True for members built from a bus label.

        Two bus label members can only be connected if they have the same
        member number.
        """
        return self.kind in BUS_MEMBER_TYPES

    def pin_name_text(self) -> str:
        """Name of the owning pin for PIN items, "" otherwise."""
        if self.kind is NetlistItemType.PIN and isinstance(self.owner, Pin):
            return self.owner.display_name
        return ""

    def copy(self) -> "NetlistItem":
        """Structural copy sharing the same owner, link and candidate."""
        return replace(self)

    # Net naming

    def set_net_name_candidate(self, candidate: "NetlistItem") -> bool:
        from ..naming import set_net_name_candidate
        return set_net_name_candidate(self, candidate)

    def get_net_name(self) -> str:
        from ..naming import get_net_name
        return get_net_name(self)

    def get_short_net_name(self) -> str:
        from ..naming import get_short_net_name
        return get_short_net_name(self)

    # Debug output

    def to_sexpr(self, index: int = 0) -> list:
        """Debug description of the item as a nested list."""
        path = self.sheet_path.path_human_readable()
        data = [
            "net_item",
            ["ndx", index],
            ["type", self.kind.value],
            ["net_code", self.net_code],
            ["sheet", path],
            ["start", *self.start],
            ["end", *self.end],
        ]
        if self.label:
            data.append(["label", self.label])
        data.append(["sheetpath", path])

        component = self.component
        if component is not None:
            data.append([
                "component",
                ["ref", component.get_ref(self.sheet_path)],
                ["pin", self.pin_number],
            ])
        return data

    def show(self, index: int = 0) -> str:
        """Debug description of the item as S-expression text."""
        from ..sexpr import serialize
        return serialize(self.to_sexpr(index))

    def __repr__(self) -> str:
        return (
            f"NetlistItem({self.kind.name}, {self.label!r}, "
            f"member={self.member}, sheet={self.sheet_path.path_human_readable()!r})"
        )
