"""Tests for net name candidates and net names."""

import pytest
from sform_netlist import (
    NetlistItem, NetlistItemType, SheetPath, SheetInstance, Component, PinType,
    ACCEPTED_CANDIDATE_TYPES,
    set_net_name_candidate, get_net_name, get_short_net_name,
)


def make_pin_item(ref="U1", number="3", sheet_path=None):
    component = Component(ref)
    pin = component.add_pin(number, "OUT", PinType.OUTPUT)
    return NetlistItem.for_pin(pin, sheet_path or SheetPath())


class TestCandidateSelection:
    """Tests for set_net_name_candidate()."""

    @pytest.mark.parametrize("kind", sorted(ACCEPTED_CANDIDATE_TYPES, key=lambda k: k.name))
    def test_accepted_kinds(self, kind):
        """Labels, accepted bus members and pins can name a net."""
        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        candidate = NetlistItem(kind=kind, label="N")

        assert set_net_name_candidate(item, candidate)
        assert item.net_name_candidate is candidate

    @pytest.mark.parametrize("kind", [
        NetlistItemType.SEGMENT,
        NetlistItemType.BUS,
        NetlistItemType.JUNCTION,
        NetlistItemType.BUSLABELMEMBER,
        NetlistItemType.HIERBUSLABELMEMBER,
        NetlistItemType.SHEETLABEL,
        NetlistItemType.NOCONNECT,
        NetlistItemType.UNSPECIFIED,
    ])
    def test_rejected_kinds_are_ignored(self, kind):
        """Other kinds are ignored without raising."""
        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        candidate = NetlistItem(kind=kind, label="N")

        assert not set_net_name_candidate(item, candidate)
        assert item.net_name_candidate is None

    def test_rejection_keeps_previous_candidate(self):
        """A rejected candidate does not clear an earlier one."""
        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        label = NetlistItem(kind=NetlistItemType.LABEL, label="RESET")
        junction = NetlistItem(kind=NetlistItemType.JUNCTION)

        item.set_net_name_candidate(label)
        item.set_net_name_candidate(junction)

        assert item.net_name_candidate is label

    def test_last_accepted_candidate_wins(self):
        """There is no priority ordering: a later call replaces the candidate."""
        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        hier = NetlistItem(kind=NetlistItemType.HIERLABEL, label="HIER")
        pin_item = make_pin_item()

        item.set_net_name_candidate(hier)
        item.set_net_name_candidate(pin_item)

        assert item.net_name_candidate is pin_item

    def test_item_can_name_itself(self):
        item = NetlistItem(kind=NetlistItemType.LABEL, label="SELF")
        item.set_net_name_candidate(item)
        assert item.get_net_name() == "/SELF"


class TestNetNames:
    """Tests for get_net_name() and get_short_net_name()."""

    def test_no_candidate(self):
        """Items without a candidate have empty names."""
        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        assert get_net_name(item) == ""
        assert get_short_net_name(item) == ""

    def test_local_label_at_root(self):
        """Local names are prefixed with the sheet path."""
        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        item.set_net_name_candidate(
            NetlistItem(kind=NetlistItemType.LABEL, label="RESET", sheet_path=SheetPath())
        )

        assert item.get_net_name() == "/RESET"
        assert item.get_short_net_name() == "RESET"

    def test_local_label_in_sub_sheet(self):
        """The candidate's own sheet path is used, not the item's."""
        path = SheetPath.from_names("power", "ldo")
        item = NetlistItem(kind=NetlistItemType.SEGMENT, sheet_path=SheetPath())
        item.set_net_name_candidate(
            NetlistItem(kind=NetlistItemType.HIERLABEL, label="VOUT", sheet_path=path)
        )

        assert item.get_net_name() == "/power/ldo/VOUT"
        assert item.get_short_net_name() == "VOUT"

    @pytest.mark.parametrize("kind", [
        NetlistItemType.GLOBLABEL,
        NetlistItemType.GLOBBUSLABELMEMBER,
        NetlistItemType.PINLABEL,
    ])
    def test_global_names_have_no_prefix(self, kind):
        """Global labels and power pin labels are not prefixed."""
        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        item.set_net_name_candidate(
            NetlistItem(kind=kind, label="VCC", sheet_path=SheetPath.from_names("sub"))
        )

        assert item.get_net_name() == "VCC"
        assert item.get_short_net_name() == "VCC"

    def test_sheet_bus_member_is_local(self):
        """Sheet pin bus members are local names."""
        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        candidate = NetlistItem(
            kind=NetlistItemType.SHEETBUSLABELMEMBER, label="D0",
            sheet_path=SheetPath.from_names("top"),
        )
        item.set_net_name_candidate(candidate)

        assert item.get_net_name() == "/top/D0"

    def test_pin_candidate(self):
        """Nets without labels are named after a pin."""
        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        item.set_net_name_candidate(make_pin_item("U1", "3"))

        assert item.get_short_net_name() == "Net-(U1-Pad3)"
        assert item.get_net_name() == "Net-(U1-Pad3)"

    def test_pin_candidate_uses_sheet_reference(self):
        """The component reference is the one for the pin's sheet."""
        path = SheetPath.from_names("ch2")
        pin_item = make_pin_item("U1", "7", path)
        pin_item.component.set_ref(path, "U201")

        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        item.set_net_name_candidate(pin_item)

        assert item.get_short_net_name() == "Net-(U201-Pad7)"

    def test_pin_candidate_without_component(self):
        """A pin item with no owning component has no pin based name."""
        candidate = NetlistItem(kind=NetlistItemType.PIN)
        item = NetlistItem(kind=NetlistItemType.SEGMENT)
        item.set_net_name_candidate(candidate)

        assert item.get_short_net_name() == ""

    def test_short_names_can_collide(self):
        """Same label on two sheets: different full names, same short name."""
        a = NetlistItem(kind=NetlistItemType.SEGMENT)
        b = NetlistItem(kind=NetlistItemType.SEGMENT)
        a.set_net_name_candidate(NetlistItem(
            kind=NetlistItemType.LABEL, label="EN", sheet_path=SheetPath.from_names("a")))
        b.set_net_name_candidate(NetlistItem(
            kind=NetlistItemType.LABEL, label="EN", sheet_path=SheetPath.from_names("b")))

        assert a.get_net_name() != b.get_net_name()
        assert a.get_short_net_name() == b.get_short_net_name() == "EN"
