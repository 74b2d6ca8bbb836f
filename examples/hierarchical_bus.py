#!/usr/bin/env python3
"""
Hierarchical Bus Example

Builds the netlist items for a root sheet feeding a data bus and an I2C
alias into a sub-sheet, expands the buses and names the nets.
"""

from sform_netlist import *

reset_netlist()

# Bus aliases defined by the schematic
aliases = AliasDirectory()
aliases.add("I2C", "SDA", "SCL")
set_bus_aliases(aliases)

root = SheetPath()
mcu_sheet = root.push(SheetInstance("mcu"))

netlist = get_netlist()

# Sheet pins on the root sheet leading into the sub-sheet
netlist.add(NetlistItemType.SHEETLABEL, label="D[0..3]",
            sheet_path=root, sheet_path_include=mcu_sheet)
netlist.add(NetlistItemType.SHEETLABEL, label="{I2C}",
            sheet_path=root, sheet_path_include=mcu_sheet)

# Hierarchical labels inside the sub-sheet
netlist.add(NetlistItemType.HIERLABEL, label="D[0..3]", sheet_path=mcu_sheet)
netlist.add(NetlistItemType.HIERLABEL, label="{I2C}", sheet_path=mcu_sheet)

# A pin with no label on its net
u1 = Component("U1", value="ATmega328P")
reset_pin = u1.add_pin("29", "~RESET", PinType.INPUT)
pin_item = netlist.add(NetlistItemType.PIN, owner=reset_pin, link=u1, sheet_path=mcu_sheet)
pin_item.set_net_name_candidate(pin_item)

print(f"Expanded {netlist.expand_buses()} extra bus members")

# Name each hierarchical member after the matching sheet pin member
for item in netlist.of_type(NetlistItemType.HIERBUSLABELMEMBER):
    pins = [p for p in netlist.labels_connected_to(item)
            if p.member == item.member and p.label == item.label]
    if pins:
        item.set_net_name_candidate(pins[0])
    print(f"  {item.get_net_name():20} member {item.member}")

print(f"  {pin_item.get_net_name():20} (unlabelled pin)")

print("\nDebug dump:")
print(netlist.dump())
