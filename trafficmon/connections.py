"""Choosing which network connection is monitored, and taskbar item toggles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from trafficmon.monitor import Connection

# Positions of the fixed entries at the top of the connection menu.
_AUTO_SELECT_POSITION = 0
_SELECT_ALL_POSITION = 1
_FIRST_CONNECTION_POSITION = 2


@dataclass
class SelectionState:
    """How the monitored connection is chosen."""

    auto_select: bool = True
    select_all: bool = False
    selected: int = 0
    connection_name: str = ""
    connection_changed: bool = False


def toggle_display_item(items: int, item: int) -> int:
    """Hide ``item`` if it is shown, show it otherwise."""
    if items & item:
        return int(items & ~item)
    return int(items | item)


def toggle_item_pair(items: int, first: int, second: int) -> int:
    """Hide both items if either is shown, otherwise show both."""
    if items & first or items & second:
        return int(items & ~first & ~second)
    return int(items | first | second)


def checked_menu_index(state: SelectionState) -> int:
    """Menu position that carries the radio check for the current selection."""
    if state.select_all:
        return _SELECT_ALL_POSITION
    if state.auto_select:
        return _AUTO_SELECT_POSITION
    return state.selected + _FIRST_CONNECTION_POSITION


def apply_connection_command(state: SelectionState, command: int, base_id: int,
                             connections: Sequence[Connection]) -> bool:
    """Update ``state`` for a command from the connection menu.

    ``base_id`` is the "select all" command; ``base_id - 1`` asks for
    automatic selection and ``base_id + 1 + n`` picks connection ``n``.
    Choosing automatic selection leaves the actual pick to the caller.
    Returns True when the change should be saved to the config file.
    """
    if command == base_id:
        state.select_all = True
        state.auto_select = False
        state.connection_changed = True
        return False
    if command == base_id - 1:
        state.auto_select = True
        state.select_all = False
        state.connection_changed = True
        return True
    if base_id < command <= base_id + len(connections):
        state.selected = command - base_id - 1
        state.connection_name = connections[state.selected].name
        state.auto_select = False
        state.select_all = False
        state.connection_changed = True
        return True
    return False


def normalize_selection(state: SelectionState, show_all_interface: bool) -> None:
    """"Select all" is not offered with every interface listed; fall back to automatic."""
    if show_all_interface and state.select_all:
        state.select_all = False
        state.auto_select = True