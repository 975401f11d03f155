"""Tests for the two-listbox demo interface."""

import pytest
import urwid

from aria_listbox.config import FIRST_LIST_ITEMS, SECOND_LIST_ITEMS
from aria_listbox.interface import Interface, SourceList


@pytest.fixture
def interface():
    return Interface()


@pytest.fixture
def second_changes(interface):
    recorded = []
    urwid.connect_signal(interface.second, 'change', recorded.append)
    return recorded


class TestSourceList:

    def test_known_ids(self):
        assert SourceList("first").items == FIRST_LIST_ITEMS
        assert SourceList("second").items == SECOND_LIST_ITEMS

    def test_unknown_id_raises(self):
        with pytest.raises(ValueError):
            SourceList("third")


class TestInterface:

    def test_initial_render(self, interface):
        canvas = interface.top.render((80, 12), focus=True)
        text = b"".join(
            row if isinstance(row, bytes) else row.encode() for row in canvas.text
        )
        assert b"First list" in text
        assert interface.first.active == "first"
        assert interface.second.active == "First"
        assert interface.second.registry.ids() == list(FIRST_LIST_ITEMS)

    def test_selecting_second_list_swaps_options_once(self, interface, second_changes):
        interface.first.reconcile()
        interface.second.reconcile()
        assert second_changes == ["First"]

        interface.first.handle_key("ArrowDown")
        assert interface.source is SourceList.SECOND
        assert interface.second.registry.ids() == list(SECOND_LIST_ITEMS)

        for _ in range(3):
            interface.second.reconcile()
        assert second_changes == ["First", "fourth"]
        assert interface.second_value == "fourth"

    def test_unknown_source_list_is_reported(self, interface):
        interface.on_first_change("bogus")
        assert "unknown source list" in interface.status.text
        assert interface.second.registry.ids() == list(FIRST_LIST_ITEMS)

    def test_status_shows_latest_change(self, interface):
        interface.first.reconcile()
        interface.second.reconcile()
        assert interface.status.text == "second: First"

    def test_quit_key(self, interface):
        with pytest.raises(urwid.ExitMainLoop):
            interface.handle_keypress("q")

    def test_tab_switches_focus(self, interface):
        assert interface.columns.focus_position == 0
        interface.handle_keypress("tab")
        assert interface.columns.focus_position == 1
        interface.handle_keypress("tab")
        assert interface.columns.focus_position == 0

    def test_cleanup_unmounts_everything(self, interface):
        interface._cleanup()
        assert len(interface.first.registry) == 0
        assert len(interface.second.registry) == 0
