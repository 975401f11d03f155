"""Two-listbox demo UI using urwid."""

import logging
import signal
import sys
from enum import Enum
from typing import List, Optional, Tuple

import urwid

from aria_listbox.config import (
    FIRST_LIST_ITEMS,
    PALETTE,
    QUIT_KEYS,
    SECOND_LIST_ITEMS,
    SWITCH_FOCUS_KEYS,
)
from aria_listbox.listbox import FocusHandle, Listbox
from aria_listbox.option import OptionDescriptor
from aria_listbox.value import ValueCell

logger = logging.getLogger(__name__)


class SourceList(Enum):
    """Item sets the first listbox can pick for the second one."""

    FIRST = 'first'
    SECOND = 'second'

    @property
    def items(self) -> Tuple[str, ...]:
        if self is SourceList.FIRST:
            return FIRST_LIST_ITEMS
        return SECOND_LIST_ITEMS

    def descriptors(self) -> List[OptionDescriptor]:
        return [OptionDescriptor(item, item) for item in self.items]


class Interface:
    """Main interface: a source listbox driving the options of a second one."""

    def __init__(self) -> None:
        """Build the widgets. Call :meth:`run` to start the main loop."""
        self.mainloop: Optional[urwid.MainLoop] = None
        self.first_value = ValueCell()
        self.second_value = ValueCell()
        self.source = SourceList.FIRST

        self.header = urwid.AttrMap(urwid.Text('Listbox demo'), 'header')
        self.status = urwid.Text('')
        self.footer = urwid.AttrMap(self.status, 'status')

        self.first = Listbox(
            'First',
            self.first_value,
            [
                OptionDescriptor('first', 'First list'),
                OptionDescriptor('second', 'Second list'),
            ],
            on_mount=self.on_first_mounted,
            on_change=self.on_first_change,
        )
        self.second = Listbox(
            'second',
            self.second_value,
            self.source.descriptors(),
            on_change=self.on_second_change,
        )
        self.columns = urwid.Columns([
            urwid.LineBox(self.first, title=self.first.label),
            urwid.LineBox(self.second, title=self.second.label),
        ])
        self.frame = urwid.Frame(
            header=self.header,
            body=self.columns,
            footer=self.footer
        )
        self.top = urwid.Padding(self.frame, left=2, right=2)

        self.second.mount(self.columns)
        self.first.mount(self.columns)

    def run(self) -> None:
        """Run the urwid main loop until the user quits."""
        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)
        try:
            self.mainloop = urwid.MainLoop(
                self.top,
                palette=PALETTE,
                unhandled_input=self.handle_keypress
            )
            logger.info("Starting main loop")
            self.mainloop.run()
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
        except Exception as e:
            logger.error(f"Fatal error in interface: {e}", exc_info=True)
            raise
        finally:
            self._cleanup()

    def _signal_handler(self, signum, frame) -> None:
        """Handle termination signals gracefully."""
        logger.info(f"Received signal {signum}, shutting down gracefully...")
        self._cleanup()
        sys.exit(0)

    def _cleanup(self) -> None:
        """Unmount the options of both listboxes."""
        self.first.destroy()
        self.second.destroy()

    def on_first_mounted(self, handle: FocusHandle) -> None:
        handle.set_focus(True)

    def on_first_change(self, new: str) -> None:
        """Swap the second listbox's options for the chosen source list.

        Args:
            new: Id of the newly active option of the first listbox
        """
        try:
            self.source = SourceList(new)
        except ValueError:
            logger.error(f"Unknown source list: {new!r}")
            self.status.set_text(('error', f'Error: unknown source list {new!r}'))
            return
        self.second.set_options(self.source.descriptors())
        self.status.set_text(f'{self.first.label}: {new}')

    def on_second_change(self, new: str) -> None:
        self.status.set_text(f'{self.second.label}: {new}')

    def handle_keypress(self, key: str) -> None:
        """Handle keys no listbox consumed.

        Args:
            key: Key pressed
        """
        if key in QUIT_KEYS:
            raise urwid.ExitMainLoop()
        elif key in SWITCH_FOCUS_KEYS:
            self.switch_focus()

    def switch_focus(self) -> None:
        """Move focus to the other listbox."""
        position = self.columns.focus_position
        self.columns.focus_position = (position + 1) % len(self.columns.contents)
