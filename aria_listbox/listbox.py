"""Single-select listbox widget with a shared option registry."""

import contextlib
import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Union

import urwid

from aria_listbox.config import KEY_BINDINGS
from aria_listbox.option import ListboxOption, OptionDescriptor
from aria_listbox.registry import OptionRecord, OptionRegistry
from aria_listbox.value import ValueCell

logger = logging.getLogger(__name__)


class Key(str, Enum):
    """Logical navigation keys understood by the listbox."""

    ARROW_UP = 'ArrowUp'
    ARROW_DOWN = 'ArrowDown'
    HOME = 'Home'
    END = 'End'


class FocusHandle:
    """Handed to ``on_mount`` callbacks so the owner can focus the listbox."""

    def __init__(self, listbox: 'Listbox', container: Optional[urwid.Widget] = None) -> None:
        self.listbox = listbox
        self.container = container

    def set_focus(self, focused: bool = True) -> None:
        """Move the container's focus onto the listbox.

        The container must be an urwid container with ``contents`` (Columns,
        Pile). Without a container, or with ``focused`` False, nothing
        changes.

        Args:
            focused: Whether focus is requested
        """
        if not focused or self.container is None:
            return
        for position, (widget, _options) in enumerate(self.container.contents):
            if widget.base_widget is self.listbox:
                self.container.focus_position = position
                logger.debug(f"Focused listbox {self.listbox.label!r}")
                return
        logger.warning(f"Listbox {self.listbox.label!r} not found in its container")


class Listbox(urwid.ListBox):
    """Accessible single-select listbox.

    Options mount into the listbox's :class:`OptionRegistry`; the listbox
    owns a cursor (``selected_index``) and keeps the registry's selection,
    the caller's :class:`ValueCell` and the cursor consistent. Selection
    changes are reported through the ``change`` signal with the new active
    id as the only argument.
    """

    signals = ['change', 'mount']
    no_cache = ['render']

    def __init__(
        self,
        label: str,
        value: ValueCell,
        options: Iterable[OptionDescriptor] = (),
        on_mount: Optional[Callable[[FocusHandle], None]] = None,
        on_change: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Initialize the listbox.

        Args:
            label: Accessible label of the listbox
            value: Controlled value shared with the owner
            options: Initial options
            on_mount: Called once with a FocusHandle when the listbox mounts
            on_change: Called with the new active id when it changes
        """
        self.label = label
        self.value = value
        self.registry = OptionRegistry()
        self.selected_index = 0
        self._mounted = False
        super().__init__(urwid.SimpleFocusListWalker([]))
        if on_mount:
            urwid.connect_signal(self, 'mount', on_mount)
        if on_change:
            urwid.connect_signal(self, 'change', on_change)
        self.set_options(options)

    @property
    def active(self) -> str:
        return self.registry.active

    @property
    def children(self) -> List[ListboxOption]:
        return list(self.body)

    @property
    def attributes(self) -> Dict[str, str]:
        """ARIA attributes of the listbox container."""
        return {
            'role': 'listbox',
            'aria-label': self.label,
            'aria-activedescendant': self.registry.active,
            'tabindex': '0',
        }

    def mount(self, container: Optional[urwid.Widget] = None) -> None:
        """Emit ``mount`` with a focus handle. Runs once per listbox.

        Args:
            container: urwid container holding the listbox, used by the
                focus handle
        """
        if self._mounted:
            return
        self._mounted = True
        logger.debug(f"Mounted listbox {self.label!r}")
        urwid.emit_signal(self, 'mount', FocusHandle(self, container))

    def set_options(self, descriptors: Iterable[OptionDescriptor]) -> None:
        """Replace the options shown by the listbox.

        Options at the front of the new sequence that match current options,
        in the same relative order, stay mounted. The rest of the current
        options unmount and the remaining descriptors mount as new options,
        so mount order keeps matching display order. When no option is kept
        the cursor goes back to the first option.

        Args:
            descriptors: Options to show, in display order
        """
        descriptors = list(descriptors)
        current = list(self.body)

        kept: List[ListboxOption] = []
        start = 0
        for descriptor in descriptors:
            match = next(
                (i for i in range(start, len(current)) if current[i].descriptor == descriptor),
                None
            )
            if match is None:
                break
            kept.append(current[match])
            start = match + 1
        fresh = descriptors[len(kept):]
        removed = [node for node in current if node not in kept]

        if not fresh and not removed:
            return

        # Mount the new options first so a failure leaves the old set intact
        with contextlib.ExitStack() as stack:
            # Runs last on failure: a new option may have taken over the selection
            stack.callback(setattr, self.registry, 'selected', self.registry.selected)
            added = []
            for descriptor in fresh:
                node = ListboxOption(descriptor).mount(self.registry)
                stack.callback(node.unmount)
                added.append(node)
            stack.pop_all()

        for node in removed:
            node.unmount()
        if not kept:
            self.selected_index = 0
        logger.debug(
            f"Listbox {self.label!r} options now {self.registry.ids()!r} "
            f"({len(removed)} removed, {len(added)} added)"
        )
        self.body = urwid.SimpleFocusListWalker(kept + added)
        self._invalidate()

    def destroy(self) -> None:
        """Unmount every option."""
        for node in list(self.body):
            node.unmount()
        self.body = urwid.SimpleFocusListWalker([])
        self._invalidate()

    def __enter__(self) -> 'Listbox':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def reconcile(self) -> None:
        """Bring registry, cursor and controlled value in line.

        Runs before every render; calling it again without an intervening
        change emits nothing.
        """
        registry = self.registry

        # A value set before any option became active is adopted as is
        if not registry.active and self.value:
            registry.active = self.value.get()
            self._emit_change(registry.active)

        # A value naming another registered option selects that option
        value = self.value.get()
        current = self._selected_record()
        if value and (current is None or current.id != value):
            index = registry.find(value)
            if index is not None:
                self.selected_index = index
                self.update_selection()

        # The selected option was unmounted
        if registry.selected is not None and not registry.contains(registry.selected):
            self._clamp_cursor()
            self.update_selection()

        if len(registry) and not self.value:
            self.update_selection()

        self._follow_selection()

    def update_selection(self) -> None:
        """Select the option at the cursor and publish it.

        ``change`` is emitted only when the active id actually changes.
        """
        registry = self.registry
        previous = registry.active
        if not len(registry) and registry.selected is not None:
            registry.clear_selection()
            self.value.clear()
        elif 0 <= self.selected_index < len(registry):
            record = registry.select(self.selected_index)
            self.value.set(record.id)
        if registry.active and registry.active != previous:
            self._emit_change(registry.active)
        self._invalidate()

    def handle_key(self, key: Union[Key, str]) -> bool:
        """Move the cursor for a logical navigation key.

        Args:
            key: Logical key name (ArrowUp, ArrowDown, Home, End)

        Returns:
            True if the key is a navigation key, False if it was ignored
        """
        try:
            key = Key(key)
        except ValueError:
            return False

        self._clamp_cursor()
        count = len(self.registry)
        if key is Key.ARROW_DOWN:
            if self.selected_index < count:
                self.selected_index += 1
                if self.selected_index >= count:
                    self.selected_index = max(count - 1, 0)
                self.update_selection()
        elif key is Key.ARROW_UP:
            if self.selected_index > 0:
                self.selected_index -= 1
                self.update_selection()
        elif key is Key.HOME:
            self.selected_index = 0
            self.update_selection()
        elif key is Key.END:
            self.selected_index = max(count - 1, 0)
            self.update_selection()
        self._follow_selection()
        return True

    def keypress(self, size, key: str) -> Optional[str]:
        """Handle navigation keys, returning any other key unhandled.

        Args:
            size: Size tuple (maxcol, maxrow)
            key: urwid key name

        Returns:
            Unhandled key or None
        """
        self.mount()
        logical = KEY_BINDINGS.get(key)
        if logical is None or not self.handle_key(logical):
            return key
        return None

    def render(self, size, focus=False):
        self.mount()
        self.reconcile()
        # Options read their selected state from the registry
        self._invalidate()
        return super().render(size, focus)

    def _selected_record(self) -> Optional[OptionRecord]:
        registry = self.registry
        if registry.selected is None:
            return None
        index = registry.index_of(registry.selected)
        return None if index is None else registry[index]

    def _clamp_cursor(self) -> None:
        self.selected_index = max(min(self.selected_index, len(self.registry) - 1), 0)

    def _follow_selection(self) -> None:
        """Align the cursor and the list focus with the selected option."""
        registry = self.registry
        if registry.selected is None:
            return
        index = registry.index_of(registry.selected)
        if index is not None:
            self.selected_index = index
        for position, node in enumerate(self.body):
            if node.mounted and registry.is_selected(node.handle):
                if self.focus_position != position:
                    self.focus_position = position
                return

    def _emit_change(self, active: str) -> None:
        logger.debug(f"Listbox {self.label!r} active option is now {active!r}")
        urwid.emit_signal(self, 'change', active)
