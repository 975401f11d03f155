"""Shared registry of the options mounted in one listbox."""

import itertools
import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionHandle:
    """Opaque identity assigned to an option when it mounts.

    Handles are generation tagged and never reused within a registry, so a
    handle kept after its option is gone compares unequal to every live one.
    """

    generation: int


@dataclass(frozen=True)
class OptionRecord:
    """A mounted option: its id and the handle it was registered with."""

    id: str
    handle: OptionHandle


class OptionRegistry:
    """Ordered collection of mounted options plus the current selection.

    ``options`` keeps mount order, which is also the navigation order.
    ``selected`` is the handle of the selected option (if any) and ``active``
    the id considered current; ``active`` may name an option that has not
    registered yet.
    """

    def __init__(self) -> None:
        self.options: List[OptionRecord] = []
        self.selected: Optional[OptionHandle] = None
        self.active: str = ''
        self._generations = itertools.count(1)

    def register(self, option_id: str) -> OptionHandle:
        """Append a new option and return its handle.

        An option whose id matches a pending ``active`` id becomes selected.

        Args:
            option_id: Id of the mounting option

        Returns:
            The handle identifying this registration
        """
        handle = OptionHandle(next(self._generations))
        self.options.append(OptionRecord(option_id, handle))
        if option_id == self.active:
            self.selected = handle
        logger.debug(f"Registered option {option_id!r} as {handle.generation}")
        return handle

    def unregister(self, handle: OptionHandle) -> None:
        """Remove the option registered with ``handle``.

        The selection is left alone; the listbox repairs it on its next
        reconcile.

        Args:
            handle: Handle returned by :meth:`register`
        """
        for index, record in enumerate(self.options):
            if record.handle == handle:
                del self.options[index]
                logger.debug(f"Unregistered option {record.id!r}")
                return

    def is_selected(self, handle: OptionHandle) -> bool:
        return self.selected == handle

    def contains(self, handle: OptionHandle) -> bool:
        return self.index_of(handle) is not None

    def index_of(self, handle: OptionHandle) -> Optional[int]:
        """Position of ``handle`` in navigation order, or None if unmounted."""
        for index, record in enumerate(self.options):
            if record.handle == handle:
                return index
        return None

    def find(self, option_id: str) -> Optional[int]:
        """Position of the first option with ``option_id``, or None."""
        for index, record in enumerate(self.options):
            if record.id == option_id:
                return index
        return None

    def ids(self) -> List[str]:
        return [record.id for record in self.options]

    def select(self, index: int) -> OptionRecord:
        """Make the option at ``index`` the selected and active one."""
        record = self.options[index]
        self.selected = record.handle
        self.active = record.id
        return record

    def clear_selection(self) -> None:
        self.selected = None
        self.active = ''

    def __len__(self) -> int:
        return len(self.options)

    def __getitem__(self, index: int) -> OptionRecord:
        return self.options[index]

    def __repr__(self) -> str:
        return (
            f"OptionRegistry(options={self.ids()!r}, "
            f"active={self.active!r})"
        )
