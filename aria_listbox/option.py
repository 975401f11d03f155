"""Option widget: one selectable entry of a listbox."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import urwid

from aria_listbox.registry import OptionHandle, OptionRegistry

logger = logging.getLogger(__name__)

OPTION_ATTR = 'option'
SELECTED_OPTION_ATTR = 'option selected'


@dataclass(frozen=True)
class OptionDescriptor:
    """Owner-side description of an option: its id and displayed text."""

    id: str
    content: str = ''

    @property
    def label(self) -> str:
        return self.content or self.id


class ListboxOption(urwid.WidgetWrap):
    """Entry of a :class:`~aria_listbox.listbox.Listbox`.

    The option registers with the listbox's registry when mounted and
    unregisters when unmounted. Its selected state is read from the registry
    on every render, so render caching is turned off for this widget.
    """

    no_cache = ["render"]

    def __init__(self, descriptor: OptionDescriptor) -> None:
        """Create an unmounted option.

        Args:
            descriptor: Id and text of the option
        """
        self.descriptor = descriptor
        self.registry: Optional[OptionRegistry] = None
        self.handle: Optional[OptionHandle] = None
        self._attr = urwid.AttrMap(urwid.Text(descriptor.label), OPTION_ATTR)
        super().__init__(self._attr)

    @property
    def id(self) -> str:
        return self.descriptor.id

    @property
    def mounted(self) -> bool:
        return self.handle is not None

    def mount(self, registry: OptionRegistry) -> 'ListboxOption':
        """Register this option with ``registry``.

        Args:
            registry: Registry of the listbox the option belongs to

        Returns:
            The option itself

        Raises:
            RuntimeError: If the option is already mounted
        """
        if self.mounted:
            raise RuntimeError(f"Option {self.id!r} is already mounted")
        self.registry = registry
        self.handle = registry.register(self.id)
        return self

    def unmount(self) -> None:
        """Unregister from the registry. Only the first call has an effect."""
        if not self.mounted:
            return
        logger.debug(f"Dropping option {self.id!r}")
        self.registry.unregister(self.handle)
        self.handle = None
        self.registry = None

    @property
    def selected(self) -> bool:
        if not self.mounted:
            return False
        return self.registry.is_selected(self.handle)

    @property
    def attributes(self) -> Dict[str, str]:
        """ARIA attributes of the option."""
        return {
            'role': 'option',
            'id': self.id,
            'aria-selected': 'true' if self.selected else 'false',
        }

    def render(self, size, focus=False):
        attr = SELECTED_OPTION_ATTR if self.selected else OPTION_ATTR
        if self._attr.get_attr_map() != {None: attr}:
            self._attr.set_attr_map({None: attr})
        return self._attr.render(size, focus)

    def __repr__(self) -> str:
        state = 'mounted' if self.mounted else 'unmounted'
        return f"<ListboxOption {self.id!r} {state}>"
