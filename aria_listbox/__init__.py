"""Accessible single-select listbox widget for urwid."""

from aria_listbox.listbox import FocusHandle, Key, Listbox
from aria_listbox.option import ListboxOption, OptionDescriptor
from aria_listbox.registry import OptionHandle, OptionRecord, OptionRegistry
from aria_listbox.value import ValueCell

__all__ = [
    'FocusHandle',
    'Key',
    'Listbox',
    'ListboxOption',
    'OptionDescriptor',
    'OptionHandle',
    'OptionRecord',
    'OptionRegistry',
    'ValueCell',
]
