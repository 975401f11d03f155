"""Shared test fixtures for aria-listbox."""

import pytest

from aria_listbox.listbox import Listbox
from aria_listbox.option import OptionDescriptor
from aria_listbox.registry import OptionRegistry
from aria_listbox.value import ValueCell


def descriptors(ids):
    return [OptionDescriptor(option_id, option_id.title()) for option_id in ids]


@pytest.fixture
def registry():
    return OptionRegistry()


@pytest.fixture
def changes():
    """Active ids reported through the listbox ``change`` signal."""
    return []


@pytest.fixture
def make_listbox(changes):
    """Factory for a listbox whose changes are recorded in ``changes``."""

    def factory(ids=(), value='', **kwargs):
        return Listbox(
            'Test',
            ValueCell(value),
            descriptors(ids),
            on_change=changes.append,
            **kwargs
        )

    return factory
