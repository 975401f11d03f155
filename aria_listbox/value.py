"""Mutable string cell holding a listbox's controlled value."""


class ValueCell:
    """String value owned by the caller and shared with a listbox.

    The listbox reads it on every reconcile and writes the active id back
    into it; the owner may overwrite it at any time.
    """

    def __init__(self, initial: str = '') -> None:
        self._value = initial

    def get(self) -> str:
        return self._value

    def set(self, value: str) -> None:
        self._value = value

    def clear(self) -> None:
        self._value = ''

    def __bool__(self) -> bool:
        return bool(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValueCell):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"ValueCell({self._value!r})"
