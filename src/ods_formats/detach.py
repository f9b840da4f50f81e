from typing import Any, Generic, Hashable, TypeVar

from ods_formats.exceptions import DetachedError

__all__ = ["Detach", "Detached"]

T = TypeVar("T")


class Detached(Generic[T]):
    """
    Data moved out of a :py:class:`Detach` together with the key needed to
    put it back. Attribute access is passed through to the data.
    """

    __slots__ = ("_key", "_value")

    def __init__(self, key: Hashable, value: T) -> None:
        self._key = key
        self._value = value

    @property
    def key(self) -> Hashable:
        return self._key

    @property
    def value(self) -> T:
        return self._value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._value, name)


class Detach(Generic[T]):
    """A slot holding a value that can be detached and reattached later."""

    __slots__ = ("_value", "_present")

    def __init__(self, value: T) -> None:
        self._value = value
        self._present = True

    def is_detached(self) -> bool:
        return not self._present

    def detach(self, key: Hashable) -> Detached[T]:
        """
        Move the data out of the slot, tagged with ``key``.

        Raises
        ------
        DetachedError:
            If the data is already detached.
        """
        value = self._checked_value()
        self._value = None
        self._present = False
        return Detached(key, value)

    def attach(self, detached: Detached[T]) -> None:
        """Put detached data back into the slot."""
        self._value = detached.value
        self._present = True

    @property
    def value(self) -> T:
        """The data in the slot. Raises :py:class:`DetachedError` if detached."""
        return self._checked_value()

    def take(self) -> T:
        """Empty the slot and return its data."""
        value = self._checked_value()
        self._value = None
        self._present = False
        return value

    def _checked_value(self) -> T:
        if not self._present:
            raise DetachedError("already detached")
        return self._value
