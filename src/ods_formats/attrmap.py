from typing import Dict, Iterable, Iterator, Optional, Tuple

__all__ = ["AttrMap", "AttrMapHolder"]


class AttrMap:
    """
    String-keyed attribute store for format parts and value formats.

    The backing dictionary is only created on the first write, so an
    unused store costs nothing. A store that was never written to and one
    whose attributes were all removed behave identically.
    """

    __slots__ = ("_map",)

    def __init__(self, attrs: Optional[Iterable[Tuple[str, str]]] = None) -> None:
        self._map: Optional[Dict[str, str]] = None
        if attrs is not None:
            self.add_all(attrs)

    def is_empty(self) -> bool:
        """bool: ``True`` if no attributes are set."""
        return not self._map

    def add_all(self, attrs: Iterable[Tuple[str, str]]) -> None:
        """Set all attributes from a sequence of ``(name, value)`` pairs."""
        for name, value in attrs:
            self.set_attr(name, value)

    def set_attr(self, name: str, value: str) -> None:
        if self._map is None:
            self._map = {}
        self._map[name] = str(value)

    def clear_attr(self, name: str) -> Optional[str]:
        """Remove an attribute and return its previous value, if any."""
        if self._map is None:
            return None
        return self._map.pop(name, None)

    def attr(self, name: str) -> Optional[str]:
        if self._map is None:
            return None
        return self._map.get(name)

    def attr_def(self, name: str, default: str) -> str:
        """Return an attribute or ``default`` if it is not set."""
        value = self.attr(name)
        return default if value is None else value

    def items(self) -> Iterator[Tuple[str, str]]:
        if self._map is None:
            return iter(())
        return iter(self._map.items())

    def copy(self) -> "AttrMap":
        return AttrMap(self.items())

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return self.items()

    def __len__(self) -> int:
        return 0 if self._map is None else len(self._map)

    def __contains__(self, name: str) -> bool:
        return self._map is not None and name in self._map

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttrMap):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    def __repr__(self) -> str:
        return f"AttrMap({dict(self.items())!r})"


class AttrMapHolder:
    """Mixin for objects that carry an :py:class:`AttrMap` in ``attrmap``."""

    attrmap: AttrMap

    def attr(self, name: str) -> Optional[str]:
        return self.attrmap.attr(name)

    def attr_def(self, name: str, default: str) -> str:
        return self.attrmap.attr_def(name, default)

    def set_attr(self, name: str, value: str) -> None:
        self.attrmap.set_attr(name, value)

    def clear_attr(self, name: str) -> Optional[str]:
        return self.attrmap.clear_attr(name)

    def add_all(self, attrs: Iterable[Tuple[str, str]]) -> None:
        self.attrmap.add_all(attrs)

    def attrs(self) -> Iterator[Tuple[str, str]]:
        return self.attrmap.items()
