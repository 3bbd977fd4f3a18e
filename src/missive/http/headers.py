"""Immutable, case-insensitive, case-preserving HTTP headers.

Implements ``Mapping[str, tuple[str, ...]]`` keyed by the original-case
header names. Lookup goes through a lowercase index, so ``"Content-Type"``,
``"content-type"`` and ``"CONTENT-TYPE"`` all name the same header.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from missive.errors import InvalidHeaderName
from missive.http.validation import assert_valid_name, normalize_value


def _identity(key: object) -> str:
    """Lowercased lookup key for *key*, which must be a string."""
    if not isinstance(key, str):
        msg = f"Header name must be a string, got {key!r}"
        raise InvalidHeaderName(msg)
    return key.lower()


class HeaderMap(Mapping[str, tuple[str, ...]]):
    """Immutable, case-insensitive multi-value headers.

    Two coupled dicts are kept in lockstep:

    - ``_values``: original-case name → tuple of values (insertion order
      is emission order)
    - ``_names``: lowercased name → the one original-case name on record

    ``set``, ``add`` and ``remove`` return a new ``HeaderMap`` with fresh
    dicts; the receiver is never touched.
    """

    __slots__ = ("_names", "_values")

    def __init__(self, headers: Mapping[str, Any] | Iterable[tuple[str, Any]] = ()) -> None:
        items = headers.items() if isinstance(headers, Mapping) else headers
        values: dict[str, tuple[str, ...]] = {}
        names: dict[str, str] = {}
        for name, value in items:
            assert_valid_name(name)
            normalized = tuple(normalize_value(value))
            key = name.lower()
            if key in names:
                # Same identity under another spelling: last write wins
                del values[names[key]]
            names[key] = name
            values[name] = normalized
        object.__setattr__(self, "_values", values)
        object.__setattr__(self, "_names", names)

    @classmethod
    def _derive(cls, values: dict[str, tuple[str, ...]], names: dict[str, str]) -> HeaderMap:
        """Wrap already-validated dicts without re-validating them."""
        new = cls.__new__(cls)
        object.__setattr__(new, "_values", values)
        object.__setattr__(new, "_names", names)
        return new

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    # -- Mapping protocol --

    def __getitem__(self, key: str) -> tuple[str, ...]:
        name = self.original_name(key)
        if name is None:
            raise KeyError(key)
        return self._values[name]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return key.lower() in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {list(v)!r}" for k, v in self._values.items())
        return f"HeaderMap({{{items}}})"

    # -- Lookup --

    def original_name(self, key: str) -> str | None:
        """Return the casing on record for *key*, or ``None`` if absent."""
        return self._names.get(_identity(key))

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, or ``[]`` if missing."""
        name = self.original_name(key)
        if name is None:
            return []
        return list(self._values[name])

    def to_dict(self) -> dict[str, list[str]]:
        """Copy out as ``{original-case name: [values]}``."""
        return {name: list(values) for name, values in self._values.items()}

    # -- Derivation --

    def set(self, name: str, value: Any) -> HeaderMap:
        """Return a new map with *name* replaced by *value*.

        Any header of the same identity is dropped first, whatever its
        casing; the new entry is recorded under *name* as given.
        """
        assert_valid_name(name)
        normalized = tuple(normalize_value(value))
        values = dict(self._values)
        names = dict(self._names)
        key = name.lower()
        if key in names:
            del values[names[key]]
        names[key] = name
        values[name] = normalized
        return self._derive(values, names)

    def add(self, name: str, value: Any) -> HeaderMap:
        """Return a new map with *value* appended to *name*'s values.

        Existing values under the same identity are kept; the recorded
        casing becomes *name*. Behaves like ``set`` when *name* is absent.
        """
        assert_valid_name(name)
        normalized = tuple(normalize_value(value))
        values = dict(self._values)
        names = dict(self._names)
        key = name.lower()
        existing: tuple[str, ...] = ()
        if key in names:
            existing = values.pop(names[key])
        names[key] = name
        values[name] = (*existing, *normalized)
        return self._derive(values, names)

    def remove(self, name: str) -> HeaderMap:
        """Return a map without *name*, or ``self`` if it is absent."""
        key = _identity(name)
        if key not in self._names:
            return self
        values = dict(self._values)
        names = dict(self._names)
        del values[names.pop(key)]
        return self._derive(values, names)
