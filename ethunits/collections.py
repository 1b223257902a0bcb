"""
Ethunits Collections
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping, Iterable, Iterator, KeysView, ValuesView, ItemsView
from typing import Any, Generic, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_value

# Classes --------------------------------------------------------------------------------------------------------------

K = TypeVar("K")
V = TypeVar("V")


class BiDirectionalMap(Mapping[K, V], Generic[K, V]):
    """
    A read-only bidirectional map with Mapping-compatible API on the forward direction.

    - Forward direction (key -> value) implements the stdlib Mapping protocol:
      __getitem__, __iter__, __len__, keys(), values(), items(), get().
      Membership (x in bimap) applies to KEYS only, like dict.
    - Reverse direction (value -> key) available via get_key(value).
    - Enforces uniqueness of both keys and values (both must be hashable).
    - Contents are fixed at construction, so instances are safe to share as module constants.
    """

    __slots__ = ("_forward_map", "_backward_map")

    def __init__(self, initial: Mapping[K, V] | Iterable[tuple[K, V]] | None = None) -> None:
        forward: dict[K, V] = {}
        backward: dict[V, K] = {}
        iterable = initial.items() if isinstance(initial, Mapping) else (initial or ())
        for key, value in iterable:
            if key in forward:
                raise ValueError(f"Key {fmt_value(key)} already exists (maps to {forward[key]!r})")
            if value in backward:
                raise ValueError(f"Value {fmt_value(value)} already exists (mapped from {backward[value]!r})")
            forward[key] = value
            backward[value] = key
        object.__setattr__(self, "_forward_map", forward)
        object.__setattr__(self, "_backward_map", backward)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    # ----- Mapping required methods -----

    def __getitem__(self, key: K) -> V:
        return self._forward_map[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._forward_map)

    def __len__(self) -> int:
        return len(self._forward_map)

    # ----- Mapping helpers (typed views) -----

    def keys(self) -> KeysView[K]:
        return self._forward_map.keys()

    def values(self) -> ValuesView[V]:
        return self._forward_map.values()

    def items(self) -> ItemsView[K, V]:
        return self._forward_map.items()

    # ----- Bidirectional operations -----

    def get_key(self, value: V) -> K:
        """Lookup key by value."""
        return self._backward_map[value]

    # ----- Equality and representation -----

    def __repr__(self) -> str:
        return f"BiDirectionalMap({self._forward_map!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Mapping):
            return dict(self._forward_map.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._forward_map.items()))
