"""Capability interfaces and registries for benchmark variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, List, Optional, Protocol, Sequence, TypeVar

from ..graph import Graph

T = TypeVar("T")


class UnknownVariantError(ValueError):
    """Raised when a preprocessing or search identifier is not registered."""


@dataclass(frozen=True)
class SearchOutcome:
    """What a search variant reports back.

    Attributes:
        found: Whether a path between the endpoints was found.
        path: Node sequence from source to destination, or None.
        explored_nodes: Number of nodes expanded during the search.
        timed_out: True when the search gave up because of its deadline.
    """

    found: bool
    path: Optional[List[Hashable]]
    explored_nodes: int
    timed_out: bool = False


class SearchAlgorithm(Protocol):
    def __call__(
        self,
        graph: Graph,
        source: Hashable,
        destination: Hashable,
        deadline: Optional[float] = None,
    ) -> SearchOutcome: ...


class PreprocessingAlgorithm(Protocol):
    def __call__(self, graph: Graph, endpoints: Sequence[Hashable]) -> Optional[Graph]: ...


class Registry(Generic[T]):
    """Name → implementation mapping for one kind of variant.

    Args:
        kind: Human-readable kind used in error messages (e.g. "search").
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._entries: Dict[str, T] = {}

    def register(self, name: str) -> Callable[[T], T]:
        """Decorator registering an implementation under `name`."""

        def decorator(fn: T) -> T:
            if name in self._entries:
                raise ValueError(f"{self.kind} variant '{name}' is already registered")
            self._entries[name] = fn
            return fn

        return decorator

    def get(self, name: str) -> T:
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownVariantError(
                f"{self.kind} variant '{name}' is not implemented "
                f"(available: {', '.join(self.names())})"
            ) from None

    def names(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries
