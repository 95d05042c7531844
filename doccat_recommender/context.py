"""
Per-session model context.

A ModelContext is created for one recommender session. Training stores the
model in it and marks it ready; prediction only reads from it. All access
goes through a re-entrant lock so a context that ends up shared between
threads never exposes a half-updated state.
"""

import threading
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class ContextKey(Generic[T]):
    """Typed key of a value stored in a ModelContext."""
    name: str

    def __str__(self) -> str:
        return self.name


class ModelContext:
    """Keyed store of trained models with a "ready for prediction" flag."""

    def __init__(self):
        self._values: Dict[ContextKey, Any] = {}
        self._ready = False
        self._lock = threading.RLock()

    def put(self, key: ContextKey[T], value: T) -> None:
        """Store a value, replacing any previous value under the same key."""
        with self._lock:
            self._values[key] = value

    def get(self, key: ContextKey[T]) -> Optional[T]:
        """Value stored under the key, or None if there is none."""
        with self._lock:
            return self._values.get(key)

    def mark_as_ready_for_prediction(self) -> None:
        with self._lock:
            self._ready = True

    def is_ready_for_prediction(self) -> bool:
        with self._lock:
            return self._ready

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._values
