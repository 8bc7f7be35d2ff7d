"""Process-lifetime in-memory memo store."""

from __future__ import annotations

import threading
from typing import Callable, Dict, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MemoCache(Generic[K, V]):
    """Populate-on-miss map that never evicts.

    The compute callback runs outside the lock, so two callers missing the
    same key concurrently may both compute. Only the first write is stored and
    both callers get that stored value back.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[K, V] = {}

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: K, value: V) -> V:
        with self._lock:
            return self._entries.setdefault(key, value)

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        with self._lock:
            if key in self._entries:
                return self._entries[key]
        return self.set(key, compute())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
