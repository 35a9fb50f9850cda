"""
Memoizing Fibonacci ("rabbit counter") service.

The cache maps a sequence position ``n >= 0`` to F(n), with F(0) = 0
and F(1) = 1.  ``compute_and_store`` fills it lazily using a tiered
strategy:

1. a cached position is returned as is;
2. positions 0 and 1 are their own value;
3. if both ``n - 1`` and ``n - 2`` are cached, their sum is used;
4. otherwise F(n) is computed iteratively from scratch.

Only position ``n`` is stored; the iterative path neither reads nor
writes the positions between 2 and ``n - 1``, so warm entries are
exploited only when they are exactly adjacent.

Each cache access is atomic, but ``compute_and_store`` as a whole is
not: concurrent calls for the same position may both compute it.  The
value is deterministic so the outcome is the same.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


class NegativePositionError(ValueError):
    """Raised for positions below zero."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Fibonacci position must be non-negative, got {position}")


class FibonacciService:
    """In‑memory cache of Fibonacci values keyed by position."""

    def __init__(self) -> None:
        self._cache: Dict[int, int] = {}
        self._lock = threading.RLock()

    def lookup(self, n: int) -> Optional[int]:
        """Return the cached value at ``n`` or ``None`` if absent."""
        with self._lock:
            return self._cache.get(n)

    def compute_and_store(self, n: int) -> int:
        """Return F(n), caching it."""
        if n < 0:
            raise NegativePositionError(n)

        cached = self.lookup(n)
        if cached is not None:
            logger.debug("Cache hit for position %s", n)
            return cached

        if n < 2:
            value = n
        else:
            with self._lock:
                prev = self._cache.get(n - 1)
                prev2 = self._cache.get(n - 2)
            if prev is not None and prev2 is not None:
                logger.debug("Position %s combined from cached neighbours", n)
                value = prev + prev2
            else:
                logger.debug("Position %s computed iteratively", n)
                value = self._iterate(n)

        with self._lock:
            self._cache[n] = value
        return value

    @staticmethod
    def _iterate(n: int) -> int:
        prev, fib = 0, 1
        for _ in range(2, n + 1):
            prev, fib = fib, fib + prev
        return fib

    def remove(self, n: int) -> bool:
        """Drop the entry at ``n``.  Returns ``False`` if it was absent."""
        with self._lock:
            removed = self._cache.pop(n, None)
        if removed is None:
            return False
        logger.info("Removed Fibonacci position %s", n)
        return True

    def all_entries(self) -> List[int]:
        """Return every cached value in the cache's iteration order."""
        with self._lock:
            return list(self._cache.values())

    def batch_fill(self, positions: Iterable[int]) -> List[int]:
        """Compute and store each position in order.

        A negative position raises ``NegativePositionError``; values
        computed for earlier positions in the batch stay cached.
        """
        results = []
        for n in positions:
            results.append(self.compute_and_store(n))
        logger.info("Filled %s Fibonacci positions", len(results))
        return results

    def clear(self) -> None:
        """Empty the cache."""
        with self._lock:
            self._cache.clear()

    def __contains__(self, n: int) -> bool:
        with self._lock:
            return n in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
