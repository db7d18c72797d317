from __future__ import annotations

import logging
from collections import OrderedDict
from itertools import islice
from threading import RLock
from typing import Any, Callable, Dict, Hashable, Optional

from bounded_cache.domain.constraints import MAX_KEYS, PURGE_FRACTION
from bounded_cache.domain.validation import validate_max_keys, validate_purge_fraction

logger = logging.getLogger(__name__)


class BoundedCache:
    """
    In-memory cache with a soft cap on the number of keys.

    Once the store holds `max_keys` entries, the next write first drops the
    oldest `1 / purge_fraction` of them (by insertion order) and then inserts.
    Reads never touch the lock or the ordering, so this is a size-threshold
    purge rather than an LRU.

    `read` is lock-free and may observe a store that another thread is in the
    middle of mutating. `fetch` is not atomic: two threads missing on the same
    key can both run `compute` and both write.
    """

    def __init__(
        self,
        max_keys: Optional[int] = None,
        purge_fraction: Optional[int] = None,
    ):
        self.max_keys = validate_max_keys(MAX_KEYS if max_keys is None else max_keys)
        self.purge_fraction = validate_purge_fraction(
            PURGE_FRACTION if purge_fraction is None else purge_fraction
        )

        self.store: OrderedDict[Hashable, Any] = OrderedDict()
        self.purges = 0
        self.evictions = 0
        # Reentrant so callers already holding the lock can still call prune().
        self.lock = RLock()

    def fetch(
        self, key: Hashable, compute: Optional[Callable[[], Any]] = None
    ) -> Optional[Any]:
        value = self.read(key)
        if value is None and compute is not None:
            value = compute()
            self.write(key, value)
        return value

    def read(self, key: Hashable) -> Optional[Any]:
        return self.store.get(key)

    def write(self, key: Hashable, value: Any) -> None:
        # Unhashable keys must fail before the purge touches the store.
        hash(key)
        with self.lock:
            evicted = self._prune(self.purge_fraction)
            self.store[key] = value
            self.store.move_to_end(key)
        self._log_purge(evicted)

    def clear(self) -> None:
        """Remove every entry and reset the purge counters."""
        with self.lock:
            self.store.clear()
            self.purges = 0
            self.evictions = 0

    def prune(self, target_fraction: int) -> None:
        """Remove a fraction of the keys, ignoring when they were last read."""
        validate_purge_fraction(target_fraction)
        with self.lock:
            evicted = self._prune(target_fraction)
        self._log_purge(evicted)

    def _prune(self, target_fraction: int) -> int:
        """Evict the oldest keys; caller must hold the lock."""
        store_size = len(self.store)
        if store_size < self.max_keys:
            return 0

        keys_to_delete = list(islice(self.store, store_size // target_fraction))
        for key in keys_to_delete:
            del self.store[key]

        if keys_to_delete:
            self.purges += 1
            self.evictions += len(keys_to_delete)
        return len(keys_to_delete)

    def _log_purge(self, evicted: int) -> None:
        if evicted:
            logger.debug("Purged %d keys (max_keys=%d)", evicted, self.max_keys)

    def stats(self) -> Dict[str, Any]:
        with self.lock:
            return {
                "size": len(self.store),
                "max_keys": self.max_keys,
                "purge_fraction": self.purge_fraction,
                "purges": self.purges,
                "evictions": self.evictions,
            }

    def __len__(self) -> int:
        return len(self.store)

    def __contains__(self, key: Hashable) -> bool:
        return key in self.store
