from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

from .ports import CacheStorePort

logger = logging.getLogger(__name__)


def _identity(item: Any) -> Hashable:
    return item


@dataclass(frozen=True)
class MemoizingService:
    """Memoize `compute(item)` through a cache store, keyed by `key_func(item)`."""

    store: CacheStorePort
    compute: Callable[[Any], Any]
    key_func: Optional[Callable[[Any], Hashable]] = None

    def get(self, item: Any) -> Any:
        key = (self.key_func or _identity)(item)
        return self.store.fetch(key, lambda: self._compute(key, item))

    def clear(self) -> None:
        self.store.clear()

    def _compute(self, key: Hashable, item: Any) -> Any:
        logger.debug("Cache miss for key %r, computing value", key)
        return self.compute(item)
