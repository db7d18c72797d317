from __future__ import annotations

from typing import Any, Callable, Hashable, Optional, Protocol


class CacheStorePort(Protocol):
    def fetch(
        self, key: Hashable, compute: Optional[Callable[[], Any]] = None
    ) -> Optional[Any]: ...

    def read(self, key: Hashable) -> Optional[Any]: ...

    def write(self, key: Hashable, value: Any) -> None: ...

    def clear(self) -> None: ...
