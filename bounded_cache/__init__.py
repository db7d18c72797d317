from bounded_cache.application.ports import CacheStorePort
from bounded_cache.application.service import MemoizingService
from bounded_cache.infrastructure.memory_store import BoundedCache
from bounded_cache.main import create_cache

__all__ = ["BoundedCache", "CacheStorePort", "MemoizingService", "create_cache"]
