from __future__ import annotations

import logging

from bounded_cache.infrastructure.config import Settings, load_settings
from bounded_cache.infrastructure.logging import configure_logging
from bounded_cache.infrastructure.memory_store import BoundedCache

logger = logging.getLogger(__name__)


def create_cache(settings: Settings | None = None) -> BoundedCache:
    """
    Build the cache instance an owning context shares with its collaborators.

    Call once and pass the returned object around; there is no module-level
    instance.
    """
    settings = settings or load_settings()
    cache = BoundedCache(
        max_keys=settings.max_keys,
        purge_fraction=settings.purge_fraction,
    )
    logger.info(
        "Created bounded cache (max_keys=%d, purge_fraction=%d)",
        settings.max_keys,
        settings.purge_fraction,
    )
    return cache


def setup(settings: Settings | None = None) -> BoundedCache:
    settings = settings or load_settings()
    configure_logging(settings.log_level, settings.log_format)
    return create_cache(settings)
