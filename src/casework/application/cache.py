"""Memoization of generated cabinets.

Entries are keyed by the complete request (archetype, width, height,
material, configuration) and always hold a whole CabinetOutput. There is no
partial update: a changed input is a different key, and invalidation drops
whole entries. A hit returns the stored object itself, so anything handed
further out (see ``RenderDrawingCommand``) is copied first.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Callable

from .dtos import CabinetOutput, CabinetRequest

logger = logging.getLogger(__name__)


class CabinetCache:
    """Thread-safe LRU cache of CabinetOutput by request key.

    Attributes:
        maxsize: Maximum number of entries kept.
        hits: Number of lookups served from the cache.
        misses: Number of lookups that had to generate.
    """

    def __init__(self, maxsize: int = 128) -> None:
        if maxsize < 1:
            raise ValueError("Cache size must be at least 1")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[tuple, CabinetOutput] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, request: CabinetRequest) -> bool:
        return request.cache_key in self._entries

    def get_or_create(
        self,
        request: CabinetRequest,
        create: Callable[[CabinetRequest], CabinetOutput],
    ) -> CabinetOutput:
        """Return the cached output for a request, generating it on a miss.

        Errors raised by ``create`` propagate and nothing is stored.
        """
        key = request.cache_key
        with self._lock:
            if key in self._entries:
                self.hits += 1
                self._entries.move_to_end(key)
                return self._entries[key]
            self.misses += 1

        output = create(request)

        with self._lock:
            self._entries[key] = output
            self._entries.move_to_end(key)
            while len(self._entries) > self.maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted cabinet cache entry {evicted}")
        return output

    def invalidate(self, request: CabinetRequest) -> bool:
        """Drop the entry for a request. Returns True if one was cached."""
        with self._lock:
            return self._entries.pop(request.cache_key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0
