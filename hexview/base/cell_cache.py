"""Fixed-capacity cell record cache with FIFO eviction."""

from typing import Dict, Optional, Any, Iterator

from ..abstractions.types import CacheKey, CellRecord
from ..exceptions import CacheMisconfigurationError
from ..infrastructure.logging import get_logger

logger = get_logger(__name__)


class BoundedCellCache:
    """
    Bounded store of resolved cell records.
    
    Eviction is first-in first-out by insertion order: reading an entry
    never changes when it will be evicted. This is not an LRU cache.
    Records are frozen, so callers can hold on to them after eviction.
    
    Not thread-safe; callers sharing an instance must serialize access.
    """
    
    def __init__(self, capacity: int = 100):
        """
        Initialize cache.
        
        Args:
            capacity: Maximum number of entries, must be positive
            
        Raises:
            CacheMisconfigurationError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise CacheMisconfigurationError(
                f"Cache capacity must be a positive integer, got: {capacity!r}"
            )
        
        self.capacity = capacity
        # dicts keep insertion order, the first key is always the oldest
        self._entries: Dict[CacheKey, CellRecord] = {}
        self._stats = {
            'hits': 0,
            'misses': 0,
            'evictions': 0
        }
    
    def get(self, key: CacheKey) -> Optional[CellRecord]:
        """Return the cached record or None. Does not affect eviction order."""
        record = self._entries.get(key)
        if record is None:
            self._stats['misses'] += 1
        else:
            self._stats['hits'] += 1
        return record
    
    def put(self, key: CacheKey, value: CellRecord) -> None:
        """
        Insert a record.
        
        Overwriting an existing key keeps its original position. Inserting a
        new key into a full cache evicts exactly the oldest key.
        """
        if key in self._entries:
            self._entries[key] = value
            return
        
        if len(self._entries) >= self.capacity:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            self._stats['evictions'] += 1
            logger.debug(f"Evicted cache entry {oldest}")
        
        self._entries[key] = value
    
    def clear(self) -> None:
        """Drop all entries and reset statistics."""
        self._entries.clear()
        for stat in self._stats:
            self._stats[stat] = 0
    
    def keys(self) -> Iterator[CacheKey]:
        """Keys from oldest to newest."""
        return iter(list(self._entries))
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def __contains__(self, key: object) -> bool:
        return key in self._entries
    
    def stats(self) -> Dict[str, Any]:
        """Hit/miss counters and the resulting hit rate (0-100)."""
        lookups = self._stats['hits'] + self._stats['misses']
        return {
            **self._stats,
            'size': len(self._entries),
            'capacity': self.capacity,
            'hit_rate': round(100.0 * self._stats['hits'] / lookups, 2) if lookups else 0.0
        }
