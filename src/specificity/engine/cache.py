"""Thread-safe read-through cache from selector text to specificity."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict

from specificity.config import DEFAULT_CONFIG, EngineConfig
from specificity.engine.calculator import max_specificity
from specificity.model.selector import ComplexSelector
from specificity.model.vector import SpecificityVector
from specificity.parser import parse_selector_list

logger = logging.getLogger(__name__)

_Key = tuple[str, "ComplexSelector | None"]


class SpecificityCache:
    """Read-through mapping of selector text to its heaviest alternative's weight.

    Specificity is a pure function of the text (and nesting context), so
    entries never need invalidation.  Lookups are keyed on the raw text and
    on its normalized form, so ``"a>b"`` and ``"a > b"`` share one entry.
    Parse errors propagate and are not cached.

    All public methods are protected by a threading lock so one cache can
    be shared across threads.
    """

    def __init__(self, config: EngineConfig | None = None, max_entries: int | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        if max_entries is not None and max_entries < 0:
            raise ValueError(f"max_entries must be non-negative, got {max_entries}")
        self._max_entries = self._config.cache_size if max_entries is None else max_entries
        self._lock = threading.Lock()
        self._entries: OrderedDict[_Key, SpecificityVector] = OrderedDict()
        self.hits = 0
        self.misses = 0

    # --- lookup ---------------------------------------------------------------

    def get(self, text: str, context: ComplexSelector | None = None) -> SpecificityVector:
        """Return the specificity of *text*, computing and storing it on a miss."""
        key: _Key = (text, context)
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self.hits += 1
                self._entries.move_to_end(key)
                return cached

        # Parse outside the lock; concurrent misses on one key compute the same value.
        selectors = parse_selector_list(text, context, config=self._config)
        normalized: _Key = (str(selectors), context)

        with self._lock:
            cached = self._entries.get(normalized)
            if cached is not None:
                self.hits += 1
                self._store(key, cached)
                return cached
            self.misses += 1
            vector = max_specificity(selectors)
            logger.debug("Specificity cache miss for %r -> %s", normalized[0], vector)
            self._store(normalized, vector)
            self._store(key, vector)
            return vector

    def _store(self, key: _Key, vector: SpecificityVector) -> None:
        self._entries[key] = vector
        self._entries.move_to_end(key)
        if self._max_entries:
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    # --- housekeeping ---------------------------------------------------------

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        """``text in cache`` checks the context-free entry for *text*.

        Pass a ``(text, context)`` tuple to check an entry stored with a
        nesting context.
        """
        if not isinstance(key, tuple):
            key = (key, None)
        with self._lock:
            return key in self._entries

    def __repr__(self) -> str:
        with self._lock:
            return f"SpecificityCache(entries={len(self._entries)}, hits={self.hits}, misses={self.misses})"
