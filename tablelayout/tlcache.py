import threading

import logging
logger = logging.getLogger(__name__)



class LayoutCache:
    r"""
    Cache of parsed layout descriptions, keyed by the exact layout text.

    Entries are never evicted; they are only discarded all at once by
    :py:meth:`clear()`.  Stored fragment sequences are tuples and can be read
    concurrently without locking.

    The attribute `hit_count` records the number of times a cached value was
    used.
    """

    def __init__(self):
        super().__init__()
        self._entries = {}
        self._lock = threading.Lock()
        self.hit_count = 0

    def lookup(self, layout_text):
        with self._lock:
            return self._lookup(layout_text)

    def insert(self, layout_text, fragments):
        with self._lock:
            self._insert(layout_text, fragments)

    def clear(self):
        r"""
        Discard all cached information.  Typically invoked while debugging to
        make sure that layouts are parsed again on every request.
        """
        with self._lock:
            self._entries.clear()
        logger.debug("Layout cache cleared")

    def get_or_parse(self, layout_text, parse_fn):
        r"""
        Return the cached fragments for `layout_text`, calling
        `parse_fn(layout_text)` and caching its result if the text was not seen
        before.  The lookup, the parse and the insertion happen while holding
        the cache lock, so that identical layouts are never parsed twice
        concurrently.  Exceptions raised by `parse_fn` propagate and nothing is
        cached.
        """
        with self._lock:
            fragments = self._lookup(layout_text)
            if fragments is not None:
                return fragments
            fragments = tuple(parse_fn(layout_text))
            self._insert(layout_text, fragments)
            return fragments

    def __len__(self):
        return len(self._entries)

    def __contains__(self, layout_text):
        return layout_text in self._entries

    # ---

    def _lookup(self, layout_text):
        fragments = self._entries.get(layout_text, None)
        if fragments is not None:
            # record the fact that a cached value is being used
            self.hit_count += 1
            logger.debug("Layout cache hit (%d hits so far)", self.hit_count)
        return fragments

    def _insert(self, layout_text, fragments):
        self._entries[layout_text] = tuple(fragments)
        logger.debug("Cached parsed layout (%d layouts in cache)", len(self._entries))


# process-wide cache, used by layouts that are not given a cache of their own
default_layout_cache = LayoutCache()


def clear_cache():
    default_layout_cache.clear()
