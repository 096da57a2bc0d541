import logging

log = logging.getLogger(__name__)


class MemoLocation:
    """
    Wraps a location and remembers the children it has looked up with
    get_nth. Locations are immutable so a cached result never goes stale.
    """

    def __init__(self, location):
        self.location = location
        self._cache = {}

    def __repr__(self):
        return '<MemoLocation({!r}) cached={}>'.format(
            self.location, sorted(self._cache),
        )

    def get_nth(self, n):
        try:
            loc = self._cache[n]
        except KeyError:
            log.debug('get_nth(%d): miss', n)
            loc = self._cache[n] = self.location.get_nth(n)
        else:
            log.debug('get_nth(%d): hit', n)
        return loc

    def clear(self):
        self._cache.clear()
