"""Change feeds — push a fresh snapshot of a keyed collection to its subscribers.

A feed is the in-process stand-in for a realtime document subscription: a
subscriber receives the current snapshot as soon as it subscribes and one new
snapshot after every published change. Subscriptions have an explicit
lifecycle and are context managers, so leaving a ``with`` block always
detaches the listener.
"""

from collections import defaultdict

import structlog

logger = structlog.get_logger(__name__)


class Subscription:
    """Handle returned by ``ChangeFeed.subscribe``."""

    def __init__(self, feed, key, listener):
        self._feed = feed
        self._listener = listener
        self.key = key
        self.active = True

    def unsubscribe(self):
        if not self.active:
            return
        self._feed._detach(self.key, self._listener)
        self.active = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.unsubscribe()
        return False


class ChangeFeed:
    """Fan out snapshots produced by ``loader(key)`` to the listeners of ``key``."""

    def __init__(self, name, loader):
        self.name = name
        self._loader = loader
        self._listeners = defaultdict(list)

    def subscribe(self, key, listener):
        key = str(key)
        self._listeners[key].append(listener)
        subscription = Subscription(self, key, listener)
        try:
            listener(self._loader(key))
        except Exception:
            subscription.unsubscribe()
            raise
        logger.debug("Subscribed to change feed", feed=self.name, key=key)
        return subscription

    def publish(self, key):
        key = str(key)
        listeners = list(self._listeners.get(key, []))
        if not listeners:
            return
        snapshot = self._loader(key)
        for listener in listeners:
            listener(snapshot)

    def subscriber_count(self, key):
        return len(self._listeners.get(str(key), []))

    def _detach(self, key, listener):
        listeners = self._listeners.get(key, [])
        if listener in listeners:
            listeners.remove(listener)
        if not listeners:
            self._listeners.pop(key, None)
        logger.debug("Unsubscribed from change feed", feed=self.name, key=key)
