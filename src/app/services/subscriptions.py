"""
Listener registry for derived values (waitlist counts, active invitations).

A registry instance is owned by the application, one per process. Every
delivery carries a version; a listener never sees a version lower than one it
has already received.
"""

import itertools
import logging
import threading
from typing import Any, Callable, Dict, Hashable, Optional

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class Subscription:
    """Handle returned by subscribe; remove() may be called any number of times"""

    def __init__(self, registry: "SubscriptionRegistry", key: Hashable, listener_id: int):
        self._registry = registry
        self._key = key
        self._listener_id = listener_id
        self._removed = False

    @property
    def active(self) -> bool:
        return not self._removed

    def remove(self) -> None:
        if self._removed:
            return
        self._registry._unsubscribe(self._key, self._listener_id)
        self._removed = True


class _Entry:
    def __init__(self, callback: Listener):
        self.callback = callback
        self.last_version = -1
        # Held across the version check and the callback
        self.lock = threading.RLock()


class SubscriptionRegistry:
    def __init__(self):
        self._lock = threading.Lock()
        self._listeners: Dict[Hashable, Dict[int, _Entry]] = {}
        self._versions: Dict[Hashable, int] = {}
        self._ids = itertools.count(1)

    def subscribe(
        self,
        key: Hashable,
        callback: Listener,
        initial_value: Any,
        version: Optional[int] = None,
    ) -> Subscription:
        """Register a listener and hand it the current value straight away"""
        with self._lock:
            listener_id = next(self._ids)
            entry = _Entry(callback)
            self._listeners.setdefault(key, {})[listener_id] = entry
            version = self._stamp(key, version)
        self._deliver(key, entry, initial_value, version)
        return Subscription(self, key, listener_id)

    def publish(self, key: Hashable, value: Any, version: Optional[int] = None) -> int:
        """Push a new value to every listener of key; returns how many received it"""
        with self._lock:
            version = self._stamp(key, version)
            entries = list(self._listeners.get(key, {}).values())
        delivered = 0
        for entry in entries:
            if self._deliver(key, entry, value, version):
                delivered += 1
        return delivered

    def listener_count(self, key: Hashable) -> int:
        with self._lock:
            return len(self._listeners.get(key, {}))

    def _stamp(self, key: Hashable, version: Optional[int]) -> int:
        current = self._versions.get(key, 0)
        if version is None:
            version = current + 1
        self._versions[key] = max(current, version)
        return version

    def _deliver(self, key: Hashable, entry: _Entry, value: Any, version: int) -> bool:
        with entry.lock:
            if version < entry.last_version:
                return False
            entry.last_version = version
            try:
                entry.callback(value)
            except Exception:
                logger.exception(f"Listener for {key!r} raised")
            return True

    def _unsubscribe(self, key: Hashable, listener_id: int) -> None:
        with self._lock:
            listeners = self._listeners.get(key)
            if not listeners:
                return
            listeners.pop(listener_id, None)
            if not listeners:
                del self._listeners[key]


def waitlist_count_key(event_id) -> tuple:
    return ("waitlist_count", str(event_id))


def active_invitations_key(uid: str) -> tuple:
    return ("active_invitations", uid)
