"""
Per-host listener storage.
Maps event name -> tuple of ListenerEntry. Sequences are rebuilt on every
change, so a tuple handed out by `snapshot` never changes under a caller.
"""
import logging
from typing import Any, Callable, Dict, Optional, Tuple

from Observable.Model.ListenerEntry import ListenerEntry

logger = logging.getLogger(__name__)

INTERNAL_PREFIX = "_"


class ListenerRegistry:
    def __init__(self):
        self._listeners: Dict[str, Tuple[ListenerEntry, ...]] = {}

    def add(self, event: str, callback: Callable[..., Any], context: Any = None) -> ListenerEntry:
        entry = ListenerEntry(callback, context)
        self._listeners[event] = self._listeners.get(event, ()) + (entry,)
        logger.debug("Listener added for '%s' (%d total)", event, len(self._listeners[event]))
        return entry

    def remove(self, event: str, callback: Optional[Callable[..., Any]] = None, context: Any = None,
               legacy: bool = False) -> None:
        """Drop the entries of `event` matching `callback`/`context`."""
        entries = self._listeners.get(event)
        if entries is None:
            return
        if legacy:
            kept = tuple(e for e in entries if self._legacy_keep(e, callback, context))
        else:
            kept = tuple(e for e in entries if not self._matches(e, callback, context))
        self._listeners[event] = kept
        removed = len(entries) - len(kept)
        logger.debug("Removed %d listener(s) for '%s' (%d left)", removed, event, len(kept))

    @staticmethod
    def _matches(entry: ListenerEntry, callback, context) -> bool:
        if callback is None or not entry.wraps(callback):
            return False
        return context is None or entry.context is context

    @staticmethod
    def _legacy_keep(entry: ListenerEntry, callback, context) -> bool:
        # keep only when both callback and context are given and both differ
        return bool(callback) and callback is not entry.callback \
            and bool(context) and context is not entry.context

    def snapshot(self, event: str) -> Tuple[ListenerEntry, ...]:
        return self._listeners.get(event, ())

    def count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))

    def has(self, event: Optional[str] = None) -> bool:
        if event:
            return self.count(event) > 0
        return any(entries for name, entries in self._listeners.items()
                   if not name.startswith(INTERNAL_PREFIX))
