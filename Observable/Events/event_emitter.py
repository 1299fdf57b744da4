"""
Observer / EventEmitter capability.
Subclass EventEmitter, or mix it into an existing class with
`EventEmitter.mixin(cls)`, to turn instances into synchronous event sources.
Behaviour lives on the class, each instance owns its own ListenerRegistry.
"""
from typing import Any, Callable, Optional

from Observable.Events.listener_registry import ListenerRegistry
from Observable.Exception.EmitterError import InvalidArgument
from Observable.Interface.IEmitter import IEmitter
from Observable.Utility.settings import legacy_removal_enabled

ADD_LISTENER_EVENT = "_addListener"
REMOVE_LISTENER_EVENT = "_removeListener"


class EventEmitter(IEmitter):
    # None defers to OBSERVABLE_LEGACY_REMOVAL
    legacy_removal: Optional[bool] = None

    def __init__(self):
        self._listeners = ListenerRegistry()

    def _listener_registry(self) -> ListenerRegistry:
        # mixed-in classes never ran our __init__
        registry = getattr(self, "_listeners", None)
        if registry is None:
            registry = ListenerRegistry()
            self._listeners = registry
        return registry

    def add_listener(self, event: str, callback: Callable[..., Any], context: Any = None):
        """Register `callback` for `event`, bound to `context` when given.

        Args:
            event: non-empty event name
            callback: callable invoked as callback(*args), or callback(context, *args)
            context: optional receiver passed as the callback's first argument
        Returns:
            self, for chaining
        """
        _validate(event, callback)
        self._listener_registry().add(event, callback, context)
        self.emit(ADD_LISTENER_EVENT, event)
        return self

    def on(self, event: str, callback: Callable[..., Any], context: Any = None):
        return self.add_listener(event, callback, context)

    def remove_listener(self, event: str, callback: Optional[Callable[..., Any]] = None, context: Any = None):
        """Unregister `callback` (optionally only for `context`) from `event`.

        Unknown events or callbacks are ignored. `_removeListener` is emitted either way.
        """
        legacy = legacy_removal_enabled(getattr(self, "legacy_removal", None))
        self._listener_registry().remove(event, callback, context, legacy=legacy)
        self.emit(REMOVE_LISTENER_EVENT, event)
        return self

    def off(self, event: str, callback: Optional[Callable[..., Any]] = None, context: Any = None):
        return self.remove_listener(event, callback, context)

    def has_listener(self, event: Optional[str] = None) -> bool:
        return self._listener_registry().has(event)

    def emit(self, event: str, *args):
        for entry in self._listener_registry().snapshot(event):
            entry.invoke(*args)
        return self

    def once(self, event: str, callback: Callable[..., Any], context: Any = None):
        _validate(event, callback)
        fired = False

        def g(*args):
            nonlocal fired
            self.remove_listener(event, g, context)
            if not fired:
                fired = True
                callback(*args)

        g.listener = callback
        return self.add_listener(event, g, context)

    @classmethod
    def mixin(cls, target: type) -> type:
        """Attach the emitter operations to `target`. Usable as a class decorator."""
        if target is None or not isinstance(target, type):
            raise InvalidArgument("cannot mix invalid class")
        if not _can_hold_registry(target):
            raise InvalidArgument("cannot mix class without __dict__ or a _listeners slot")
        for name in _CAPABILITY:
            setattr(target, name, vars(EventEmitter)[name])
        IEmitter.register(target)
        return target


_CAPABILITY = (
    "_listener_registry",
    "add_listener", "on",
    "remove_listener", "off",
    "has_listener",
    "emit",
    "once",
)


def install_capability(target: type) -> type:
    return EventEmitter.mixin(target)


def _validate(event: str, callback: Callable[..., Any]) -> None:
    if not event or not isinstance(event, str):
        raise InvalidArgument("missing parameter: event")
    if callback is None or not callable(callback):
        raise InvalidArgument("missing parameter: callback")


def _can_hold_registry(target: type) -> bool:
    if target.__dictoffset__ != 0:
        return True
    for klass in target.__mro__:
        slots = getattr(klass, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        if "_listeners" in slots:
            return True
    return False
