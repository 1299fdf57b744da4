"""
Event source abstraction.
Any class exposing these operations can act as an event source. Classes that
receive the capability through `EventEmitter.mixin` are registered as virtual
subclasses, so `isinstance(obj, IEmitter)` holds for them as well.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class IEmitter(ABC):
    """Abstract event source interface."""

    @abstractmethod
    def add_listener(self, event: str, callback: Callable[..., Any], context: Any = None) -> "IEmitter":
        """Register `callback` for `event`."""
        pass

    @abstractmethod
    def remove_listener(self, event: str, callback: Optional[Callable[..., Any]] = None, context: Any = None) -> "IEmitter":
        """Unregister `callback` from `event`."""
        pass

    @abstractmethod
    def has_listener(self, event: Optional[str] = None) -> bool:
        pass

    @abstractmethod
    def emit(self, event: str, *args) -> "IEmitter":
        """Call every listener of `event` with `args`."""
        pass

    @abstractmethod
    def once(self, event: str, callback: Callable[..., Any], context: Any = None) -> "IEmitter":
        """Register `callback` for the next `event` only."""
        pass
