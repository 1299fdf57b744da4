from dataclasses import dataclass
from typing import Any, Callable, Optional

"""A registered (callback, context) pair. Context, when set, is bound as the callback's first argument."""
@dataclass(frozen=True)
class ListenerEntry:
    callback: Callable[..., Any]
    context: Optional[Any] = None

    def invoke(self, *args) -> Any:
        if self.context is None:
            return self.callback(*args)
        return self.callback(self.context, *args)

    def wraps(self, callback: Callable[..., Any]) -> bool:
        """True when the entry was registered for `callback`, directly or through `once`."""
        if self.callback == callback:
            return True
        return getattr(self.callback, "listener", None) == callback
