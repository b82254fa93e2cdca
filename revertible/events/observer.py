from loguru import logger
from typing import Any, Callable, List, Protocol, runtime_checkable


@runtime_checkable
class NotificationSink(Protocol):
    """Anything a command can broadcast its payload through."""

    def emit(self, *args: Any, **kwargs: Any) -> None:
        ...

    def disconnect_all(self) -> None:
        ...


class Signal:
    """
    A simple observer pattern implementation (Synchronous).
    Allows subscribers to connect to this signal and receive notifications.
    Equivalent to Qt's Signal or C#'s event.
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"<Signal {self.name!r} subscribers={len(self._subscribers)}>"

    @property
    def subscribers(self) -> tuple:
        return tuple(self._subscribers)

    def connect(self, callback: Callable) -> bool:
        """Connect a callback function to this signal. Returns False if already connected."""
        if callback in self._subscribers:
            return False
        self._subscribers.append(callback)
        return True

    def disconnect(self, callback: Callable) -> bool:
        """Disconnect a callback function from this signal."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)
            return True
        return False

    def disconnect_all(self) -> None:
        """Drop every subscriber."""
        self._subscribers.clear()

    def emit(self, *args, **kwargs):
        """Broadcast arguments to all subscribers synchronously."""
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{sub}': {e}")
