"""
Event System - Synchronous notification sinks.

Provides:
- Signal: Observer list used for a command's apply/revert notifications
- NotificationSink: Protocol a command accepts in place of a Signal

Usage:
    from revertible.events import Signal

    on_apply = Signal("tab.apply")
    on_apply.connect(lambda data: print("applied", data))
    on_apply.emit({"tab": 2})
"""
from .observer import NotificationSink, Signal


__all__ = ["Signal", "NotificationSink"]
