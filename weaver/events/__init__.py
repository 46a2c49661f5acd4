from .channel import (
    Event, EventKind, STATE_CHANGED, NotificationChannel,
    SerialExecutor, ManualExecutor, ThreadExecutor,
)

__all__ = [
    "Event", "EventKind", "STATE_CHANGED", "NotificationChannel",
    "SerialExecutor", "ManualExecutor", "ThreadExecutor",
]
