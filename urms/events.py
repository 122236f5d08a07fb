"""Runtime events and their dispatch."""

from __future__ import annotations

from enum import Enum


class RuntimeEvent(Enum):
    """Signals raised while the runtime is working."""

    SYSTEM_OVERLOAD = "SystemOverload"
    MEMORY_OVERFLOW = "MemoryOverflow"
    REFLECTION_STARTED = "ReflectionStarted"
    REFLECTION_FINISHED = "ReflectionFinished"


def dispatch(event: RuntimeEvent) -> None:
    """Announce an event."""
    print(f"event -> {event.value}")