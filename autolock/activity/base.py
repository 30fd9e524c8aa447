"""Activity kinds, the source protocol and an in-process hub."""

import threading
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, Protocol


class ActivityKind(Enum):
    """Kinds of user interaction that count as an activity pulse."""

    POINTER_MOVE = "mousemove"
    POINTER_DOWN = "mousedown"
    KEY_PRESS = "keypress"
    TOUCH_START = "touchstart"
    SCROLL = "scroll"

    @classmethod
    def parse(cls, name: str) -> "ActivityKind":
        """Parse an activity kind from a config value.

        Accepts browser event names ("mousemove") and enum names
        ("pointer_move", "POINTER_MOVE").

        Args:
            name: Name to parse.

        Returns:
            Matching ActivityKind.
        """
        key = name.strip()
        for kind in cls:
            if key.lower() == kind.value or key.upper() == kind.name:
                return kind
        raise ValueError(f"Unknown activity kind: {name!r}")

    @classmethod
    def parse_many(cls, names: Iterable[Any] | None) -> tuple["ActivityKind", ...]:
        """Parse a config list of activity kinds.

        Args:
            names: Names to parse, or None for every kind.

        Returns:
            Parsed kinds in config order.
        """
        if names is None:
            return tuple(cls)
        return tuple(cls.parse(str(name)) for name in names)


ActivityListener = Callable[[ActivityKind], None]


class ActivitySource(Protocol):
    """Protocol for anything that can deliver activity pulses."""

    def subscribe(self, listener: ActivityListener) -> None:
        """Register a listener for activity pulses.

        Args:
            listener: Called with the kind of each pulse.
        """
        ...

    def unsubscribe(self, listener: ActivityListener) -> None:
        """Remove a previously registered listener.

        Args:
            listener: Listener passed to subscribe().
        """
        ...


class ActivityHub:
    """Fan-out of activity pulses to any number of subscribers."""

    def __init__(self) -> None:
        self._listeners: list[ActivityListener] = []
        self._lock = threading.Lock()

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def subscribe(self, listener: ActivityListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ActivityListener) -> None:
        with self._lock:
            # Bound methods are recreated on each access, so match by equality
            for i, existing in enumerate(self._listeners):
                if existing == listener:
                    del self._listeners[i]
                    return

    def emit(self, kind: ActivityKind) -> None:
        """Deliver a pulse to every subscriber.

        Args:
            kind: Kind of interaction that happened.
        """
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(kind)
