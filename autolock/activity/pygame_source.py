"""Activity source fed from the pygame event queue."""

import pygame

from autolock.activity.base import ActivityHub, ActivityKind

# pygame event type -> activity kind
_EVENT_KINDS: dict[int, ActivityKind] = {
    pygame.MOUSEMOTION: ActivityKind.POINTER_MOVE,
    pygame.MOUSEBUTTONDOWN: ActivityKind.POINTER_DOWN,
    pygame.KEYDOWN: ActivityKind.KEY_PRESS,
    pygame.FINGERDOWN: ActivityKind.TOUCH_START,
    pygame.MOUSEWHEEL: ActivityKind.SCROLL,
}


class PygameActivitySource(ActivityHub):
    """Translates pygame input events into activity pulses.

    The host loop owns the event queue and hands every event to
    handle_event(); non-input events are ignored.
    """

    @staticmethod
    def classify(event: pygame.event.Event) -> ActivityKind | None:
        """Map a pygame event to an activity kind.

        Args:
            event: Pygame event.

        Returns:
            Activity kind, or None if the event is not user interaction.
        """
        return _EVENT_KINDS.get(event.type)

    def handle_event(self, event: pygame.event.Event) -> ActivityKind | None:
        """Emit a pulse for an input event.

        Args:
            event: Pygame event from the host loop.

        Returns:
            The emitted activity kind, or None if nothing was emitted.
        """
        kind = self.classify(event)
        if kind is not None:
            self.emit(kind)
        return kind
