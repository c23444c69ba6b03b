"""
Keyboard and pointer input source.

Converts pygame keyboard, mouse and touch events into InputEvent models.
Pointer positions are converted from window pixels to field space using
the viewport rectangle the field is drawn into.
"""
import time
from typing import Callable, List, Optional, Tuple

import pygame

from ..input_event import InputAction, InputEvent
from .base import InputSource

Viewport = Tuple[float, float, float, float]  # x, y, width, height in window pixels

KEY_ACTIONS = {
    pygame.K_LEFT: InputAction.LEFT,
    pygame.K_a: InputAction.LEFT,
    pygame.K_RIGHT: InputAction.RIGHT,
    pygame.K_d: InputAction.RIGHT,
}

PRESS_ACTIONS = {
    pygame.K_SPACE: InputAction.TOGGLE,
    pygame.K_RETURN: InputAction.CONFIRM,
    pygame.K_KP_ENTER: InputAction.CONFIRM,
    pygame.K_h: InputAction.HELP,
    pygame.K_PAGEDOWN: InputAction.NEXT_PAGE,
    pygame.K_PAGEUP: InputAction.PREV_PAGE,
}


class KeyboardMouseInputSource(InputSource):
    """Keyboard, mouse and touch input.

    The main loop passes every pygame event to ``handle_event``; events
    this source does not care about are ignored and left to the caller.
    """

    def __init__(
        self,
        field_width: float,
        viewport: Viewport,
        window_size: Optional[Tuple[int, int]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize source.

        Args:
            field_width: Width of the playfield in field units
            viewport: Where the field is drawn in the window
            window_size: Window size, for normalized touch coordinates
            clock: Timestamp source
        """
        self._field_width = field_width
        self._viewport = viewport
        self._window_size = window_size or (int(viewport[2]), int(viewport[3]))
        self._clock = clock
        self._event_queue: List[InputEvent] = []

    def set_viewport(self, viewport: Viewport, window_size: Tuple[int, int]) -> None:
        """Update the field placement after a window resize."""
        self._viewport = viewport
        self._window_size = window_size

    def to_field_x(self, window_x: float) -> float:
        """Convert a window X coordinate to field space."""
        left, _, width, _ = self._viewport
        if width <= 0:
            return 0.0
        return (window_x - left) * (self._field_width / width)

    def _queue(self, action: InputAction, active: bool = True, x: Optional[float] = None) -> None:
        self._event_queue.append(InputEvent(
            action=action,
            timestamp=self._clock(),
            active=active,
            x=x,
        ))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Convert one pygame event.

        Returns:
            True if the event was consumed
        """
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            pressed = event.type == pygame.KEYDOWN
            if event.key in KEY_ACTIONS:
                self._queue(KEY_ACTIONS[event.key], active=pressed)
                return True
            if pressed and event.key in PRESS_ACTIONS:
                self._queue(PRESS_ACTIONS[event.key])
                return True
            return False

        if event.type == pygame.MOUSEMOTION:
            self._queue(InputAction.POINTER, x=self.to_field_x(event.pos[0]))
            return True

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._queue(InputAction.POINTER, x=self.to_field_x(event.pos[0]))
            self._queue(InputAction.CONFIRM)
            return True

        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            # Touch coordinates are normalized to the window
            window_x = event.x * self._window_size[0]
            self._queue(InputAction.POINTER, x=self.to_field_x(window_x))
            return True

        return False

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Events arrive through handle_event; nothing to collect here."""
        pass

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
