"""
Input Event - A single player action, already converted to field space.

Uses Pydantic for validation and immutability.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class InputAction(str, Enum):
    """Kinds of player actions.

    Attributes:
        LEFT: Left direction pressed/released
        RIGHT: Right direction pressed/released
        POINTER: Pointer or touch moved; ``x`` holds the field-space X
        TOGGLE: Start / pause / resume control (space bar)
        CONFIRM: Popup button (enter or click)
        HELP: Open or close the how-to-play guide
        NEXT_PAGE: Next guide page
        PREV_PAGE: Previous guide page
    """
    LEFT = "left"
    RIGHT = "right"
    POINTER = "pointer"
    TOGGLE = "toggle"
    CONFIRM = "confirm"
    HELP = "help"
    NEXT_PAGE = "next_page"
    PREV_PAGE = "prev_page"


class InputEvent(BaseModel):
    """Immutable input event from any source.

    Attributes:
        action: What the player did
        timestamp: Time when the event occurred (seconds, monotonic clock)
        active: Pressed (True) or released (False) for LEFT/RIGHT
        x: Field-space X for POINTER events
    """
    action: InputAction
    timestamp: float
    active: bool = True
    x: Optional[float] = None

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        extra = f", x={self.x:.1f}" if self.x is not None else ""
        return f"InputEvent({self.action.value}, active={self.active}{extra}, t={self.timestamp:.3f})"
