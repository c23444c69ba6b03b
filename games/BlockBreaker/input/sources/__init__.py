"""BlockBreaker input sources."""

from .base import InputSource
from .keyboard_mouse import KeyboardMouseInputSource

__all__ = ['InputSource', 'KeyboardMouseInputSource']
