"""
BlockBreaker platform layer.

Services shared by the game but independent of its rules: module
loggers, high-score persistence, and frame-driven timers.
"""

from blockbreaker.logging import get_logger

__version__ = "1.0.0"

# Package-level logger; modules create their own via get_logger()
logger = get_logger('blockbreaker')

__all__ = ['get_logger', 'logger', '__version__']
