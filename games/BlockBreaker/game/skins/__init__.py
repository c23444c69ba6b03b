"""BlockBreaker skins for rendering."""

from .base import BlockBreakerSkin
from .geometric import GeometricSkin

__all__ = [
    'BlockBreakerSkin',
    'GeometricSkin',
]
