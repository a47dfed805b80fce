"""
Core Overlay Components.

Contains the data model and the layer state machine shared by the color
classifier consumers and the behavior engine.

Structure:
    models/: Pure data structures (no business logic)
    logic/: Business logic separated from models
"""

from . import models
from . import logic

__all__ = [
    'models',
    'logic',
]
