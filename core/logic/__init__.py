"""
Core Business Logic Package.

Contains business logic that operates on pure data models.
Separated from models to maintain clean architecture.

Exports:
    Layer state transitions: get_layer_phase, can_layer_transition, next_layer_phase,
        apply_click, apply_double_click, is_hover_suppressed, deselect
"""

from .transitions import (
    get_layer_phase,
    can_layer_transition,
    next_layer_phase,
    apply_click,
    apply_double_click,
    is_hover_suppressed,
    deselect
)

__all__ = [
    'get_layer_phase',
    'can_layer_transition',
    'next_layer_phase',
    'apply_click',
    'apply_double_click',
    'is_hover_suppressed',
    'deselect',
]
