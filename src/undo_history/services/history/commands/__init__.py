"""
Command classes for undo/redo functionality.
"""

from .set_value_command import SetValueCommand
from .callback_command import CallbackCommand

__all__ = [
    'SetValueCommand',
    'CallbackCommand',
]
