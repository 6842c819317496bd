"""Undo History - менеджер истории изменений с пакетным undo/redo."""

from .services.history import (
    Action,
    ChangeLog,
    ChangeLogSealedError,
    HistoryManager,
    SupportsInvert,
)
from .models.config import HistorySettings
from .controllers import HistoryController

__version__ = "1.0.0"

__all__ = [
    'Action',
    'ChangeLog',
    'ChangeLogSealedError',
    'HistoryController',
    'HistoryManager',
    'HistorySettings',
    'SupportsInvert',
]
