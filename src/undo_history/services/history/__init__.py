"""History System - паттерн Command для Undo/Redo."""

from .command_interface import Action, SupportsInvert
from .change_log import ChangeLog, ChangeLogSealedError
from .history_manager import HistoryManager

__all__ = ['Action', 'SupportsInvert', 'ChangeLog', 'ChangeLogSealedError', 'HistoryManager']
