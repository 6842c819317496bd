"""Controllers - Qt-обёртки над сервисами."""

from .history_controller import HistoryController

__all__ = ['HistoryController']
