import threading
from typing import Optional

from PySide6.QtCore import QObject, Signal

from undo_history.services.history import ChangeLog, HistoryManager, SupportsInvert


class HistoryController(QObject):
    """Контроллер истории для UI: те же операции, что у HistoryManager, плюс сигналы.

    Сигналы Qt нельзя испускать из потоков Python, поэтому контроллер
    принимает вызовы только из потока, где он создан. Из рабочих потоков
    нужно обращаться к self.history напрямую.
    """

    # Любое изменение состояния истории
    history_changed = Signal()
    can_undo_changed = Signal(bool)
    can_redo_changed = Signal(bool)
    # Старый шаг вытеснен из истории при save()
    log_dropped = Signal(object)

    def __init__(self, history: Optional[HistoryManager] = None):
        super().__init__()
        self.history = history if history is not None else HistoryManager()
        self._owner_thread = threading.get_ident()

    def record(self, action: SupportsInvert) -> None:
        """Записать команду в открытый ChangeLog."""
        self._check_thread()
        self.history.record(action)
        self.history_changed.emit()

    def save(self) -> None:
        """Сохранить шаг истории."""
        self._check_thread()
        could_undo, could_redo = self._availability()
        dropped = self.history.save()

        for old_log in dropped:
            self.log_dropped.emit(old_log)
        self._notify(could_undo, could_redo)

    def undo(self) -> bool:
        """Отменить шаг; сигналы испускаются и при ошибке в команде."""
        self._check_thread()
        could_undo, could_redo = self._availability()
        try:
            return self.history.undo()
        finally:
            self._notify(could_undo, could_redo)

    def redo(self) -> bool:
        """Повторить шаг."""
        self._check_thread()
        could_undo, could_redo = self._availability()
        try:
            return self.history.redo()
        finally:
            self._notify(could_undo, could_redo)

    def clear(self) -> None:
        """Очистить историю."""
        self._check_thread()
        could_undo, could_redo = self._availability()
        self.history.clear()
        self._notify(could_undo, could_redo)

    def set_max_logs(self, value: int) -> None:
        self._check_thread()
        self.history.set_max_logs(value)
        self.history_changed.emit()

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def get_recording(self) -> ChangeLog:
        return self.history.get_recording()

    def _check_thread(self) -> None:
        if threading.get_ident() != self._owner_thread:
            raise RuntimeError(
                "HistoryController can only be used from the thread that created it; "
                "use controller.history from worker threads"
            )

    def _availability(self):
        return self.history.can_undo(), self.history.can_redo()

    def _notify(self, could_undo: bool, could_redo: bool) -> None:
        can_undo, can_redo = self._availability()
        if can_undo != could_undo:
            self.can_undo_changed.emit(can_undo)
        if can_redo != could_redo:
            self.can_redo_changed.emit(can_redo)
        self.history_changed.emit()
