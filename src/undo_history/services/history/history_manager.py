import logging
import threading
from collections import deque
from typing import TYPE_CHECKING, Deque, List, Optional

from undo_history.models.config.history_settings import (
    DEFAULT_MAX_LOGS,
    validate_max_logs,
)
from .change_log import ChangeLog
from .command_interface import SupportsInvert

if TYPE_CHECKING:
    from undo_history.models.config.history_settings import HistorySettings


logger = logging.getLogger(__name__)


class HistoryManager:
    """Менеджер истории изменений для undo/redo.

    Команды записываются в открытый ChangeLog через record(); выполняет их
    вызывающий код. save() фиксирует ChangeLog как один шаг истории.
    undo() отменяет команды шага в обратном порядке, redo() повторяет их
    в исходном порядке.

    Все операции выполняются под одним RLock, поэтому record/save и
    undo/redo из разных потоков не перемежаются. Сигналы Qt живут
    в HistoryController.
    """

    def __init__(self, max_logs: int = DEFAULT_MAX_LOGS, warn_on_drop: bool = True):
        self._lock = threading.RLock()
        self._max_logs = validate_max_logs(max_logs)
        self.warn_on_drop = warn_on_drop
        self._recording = ChangeLog()
        self._done: Deque[ChangeLog] = deque()
        self._undone: List[ChangeLog] = []

    @classmethod
    def from_settings(cls, settings: 'HistorySettings') -> 'HistoryManager':
        """Создать менеджер по настройкам."""
        return cls(max_logs=settings.max_logs, warn_on_drop=settings.warn_on_drop)

    def apply_settings(self, settings: 'HistorySettings') -> None:
        """Применить настройки к существующему менеджеру."""
        with self._lock:
            self.warn_on_drop = settings.warn_on_drop
            self.set_max_logs(settings.max_logs)

    # ============= ГЛУБИНА ИСТОРИИ =============

    def get_max_logs(self) -> int:
        """Максимальное число шагов, которые можно отменить."""
        return self._max_logs

    def set_max_logs(self, value: int) -> None:
        """Изменить глубину истории.

        Уже сохранённые шаги сверх нового лимита вытесняются только
        при следующем save().
        """
        with self._lock:
            self._max_logs = validate_max_logs(value)

    max_logs = property(get_max_logs, set_max_logs)

    # ============= ЗАПИСЬ =============

    def is_recording(self) -> bool:
        """True, если в открытый ChangeLog уже записана хотя бы одна команда."""
        with self._lock:
            return len(self._recording) > 0

    def record(self, action: SupportsInvert) -> None:
        """Добавить команду в открытый ChangeLog (команда не выполняется)."""
        with self._lock:
            self._recording.append(action)

    def get_recording(self) -> ChangeLog:
        """Открытый ChangeLog."""
        with self._lock:
            return self._recording

    def get_last_recorded_action(self) -> Optional[SupportsInvert]:
        """Последняя записанная команда открытого ChangeLog или None."""
        with self._lock:
            return self._recording.last_action

    def save(self) -> List[ChangeLog]:
        """Сохранить открытый ChangeLog как шаг истории и начать новый.

        Возвращает вытесненные из истории ChangeLog (от старых к новым).
        """
        with self._lock:
            log = self._recording
            log.seal()
            # Новый шаг отрезает ветку redo
            self._undone.clear()
            self._done.append(log)

            dropped = []
            while len(self._done) > self._max_logs:
                dropped.append(self._done.popleft())

            self._recording = ChangeLog()
            max_logs = self._max_logs

        if self.warn_on_drop:
            for old_log in dropped:
                logger.warning(
                    "History limit of %d reached, oldest change log dropped "
                    "(%d actions). Raise max_logs to keep more undo steps.",
                    max_logs, len(old_log),
                )
        return dropped

    # ============= UNDO / REDO =============

    def undo(self) -> bool:
        """Отменить последний сохранённый шаг.

        Возвращает False, если отменять нечего. Исключение из invert()
        пробрасывается как есть; частично отменённый шаг не возвращается
        ни в один из стеков.
        """
        with self._lock:
            if not self._done:
                return False

            log = self._done.pop()
            logger.debug("undo: %r", log)
            # Поздние команды зависят от результата ранних
            for action in reversed(log):
                action.invert()
            self._undone.append(log)
        return True

    def redo(self) -> bool:
        """Повторить последний отменённый шаг.

        Возвращает False, если повторять нечего.
        """
        with self._lock:
            if not self._undone:
                return False

            log = self._undone.pop()
            logger.debug("redo: %r", log)
            for action in log:
                self._reapply(action)
            self._done.append(log)
        return True

    def can_undo(self) -> bool:
        """Проверить, можно ли отменить."""
        with self._lock:
            return len(self._done) > 0

    def can_redo(self) -> bool:
        """Проверить, можно ли повторить."""
        with self._lock:
            return len(self._undone) > 0

    def undo_count(self) -> int:
        with self._lock:
            return len(self._done)

    def redo_count(self) -> int:
        with self._lock:
            return len(self._undone)

    def undo_text(self) -> str:
        """Описание шага, который отменит undo()."""
        with self._lock:
            return self._done[-1].description if self._done else ""

    def redo_text(self) -> str:
        """Описание шага, который повторит redo()."""
        with self._lock:
            return self._undone[-1].description if self._undone else ""

    def clear(self) -> None:
        """Очистить всю историю и открытый ChangeLog."""
        with self._lock:
            self._recording = ChangeLog()
            self._done.clear()
            self._undone.clear()
        logger.debug("history cleared")

    @staticmethod
    def _reapply(action: SupportsInvert) -> None:
        reapply = getattr(action, "reapply", None)
        if reapply is None:
            action.apply()
        else:
            reapply()
