from typing import Iterator, List, Optional, Tuple

from .command_interface import SupportsInvert


class ChangeLogSealedError(RuntimeError):
    """Попытка добавить команду в уже сохранённый ChangeLog."""


class ChangeLog:
    """Упорядоченный набор команд - один шаг undo/redo.

    Команды только добавляются; порядок добавления сохраняется.
    После save() менеджер запечатывает лог, и он больше не меняется.
    """

    def __init__(self):
        self._actions: List[SupportsInvert] = []
        self._sealed = False

    @property
    def actions(self) -> Tuple[SupportsInvert, ...]:
        """Все команды в порядке записи."""
        return tuple(self._actions)

    @property
    def last_action(self) -> Optional[SupportsInvert]:
        """Последняя добавленная команда или None."""
        if not self._actions:
            return None
        return self._actions[-1]

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def description(self) -> str:
        """Описание шага: описания команд через запятую."""
        labels = [getattr(action, "description", "") for action in self._actions]
        return ", ".join(label for label in labels if label)

    def append(self, action: SupportsInvert) -> None:
        """Добавить команду в конец лога."""
        if self._sealed:
            raise ChangeLogSealedError("Cannot append to a committed ChangeLog")
        self._actions.append(action)

    def seal(self) -> None:
        self._sealed = True

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[SupportsInvert]:
        return iter(tuple(self._actions))

    def __reversed__(self) -> Iterator[SupportsInvert]:
        return reversed(tuple(self._actions))

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"<ChangeLog {state} actions={len(self._actions)}>"
