from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsInvert(Protocol):
    """Любой объект с apply()/invert() можно записывать в историю."""

    def apply(self) -> Any: ...

    def invert(self) -> Any: ...


class Action(ABC):
    """Абстрактный базовый класс для обратимых команд.

    apply() вызывает код приложения, а не менеджер истории.
    invert() должен отменять ровно последний apply()/reapply(), поэтому
    команда запоминает нужное старое значение при создании или при первом apply().
    """

    def __init__(self, description: str = ""):
        self.description = description

    @abstractmethod
    def apply(self) -> Any:
        """Выполнить изменение."""
        pass

    @abstractmethod
    def invert(self) -> Any:
        """Отменить изменение."""
        pass

    def reapply(self) -> Any:
        """Повторить изменение после отмены (по умолчанию просто apply())."""
        return self.apply()

    async def apply_async(self) -> Any:
        """Выполнить apply() из корутины."""
        return self.apply()

    def __repr__(self) -> str:
        if self.description:
            return f"<{type(self).__name__} {self.description!r}>"
        return f"<{type(self).__name__}>"
