from collections.abc import MutableMapping
from typing import Any

from ..command_interface import Action


class SetValueCommand(Action):
    """Команда присваивания значения атрибуту объекта или ключу словаря.

    Старое значение запоминается при создании команды.
    """

    def __init__(self, target: Any, prop: str, value: Any, description: str = ""):
        super().__init__(description or f"Set {prop}")
        self.target = target
        self.prop = prop
        self.value = value
        self.old_value = self._read()

    def apply(self):
        """Присвоить новое значение."""
        self._write(self.value)

    def invert(self):
        """Вернуть старое значение."""
        self._write(self.old_value)

    def _read(self) -> Any:
        if isinstance(self.target, MutableMapping):
            return self.target.get(self.prop)
        return getattr(self.target, self.prop, None)

    def _write(self, value: Any) -> None:
        if isinstance(self.target, MutableMapping):
            self.target[self.prop] = value
        else:
            setattr(self.target, self.prop, value)
