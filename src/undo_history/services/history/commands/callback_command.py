from typing import Any, Callable, Optional

from ..command_interface import Action


class CallbackCommand(Action):
    """Команда из пары функций: прямое и обратное изменение."""

    def __init__(self, apply_fn: Callable[[], Any], invert_fn: Callable[[], Any],
                 description: str = "", reapply_fn: Optional[Callable[[], Any]] = None):
        super().__init__(description)
        self.apply_fn = apply_fn
        self.invert_fn = invert_fn
        self.reapply_fn = reapply_fn

    def apply(self):
        return self.apply_fn()

    def invert(self):
        return self.invert_fn()

    def reapply(self):
        # Без отдельной функции redo - обычный apply()
        if self.reapply_fn is None:
            return super().reapply()
        return self.reapply_fn()
