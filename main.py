#!/usr/bin/env python3
"""
Undo History - demo
Записывает изменение, отменяет и повторяет его.
"""

import sys
import os
import logging

# Добавить src в путь для импортов
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from undo_history import HistoryController, HistoryManager
from undo_history.services.history.commands import SetValueCommand
from undo_history.services.serialization import SettingsManager


class DemoState:
    """Простое состояние, которое меняют команды."""

    def __init__(self):
        self.test_property = "old"


def main():
    """Запуск демо."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    settings = SettingsManager().load_or_default()
    history = HistoryController(HistoryManager.from_settings(settings))
    history.history_changed.connect(
        lambda: print(f"  undo: {history.history.undo_count()}, redo: {history.history.redo_count()}")
    )

    state = DemoState()
    print(f"start: {state.test_property}")

    command = SetValueCommand(state, "test_property", "new")
    history.record(command)
    command.apply()
    history.save()
    print(f"after save: {state.test_property}")

    history.undo()
    print(f"after undo: {state.test_property}")

    history.redo()
    print(f"after redo: {state.test_property}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
