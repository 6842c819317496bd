#!/usr/bin/env python3
"""
Тесты HistoryController - сигналов Qt поверх HistoryManager.
"""

import sys
import os
import threading
import unittest

# Добавляем src в путь для импортов
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from undo_history import HistoryController, HistoryManager
from undo_history.services.history.commands import CallbackCommand, SetValueCommand


class MyTestState:

    def __init__(self):
        self.test_property = "old"


class TestHistoryController(unittest.TestCase):

    def setUp(self):
        self.controller = HistoryController()
        self.state = MyTestState()

    def _do(self, value):
        command = SetValueCommand(self.state, "test_property", value)
        self.controller.record(command)
        command.apply()
        self.controller.save()

    def test_default_manager(self):
        self.assertIsInstance(self.controller.history, HistoryManager)
        history = HistoryManager(max_logs=3)
        self.assertIs(HistoryController(history).history, history)

    def test_undo_redo_through_controller(self):
        self._do("new")
        self.assertTrue(self.controller.undo())
        self.assertEqual(self.state.test_property, "old")
        self.assertTrue(self.controller.redo())
        self.assertEqual(self.state.test_property, "new")

    def test_availability_signals(self):
        undo_states = []
        redo_states = []
        changes = []
        self.controller.can_undo_changed.connect(lambda value: undo_states.append(value))
        self.controller.can_redo_changed.connect(lambda value: redo_states.append(value))
        self.controller.history_changed.connect(lambda: changes.append(True))

        self._do("new")
        self.controller.undo()
        self.controller.redo()
        self.controller.clear()

        self.assertEqual(undo_states, [True, False, True, False])
        self.assertEqual(redo_states, [True, False])
        # record, save, undo, redo, clear
        self.assertEqual(len(changes), 5)

    def test_log_dropped_signal_per_evicted_log(self):
        self.controller.history.warn_on_drop = False
        for i in range(4):
            self._do(f"value {i}")
        dropped = []
        self.controller.log_dropped.connect(lambda log: dropped.append(log))

        self.controller.set_max_logs(2)
        self._do("value 4")

        self.assertEqual(len(dropped), 3)
        self.assertEqual(self.controller.history.undo_count(), 2)

    def test_signals_emitted_outside_manager_lock(self):
        lock_free = []

        def on_changed():
            # поток-проверка блокируется, если lock менеджера ещё занят
            result = []
            checker = threading.Thread(
                target=lambda: result.append(self.controller.history.can_undo())
            )
            checker.start()
            checker.join(timeout=2)
            lock_free.append(not checker.is_alive())

        self._do("new")
        self.controller.history_changed.connect(on_changed)
        self.controller.undo()
        self.controller.redo()

        self.assertEqual(lock_free, [True, True])

    def test_signals_emitted_when_command_fails(self):
        def fail():
            raise RuntimeError("invert failed")

        self.controller.record(CallbackCommand(lambda: None, fail))
        self.controller.save()
        undo_states = []
        self.controller.can_undo_changed.connect(lambda value: undo_states.append(value))

        with self.assertRaises(RuntimeError):
            self.controller.undo()
        self.assertEqual(undo_states, [False])

    def test_rejects_calls_from_other_threads(self):
        errors = []

        def worker():
            try:
                self.controller.record(SetValueCommand(self.state, "test_property", "x"))
            except RuntimeError as e:
                errors.append(e)

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        self.assertEqual(len(errors), 1)
        self.assertFalse(self.controller.history.is_recording())


if __name__ == "__main__":
    unittest.main()
