"""
Settings Manager - сервис для загрузки и сохранения настроек истории.

Отвечает за сериализацию/десериализацию настроек в JSON формате.
Настройки лежат в секции "history"; остальные секции файла не трогаются.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from undo_history.models.config.history_settings import HistorySettings


logger = logging.getLogger(__name__)

SECTION = "history"


class SettingsManager:
    """Сервис для загрузки и сохранения настроек истории."""

    def __init__(self, config_path: str = "config.json"):
        self.config_path = config_path

    def load_settings(self) -> Optional[HistorySettings]:
        """Загрузить настройки из файла (None, если файла нет или он повреждён)."""
        data = self._read_config()
        if data is None or SECTION not in data:
            return None

        try:
            return HistorySettings.from_dict(data[SECTION])
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning("Invalid history settings in %s: %s", self.config_path, e)
            return None

    def load_or_default(self) -> HistorySettings:
        """Загрузить настройки или вернуть настройки по умолчанию."""
        return self.load_settings() or HistorySettings()

    def save_settings(self, settings: HistorySettings) -> bool:
        """Сохранить настройки в файл."""
        data = self._read_config() or {}
        data[SECTION] = settings.to_dict()

        try:
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4, ensure_ascii=False)
            return True
        except OSError as e:
            logger.error("Error saving settings to %s: %s", self.config_path, e)
            return False

    def _read_config(self) -> Optional[Dict[str, Any]]:
        if not os.path.exists(self.config_path):
            return None

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Error loading settings from %s: %s", self.config_path, e)
            return None

        if not isinstance(data, dict):
            logger.warning("Settings file %s is not a JSON object", self.config_path)
            return None
        return data
