"""Serialization - сохранение и загрузка настроек истории."""

from .settings_manager import SettingsManager

__all__ = ['SettingsManager']
