from dataclasses import dataclass
from typing import Any, Dict


DEFAULT_MAX_LOGS = 20


def validate_max_logs(value: Any) -> int:
    """Проверить глубину истории: целое число >= 1."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"max_logs must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"max_logs must be >= 1, got {value}")
    return value


def validate_flag(name: str, value: Any) -> bool:
    """Проверить булев флаг: только true/false, без приведения строк."""
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    return value


@dataclass
class HistorySettings:
    """Модель настроек истории изменений."""

    # Сколько сохранённых шагов можно отменить
    max_logs: int = DEFAULT_MAX_LOGS

    # Писать предупреждение в лог, когда старый шаг вытесняется
    warn_on_drop: bool = True

    def __post_init__(self):
        validate_max_logs(self.max_logs)
        validate_flag("warn_on_drop", self.warn_on_drop)

    def to_dict(self) -> Dict[str, Any]:
        """Конвертировать в словарь."""
        return {
            'max_logs': self.max_logs,
            'warn_on_drop': self.warn_on_drop,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HistorySettings':
        """Создать из словаря."""
        return cls(
            max_logs=data.get('max_logs', DEFAULT_MAX_LOGS),
            warn_on_drop=data.get('warn_on_drop', True),
        )
