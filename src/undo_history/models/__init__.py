"""Models - модели данных без зависимостей от сервисов."""
