"""
Загрузчик конфигурации из config.yaml.

Порядок: значения по умолчанию, затем YAML, затем переменные окружения.

Предоставляет доступ к настройкам через точку:
    config.device.vendor
    config.output.format
    config.logging.level

Переменные окружения:
    ENTITY_NAMING_VENDOR          -> device.vendor
    ENTITY_NAMING_HARDWARE_MODEL  -> device.hardware_model
    ENTITY_NAMING_LOG_LEVEL       -> logging.level
"""

import os
from typing import Any, Dict, Optional

import yaml

from .core.config_schema import AppConfig, validate_config
from .core.exceptions import ConfigError
from .core.logging import get_logger

logger = get_logger(__name__)

# Файлы, которые ищутся в текущей директории
SEARCH_PATHS = (
    "config.yaml",
    "config.yml",
    ".entity_naming.yaml",
)

# Переменная окружения -> (секция, ключ)
ENV_OVERRIDES: Dict[str, tuple] = {
    "ENTITY_NAMING_VENDOR": ("device", "vendor"),
    "ENTITY_NAMING_HARDWARE_MODEL": ("device", "hardware_model"),
    "ENTITY_NAMING_LOG_LEVEL": ("logging", "level"),
}


class ConfigSection:
    """Секция конфигурации с доступом через точку."""

    def __init__(self, data: dict = None):
        self._data = data or {}

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            return super().__getattribute__(name)
        value = self._data.get(name)
        if isinstance(value, dict):
            return ConfigSection(value)
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Получить значение с дефолтом."""
        return self._data.get(key, default)

    def to_dict(self) -> dict:
        """Копия данных секции."""
        return dict(self._data)

    def __repr__(self) -> str:
        return f"ConfigSection({self._data})"


class Config:
    """
    Главный класс конфигурации.

    Пример:
        config = load_config("config.yaml")
        config.device.vendor      # "Ciena"
        config.output.format      # "text"

    Attributes:
        config_file: Файл, из которого загружены настройки (None = только defaults/env)
    """

    def __init__(self):
        self.config_file: Optional[str] = None
        self._data = self._get_defaults()
        self._load_env()

    def _get_defaults(self) -> dict:
        """Значения по умолчанию."""
        return {
            "device": {
                "vendor": None,
                "hardware_model": "",
            },
            "output": {
                "format": "text",
            },
            "logging": {
                "level": "WARNING",
                "json_format": False,
                "console": True,
                "file_path": None,
                "rotation": "size",
                "max_bytes": 10 * 1024 * 1024,
                "backup_count": 5,
                "when": "midnight",
                "interval": 1,
            },
            "debug": False,
        }

    def _find_config_file(self, config_file: Optional[str]) -> Optional[str]:
        """
        Явно указанный файл или первый найденный из SEARCH_PATHS.

        Raises:
            ConfigError: Явно указанный файл не существует
        """
        if config_file:
            if not os.path.exists(config_file):
                raise ConfigError("Файл конфигурации не найден", config_file=config_file)
            return config_file
        for path in SEARCH_PATHS:
            if os.path.exists(path):
                return path
        return None

    def _load_yaml(self, config_file: Optional[str] = None) -> None:
        """
        Загружает настройки из YAML файла.

        Raises:
            ConfigError: Файл не читается или это не YAML-словарь
        """
        config_file = self._find_config_file(config_file)
        if not config_file:
            return

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Ошибка чтения конфигурации: {e}", config_file=config_file) from e

        if not isinstance(yaml_data, dict):
            raise ConfigError(
                "Конфигурация должна быть словарём верхнего уровня",
                config_file=config_file,
            )

        self._merge_dict(self._data, yaml_data)
        self.config_file = config_file
        logger.debug(f"Конфигурация загружена из {config_file}")

    def _load_env(self) -> None:
        """Загружает настройки из переменных окружения."""
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                self._data[section][key] = value

    def _merge_dict(self, base: dict, override: dict) -> None:
        """Рекурсивно мержит словари."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_dict(base[key], value)
            else:
                base[key] = value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            return super().__getattribute__(name)
        value = self._data.get(name)
        if isinstance(value, dict):
            return ConfigSection(value)
        return value

    def reload(self, config_file: Optional[str] = None) -> None:
        """
        Перезагружает конфигурацию.

        Raises:
            ConfigError: Файл не найден или не читается
        """
        self.config_file = None
        self._data = self._get_defaults()
        self._load_yaml(config_file)
        self._load_env()

    def validated(self) -> AppConfig:
        """
        Проверенная pydantic-модель текущих настроек.

        Raises:
            ConfigError: Настройки не проходят валидацию
        """
        return validate_config(self._data, config_file=self.config_file)


# Глобальный экземпляр (defaults + env, YAML загружает load_config)
config = Config()


def load_config(config_file: Optional[str] = None) -> Config:
    """
    Загружает конфигурацию из файла.

    Args:
        config_file: Путь к YAML файлу (опционально)

    Returns:
        Config: Объект конфигурации
    """
    config.reload(config_file)
    return config
