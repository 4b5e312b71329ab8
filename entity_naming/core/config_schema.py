"""
Pydantic схемы для валидации config.yaml.

Валидация происходит при загрузке конфигурации.
Ошибки валидации выбрасывают ConfigError.

Пример использования:
    from entity_naming.core.config_schema import validate_config

    config_dict = yaml.safe_load(open("config.yaml"))
    validated = validate_config(config_dict)  # raises ConfigError on failure
"""

from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .exceptions import ConfigError
from .models import Vendor


class DeviceConfig(BaseModel):
    """Устройство по умолчанию для CLI."""
    vendor: Optional[str] = None
    hardware_model: str = ""

    @field_validator("vendor")
    @classmethod
    def validate_vendor(cls, v: Optional[str]) -> Optional[str]:
        """Проверяет что вендор поддерживается (регистр не важен)."""
        if v is None or v == "":
            return None
        for vendor in Vendor:
            if vendor.value.lower() == v.lower():
                return vendor.value
        raise PydanticCustomError(
            "unknown_vendor",
            "Неизвестный вендор {vendor}, допустимые: {supported}",
            {"vendor": v, "supported": ", ".join(x.value for x in Vendor)},
        )


class OutputConfig(BaseModel):
    """Настройки вывода CLI."""
    format: str = Field(default="text", pattern="^(text|json)$")


class LoggingConfig(BaseModel):
    """Настройки логирования."""
    level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_format: bool = False
    console: bool = True
    file_path: Optional[str] = None
    rotation: str = Field(default="size", pattern="^(size|time|none)$")
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)  # min 1KB
    backup_count: int = Field(default=5, ge=1, le=100)
    when: str = "midnight"
    interval: int = Field(default=1, ge=1)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Уровень в верхнем регистре: debug -> DEBUG."""
        if isinstance(v, str):
            return v.upper()
        return v


class AppConfig(BaseModel):
    """Полная конфигурация приложения."""
    device: DeviceConfig = Field(default_factory=DeviceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    debug: bool = False


def validate_config(config_dict: dict, config_file: Optional[str] = None) -> AppConfig:
    """
    Валидирует словарь конфигурации.

    Args:
        config_dict: Словарь из YAML
        config_file: Путь к файлу (для сообщения об ошибке)

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: При ошибке валидации
    """
    try:
        return AppConfig(**config_dict)
    except ValidationError as e:
        # Первая ошибка Pydantic в читаемом виде
        error_msg = str(e)
        key = None
        errors = e.errors()
        if errors:
            first_error = errors[0]
            key = ".".join(str(x) for x in first_error.get("loc", []))
            msg = first_error.get("msg", "Unknown error")
            error_msg = f"{key}: {msg}"

        raise ConfigError(
            message=f"Ошибка валидации конфигурации: {error_msg}",
            config_file=config_file,
            key=key,
        ) from e


def get_default_config() -> AppConfig:
    """Возвращает конфигурацию по умолчанию."""
    return AppConfig()
