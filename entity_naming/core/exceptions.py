"""
Типизированные исключения для Entity Naming.

Иерархия:
    EntityNamingError (базовый)
    ├── ParamsValidationError (невалидные входные параметры)
    ├── IndexRangeError (индекс вне диапазона вендора)
    ├── VendorConfigError (запрос не поддерживается вендором)
    │   ├── UnknownVendorError (нет namer для вендора)
    │   ├── UnsupportedHardwareModelError (неизвестная модель)
    │   └── UnsupportedSpeedError (скорость без префикса имени)
    └── ConfigError (конфигурация приложения)

Пример использования:
    from entity_naming.core.exceptions import IndexRangeError, UnknownVendorError

    try:
        name = loopback_interface(device, 1001)
    except IndexRangeError as e:
        logger.error(f"Индекс вне диапазона: {e.vendor} {e.entity} - {e.message}")
    except UnknownVendorError as e:
        logger.error(f"Вендор не поддерживается: {e.vendor}")
"""

from typing import Any, Optional, Sequence


class EntityNamingError(Exception):
    """
    Базовое исключение для всех ошибок Entity Naming.

    Attributes:
        message: Описание ошибки
        details: Дополнительные детали (dict)
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> dict:
        """Сериализация для логов/отчётов."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# === Input Errors ===

class ParamsValidationError(EntityNamingError):
    """
    Ошибка валидации входных параметров.

    Выбрасывается до вызова логики вендора: отрицательные индексы,
    неизвестная скорость, недопустимая комбинация slot/channel.

    Attributes:
        field: Поле с ошибкой
        value: Значение которое не прошло валидацию

    Пример:
        raise ParamsValidationError("slot index cannot be negative: -1", field="slot_index", value=-1)
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[dict] = None,
    ):
        self.field = field
        self.value = value
        details = details or {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)


class IndexRangeError(EntityNamingError):
    """
    Индекс превышает допустимый для вендора/модели диапазон.

    Attributes:
        vendor: Вендор (Arista, Cisco, ...)
        entity: Тип сущности (loopback, aggregate, linecard, ...)
        index: Переданный индекс
        max_index: Максимально допустимый индекс (если применимо)

    Пример:
        raise IndexRangeError(
            "Arista loopback index cannot exceed 1000, got 1001",
            vendor="Arista", entity="loopback", index=1001, max_index=1000,
        )
    """

    def __init__(
        self,
        message: str,
        vendor: Optional[str] = None,
        entity: Optional[str] = None,
        index: Optional[int] = None,
        max_index: Optional[int] = None,
        details: Optional[dict] = None,
    ):
        self.vendor = vendor
        self.entity = entity
        self.index = index
        self.max_index = max_index
        details = details or {}
        if vendor:
            details["vendor"] = vendor
        if entity:
            details["entity"] = entity
        if index is not None:
            details["index"] = index
        if max_index is not None:
            details["max_index"] = max_index
        super().__init__(message, details)


# === Vendor Config Errors ===

class VendorConfigError(EntityNamingError):
    """
    Запрос не может быть обслужен вендором: неизвестный вендор,
    модель оборудования или скорость порта.

    Attributes:
        vendor: Вендор
    """

    def __init__(
        self,
        message: str,
        vendor: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.vendor = vendor
        details = details or {}
        if vendor:
            details["vendor"] = vendor
        super().__init__(message, details)


class UnknownVendorError(VendorConfigError):
    """
    Для вендора не зарегистрирован namer.

    Attributes:
        supported: Зарегистрированные вендоры

    Пример:
        raise UnknownVendorError("no namer for vendor Huawei", vendor="Huawei")
    """

    def __init__(
        self,
        message: str,
        vendor: Optional[str] = None,
        supported: Sequence[str] = (),
        details: Optional[dict] = None,
    ):
        self.supported = tuple(supported)
        details = details or {}
        if self.supported:
            details["supported"] = ", ".join(self.supported)
        super().__init__(message, vendor, details)


class UnsupportedHardwareModelError(VendorConfigError):
    """
    Модель оборудования не известна namer'у вендора.

    Attributes:
        hardware_model: Переданная модель
        supported: Поддерживаемые модели

    Пример:
        raise UnsupportedHardwareModelError(
            "unsupported hardware model: WR99 (supported: WR13, WR7, WR2)",
            vendor="Ciena", hardware_model="WR99", supported=("WR13", "WR7", "WR2"),
        )
    """

    def __init__(
        self,
        message: str,
        vendor: Optional[str] = None,
        hardware_model: Optional[str] = None,
        supported: Sequence[str] = (),
        details: Optional[dict] = None,
    ):
        self.hardware_model = hardware_model
        self.supported = tuple(supported)
        details = details or {}
        if hardware_model is not None:
            details["hardware_model"] = hardware_model
        super().__init__(message, vendor, details)


class UnsupportedSpeedError(VendorConfigError):
    """
    Скорость порта не имеет имени у вендора.

    Attributes:
        speed: Переданная скорость
        supported: Скорости с известным префиксом

    Пример:
        raise UnsupportedSpeedError("Cisco port speed SPEED_1GB is not supported", vendor="Cisco", speed="SPEED_1GB")
    """

    def __init__(
        self,
        message: str,
        vendor: Optional[str] = None,
        speed: Optional[str] = None,
        supported: Sequence[str] = (),
        details: Optional[dict] = None,
    ):
        self.speed = speed
        self.supported = tuple(supported)
        details = details or {}
        if speed:
            details["speed"] = speed
        super().__init__(message, vendor, details)


# === Config Errors ===

class ConfigError(EntityNamingError):
    """
    Ошибка конфигурации.

    Attributes:
        config_file: Путь к файлу конфигурации
        key: Ключ конфигурации с ошибкой

    Пример:
        raise ConfigError("Missing required field", config_file="config.yaml", key="device.vendor")
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        key: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.config_file = config_file
        self.key = key
        details = details or {}
        if config_file:
            details["config_file"] = config_file
        if key:
            details["key"] = key
        super().__init__(message, details)


# === Utility Functions ===

def format_error_for_log(error: Exception) -> str:
    """
    Форматирует ошибку для вывода в лог.

    Args:
        error: Исключение

    Returns:
        str: Отформатированная строка ошибки
    """
    if isinstance(error, EntityNamingError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
