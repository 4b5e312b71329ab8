"""
Core модули Entity Naming.

Содержит:
- models: параметры запросов и результаты (DeviceParams, PortParams, ...)
- constants: скорости Ethernet
- exceptions: типизированные исключения
- logging: структурированное логирование (JSON/Human-readable)

Domain-слой (ParamsNormalizer) импортируется отдельно:
    from entity_naming.core.domain import ParamsNormalizer
"""

from .constants import EthernetSpeed, parse_speed
from .exceptions import (
    EntityNamingError,
    ParamsValidationError,
    IndexRangeError,
    VendorConfigError,
    UnknownVendorError,
    UnsupportedHardwareModelError,
    UnsupportedSpeedError,
    ConfigError,
    format_error_for_log,
)
from .logging import (
    get_logger,
    setup_logging,
    setup_logging_from_config,
    StructuredLogger,
    JSONFormatter,
    HumanFormatter,
    LogConfig,
    RotationType,
)
from .models import (
    Vendor,
    ChannelState,
    DeviceParams,
    PortParams,
    QoSParams,
    QoSClass,
    CommonQoSQueueNames,
    CommonTrafficQueueNames,
)

__all__ = [
    # Constants
    "EthernetSpeed",
    "parse_speed",
    # Exceptions
    "EntityNamingError",
    "ParamsValidationError",
    "IndexRangeError",
    "VendorConfigError",
    "UnknownVendorError",
    "UnsupportedHardwareModelError",
    "UnsupportedSpeedError",
    "ConfigError",
    "format_error_for_log",
    # Logging
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
    "StructuredLogger",
    "JSONFormatter",
    "HumanFormatter",
    "LogConfig",
    "RotationType",
    # Models
    "Vendor",
    "ChannelState",
    "DeviceParams",
    "PortParams",
    "QoSParams",
    "QoSClass",
    "CommonQoSQueueNames",
    "CommonTrafficQueueNames",
]
