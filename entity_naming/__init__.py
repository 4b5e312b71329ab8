"""
Entity Naming: имена сущностей сетевого оборудования.

Переводит вендор-нейтральное описание (loopback, LAG, порт, линейная
карта, управляющая карта, фабрика, QoS-очереди) в имя, принятое в ОС
устройства Arista, Cisco, Juniper, Nokia или Ciena.

Пример:
    from entity_naming import DeviceParams, Vendor, linecard

    linecard(DeviceParams(vendor=Vendor.JUNIPER), 2)  # "FPC2"
"""

__version__ = "0.1.0"

from .core.constants import EthernetSpeed
from .core.exceptions import (
    EntityNamingError,
    ParamsValidationError,
    IndexRangeError,
    VendorConfigError,
    UnknownVendorError,
    UnsupportedHardwareModelError,
    UnsupportedSpeedError,
    ConfigError,
)
from .core.models import (
    Vendor,
    ChannelState,
    DeviceParams,
    PortParams,
    QoSParams,
    QoSClass,
    CommonQoSQueueNames,
    CommonTrafficQueueNames,
)
from .naming import (
    EntityNamer,
    loopback_interface,
    aggregate_interface,
    aggregate_member_interface,
    linecard,
    controller_card,
    fabric,
    port,
    common_qos_queues,
    common_traffic_queues,
)

__all__ = [
    "__version__",
    "EthernetSpeed",
    # Exceptions
    "EntityNamingError",
    "ParamsValidationError",
    "IndexRangeError",
    "VendorConfigError",
    "UnknownVendorError",
    "UnsupportedHardwareModelError",
    "UnsupportedSpeedError",
    "ConfigError",
    # Models
    "Vendor",
    "ChannelState",
    "DeviceParams",
    "PortParams",
    "QoSParams",
    "QoSClass",
    "CommonQoSQueueNames",
    "CommonTrafficQueueNames",
    # Facade
    "EntityNamer",
    "loopback_interface",
    "aggregate_interface",
    "aggregate_member_interface",
    "linecard",
    "controller_card",
    "fabric",
    "port",
    "common_qos_queues",
    "common_traffic_queues",
]
