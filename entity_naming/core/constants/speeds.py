"""
Скорости Ethernet-портов.

Значения совпадают с identity OpenConfig
openconfig-if-ethernet:ETHERNET_SPEED. UNSET и SPEED_UNKNOWN служебные
значения: порт с такой скоростью назвать нельзя.
"""

from enum import Enum
from typing import FrozenSet, Union


class EthernetSpeed(str, Enum):
    """Скорость Ethernet-порта (OpenConfig ETHERNET_SPEED)."""
    UNSET = "UNSET"
    SPEED_10MB = "SPEED_10MB"
    SPEED_100MB = "SPEED_100MB"
    SPEED_1GB = "SPEED_1GB"
    SPEED_2500MB = "SPEED_2500MB"
    SPEED_5GB = "SPEED_5GB"
    SPEED_10GB = "SPEED_10GB"
    SPEED_25GB = "SPEED_25GB"
    SPEED_40GB = "SPEED_40GB"
    SPEED_50GB = "SPEED_50GB"
    SPEED_100GB = "SPEED_100GB"
    SPEED_200GB = "SPEED_200GB"
    SPEED_400GB = "SPEED_400GB"
    SPEED_600GB = "SPEED_600GB"
    SPEED_800GB = "SPEED_800GB"
    SPEED_UNKNOWN = "SPEED_UNKNOWN"


# Значения, с которыми порт не может быть назван
UNNAMEABLE_SPEEDS: FrozenSet[EthernetSpeed] = frozenset({
    EthernetSpeed.UNSET,
    EthernetSpeed.SPEED_UNKNOWN,
})


def parse_speed(value: Union[str, EthernetSpeed]) -> EthernetSpeed:
    """
    Приводит строку к EthernetSpeed.

    Принимает как полное имя identity ("SPEED_100GB"), так и короткое
    ("100GB", "100gb").

    Raises:
        ValueError: Неизвестная скорость
    """
    if isinstance(value, EthernetSpeed):
        return value
    name = value.strip().upper()
    if name in EthernetSpeed.__members__:
        return EthernetSpeed[name]
    prefixed = f"SPEED_{name}"
    if prefixed in EthernetSpeed.__members__:
        return EthernetSpeed[prefixed]
    raise ValueError(f"unknown ethernet speed: {value}")
