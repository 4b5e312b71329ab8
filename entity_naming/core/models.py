"""
Data Models для Entity Naming.

Публичные (вендор-нейтральные) параметры запросов и результаты:
- DeviceParams: вендор + модель оборудования
- PortParams: описание физического порта
- QoSParams: параметры QoS-конфигурации
- CommonQoSQueueNames: имена очередей для общих QoS-классов

Использование:
    from entity_naming.core.models import DeviceParams, PortParams, Vendor

    device = DeviceParams(vendor=Vendor.CISCO)
    pp = PortParams(slot_index=1, port_index=3, speed=EthernetSpeed.SPEED_100GB)
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from .constants import EthernetSpeed
from .exceptions import ParamsValidationError

E = TypeVar("E", bound=Enum)


class Vendor(str, Enum):
    """Производитель сетевого оборудования (ключ выбора namer)."""
    ARISTA = "Arista"
    CISCO = "Cisco"
    JUNIPER = "Juniper"
    NOKIA = "Nokia"
    CIENA = "Ciena"


def vendor_label(vendor: Union[Vendor, str]) -> str:
    """Vendor.CISCO -> "Cisco", "fake" -> "fake"."""
    return vendor.value if isinstance(vendor, Vendor) else str(vendor)


def _coerce_enum(enum_cls: Type[E], value: Any, field: str) -> E:
    """
    Приводит строку к члену enum.

    Raises:
        ParamsValidationError: Значения нет в enum
    """
    try:
        return enum_cls(value)
    except ValueError as e:
        raise ParamsValidationError(
            f"unknown {field.replace('_', ' ')}: {value}",
            field=field,
            value=value,
        ) from e


class ChannelState(str, Enum):
    """Состояние канализации порта."""
    UNCHANNELIZED = "unchannelized"      # может быть разбит на каналы, но не разбит
    CHANNELIZED = "channelized"          # разбит на каналы
    UNCHANNELIZABLE = "unchannelizable"  # не может быть разбит


@dataclass(frozen=True)
class DeviceParams:
    """
    Параметры сетевого устройства.

    Attributes:
        vendor: Вендор (Vendor или строка с его именем)
        hardware_model: Модель оборудования, "" = модель вендора по умолчанию
    """
    vendor: Union[Vendor, str]
    hardware_model: str = ""

    def __str__(self) -> str:
        if self.hardware_model:
            return f"{vendor_label(self.vendor)}/{self.hardware_model}"
        return vendor_label(self.vendor)


@dataclass(frozen=True)
class PortParams:
    """
    Параметры физического порта.

    Индексы zero-based. slot_index и channel_index можно не указывать,
    тогда они считаются нулевыми. Проверка и приведение к виду, который
    понимают namer'ы, в ParamsNormalizer.

    Attributes:
        slot_index: Индекс слота (линейной карты)
        pic_index: Индекс PIC
        port_index: Индекс порта
        channel_index: Индекс канала (только для CHANNELIZED)
        channel_state: Состояние канализации
        speed: Скорость порта
    """
    slot_index: Optional[int] = None
    pic_index: int = 0
    port_index: int = 0
    channel_index: Optional[int] = None
    channel_state: ChannelState = ChannelState.UNCHANNELIZED
    speed: EthernetSpeed = EthernetSpeed.UNSET

    def __post_init__(self):
        # "channelized" / "SPEED_100GB" -> члены enum
        object.__setattr__(
            self, "channel_state", _coerce_enum(ChannelState, self.channel_state, "channel_state"),
        )
        object.__setattr__(self, "speed", _coerce_enum(EthernetSpeed, self.speed, "speed"))

    def __str__(self) -> str:
        parts = [
            f"slot={self.slot_index}",
            f"pic={self.pic_index}",
            f"port={self.port_index}",
            f"channel={self.channel_index}",
            f"state={self.channel_state.value}",
            f"speed={self.speed.value}",
        ]
        return "{" + ", ".join(parts) + "}"

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует в словарь (enum -> строка)."""
        data = asdict(self)
        data["channel_state"] = self.channel_state.value
        data["speed"] = self.speed.value
        return data


@dataclass(frozen=True)
class QoSParams:
    """
    Параметры QoS-конфигурации.

    Attributes:
        num_strict_priority: Количество strict-priority очередей
        num_weighted_round_robin: Количество WRR очередей
    """
    num_strict_priority: int = 0
    num_weighted_round_robin: int = 0


class QoSClass(str, Enum):
    """Общий QoS-класс трафика."""
    NC1 = "NC1"
    AF4 = "AF4"
    AF3 = "AF3"
    AF2 = "AF2"
    AF1 = "AF1"
    BE1 = "BE1"
    BE0 = "BE0"


class CommonQoSQueueNames:
    """
    Имена очередей вендора для общих QoS-классов.

    Example:
        queues = common_qos_queues(device, QoSParams())
        queues.name(QoSClass.NC1)  # "NC1"
    """

    def __init__(self, name_by_class: Mapping[QoSClass, str]):
        self._name_by_class = dict(name_by_class)

    def name(self, qos_class: Union[QoSClass, str]) -> str:
        """
        Имя очереди для QoS-класса.

        Raises:
            ValueError: Неизвестный QoS-класс
        """
        return self._name_by_class[QoSClass(qos_class)]

    def to_dict(self) -> Dict[str, str]:
        """Конвертирует в словарь {класс: имя очереди}."""
        return {qc.value: self._name_by_class[qc] for qc in QoSClass if qc in self._name_by_class}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommonQoSQueueNames):
            return NotImplemented
        return self._name_by_class == other._name_by_class

    def __str__(self) -> str:
        lines = [f"  {qc}: {name}" for qc, name in self.to_dict().items()]
        return "{\n" + "\n".join(lines) + "\n}"

    def __repr__(self) -> str:
        return f"CommonQoSQueueNames({self.to_dict()})"


@dataclass(frozen=True)
class CommonTrafficQueueNames:
    """
    Имена очередей для общих классов трафика.

    Устаревший формат: используйте CommonQoSQueueNames.
    """
    NC1: str
    AF4: str
    AF3: str
    AF2: str
    AF1: str
    BE1: str
    BE0: str
