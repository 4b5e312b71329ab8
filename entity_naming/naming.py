"""
Публичный API Entity Naming.

Переводит вендор-нейтральное описание сущности (loopback, агрегат,
линейная карта, порт, ...) в имя, которое использует ОС устройства.

Пример использования:
    from entity_naming import DeviceParams, PortParams, Vendor, EthernetSpeed
    from entity_naming import naming

    device = DeviceParams(vendor=Vendor.CISCO)
    naming.aggregate_interface(device, 0)  # "Bundle-Ether1"

    pp = PortParams(slot_index=1, port_index=3, speed=EthernetSpeed.SPEED_10GB)
    naming.port(device, pp)  # "TenGigE0/1/0/3"

Для тестов таблицу вендоров подменяют через конструктор:
    namer = EntityNamer(factories={"fake": FakeNamer})
"""

import warnings
from typing import Mapping, Union

from .core.domain import ParamsNormalizer
from .core.exceptions import ParamsValidationError
from .core.logging import get_logger
from .core.models import (
    CommonQoSQueueNames,
    CommonTrafficQueueNames,
    DeviceParams,
    PortParams,
    QoSClass,
    QoSParams,
    Vendor,
    vendor_label,
)
from .namers import NAMER_FACTORIES, BaseNamer, NamerFactory, resolve_namer

logger = get_logger(__name__)


class EntityNamer:
    """
    Именование сущностей устройства.

    Проверяет параметры, выбирает namer вендора и возвращает имя.
    Ошибки namer'ов пробрасываются без изменений.

    Attributes:
        factories: Таблица вендор -> фабрика namer'а
    """

    def __init__(self, factories: Mapping[Union[Vendor, str], NamerFactory] = NAMER_FACTORIES):
        self.factories = factories
        self._normalizer = ParamsNormalizer()

    def _resolve(self, device: DeviceParams) -> BaseNamer:
        return resolve_namer(device.vendor, device.hardware_model, self.factories)

    def _name_by_index(
        self,
        entity: str,
        device: DeviceParams,
        index: int,
        method: str,
    ) -> str:
        """Общий путь для сущностей с индексом: проверка, namer, имя."""
        if index < 0:
            raise ParamsValidationError(
                f"interface index cannot be negative: {index}",
                field="index",
                value=index,
            )
        name = getattr(self._resolve(device), method)(index)
        logger.debug(
            f"Имя построено: {name}",
            vendor=vendor_label(device.vendor),
            hardware_model=device.hardware_model,
            entity=entity,
        )
        return name

    def loopback_interface(self, device: DeviceParams, index: int) -> str:
        """Имя loopback-интерфейса."""
        return self._name_by_index("loopback", device, index, "loopback_interface")

    def aggregate_interface(self, device: DeviceParams, index: int) -> str:
        """Имя агрегированного интерфейса (LAG)."""
        return self._name_by_index("aggregate", device, index, "aggregate_interface")

    def aggregate_member_interface(self, device: DeviceParams, index: int) -> str:
        """Имя интерфейса агрегата, на который ссылаются его члены."""
        return self._name_by_index(
            "aggregate member", device, index, "aggregate_member_interface",
        )

    def linecard(self, device: DeviceParams, index: int) -> str:
        """Имя линейной карты."""
        return self._name_by_index("linecard", device, index, "linecard")

    def controller_card(self, device: DeviceParams, index: int) -> str:
        """Имя управляющей карты (supervisor / RP / RE)."""
        return self._name_by_index("controller card", device, index, "controller_card")

    def fabric(self, device: DeviceParams, index: int) -> str:
        """Имя модуля фабрики."""
        return self._name_by_index("fabric", device, index, "fabric")

    def port(self, device: DeviceParams, pp: PortParams) -> str:
        """
        Имя физического порта.

        Namer выбирается до проверки параметров: от него зависит,
        допустим ли ненулевой слот (fixed form factor).

        Raises:
            UnknownVendorError: Вендор не поддерживается
            ParamsValidationError: Параметры порта невалидны
        """
        namer = self._resolve(device)
        npp = self._normalizer.normalize_port(pp, namer.is_fixed_form_factor())
        name = namer.port(npp)
        logger.debug(
            f"Имя порта построено: {name}",
            vendor=vendor_label(device.vendor),
            hardware_model=device.hardware_model,
            entity="port",
            port=pp,
        )
        return name

    def common_qos_queues(self, device: DeviceParams, qos: QoSParams) -> CommonQoSQueueNames:
        """Имена очередей вендора для общих QoS-классов."""
        namer = self._resolve(device)
        names = namer.common_qos_queues(self._normalizer.normalize_qos(qos))
        return CommonQoSQueueNames({
            QoSClass.NC1: names.nc1,
            QoSClass.AF4: names.af4,
            QoSClass.AF3: names.af3,
            QoSClass.AF2: names.af2,
            QoSClass.AF1: names.af1,
            QoSClass.BE1: names.be1,
            QoSClass.BE0: names.be0,
        })

    def common_traffic_queues(self, device: DeviceParams) -> CommonTrafficQueueNames:
        """
        Имена очередей в старом формате.

        Deprecated: используйте common_qos_queues(device, QoSParams()).
        """
        warnings.warn(
            "common_traffic_queues is deprecated, use common_qos_queues",
            DeprecationWarning,
            stacklevel=2,
        )
        queues = self.common_qos_queues(device, QoSParams())
        return CommonTrafficQueueNames(**{qc.value: queues.name(qc) for qc in QoSClass})


# Экземпляр по умолчанию со встроенной таблицей вендоров
_default = EntityNamer()

loopback_interface = _default.loopback_interface
aggregate_interface = _default.aggregate_interface
aggregate_member_interface = _default.aggregate_member_interface
linecard = _default.linecard
controller_card = _default.controller_card
fabric = _default.fabric
port = _default.port
common_qos_queues = _default.common_qos_queues
common_traffic_queues = _default.common_traffic_queues
