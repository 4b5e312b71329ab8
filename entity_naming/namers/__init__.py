"""
Namer'ы вендоров и выбор namer'а по вендору.

Namer'ы:
- AristaNamer, CiscoNamer, JuniperNamer, NokiaNamer, CienaNamer

Использование:
    from entity_naming.namers import resolve_namer

    namer = resolve_namer(Vendor.CIENA, "WR7")
    namer.linecard(4)  # "ib-1/4"
"""

from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple, Union

from ..core.exceptions import UnknownVendorError
from ..core.logging import get_logger
from ..core.models import Vendor, vendor_label
from .arista import AristaNamer
from .base import BaseNamer, NamerPortParams, NamerQoSParams, NamerQoSQueueNames
from .ciena import CienaNamer
from .cisco import CiscoNamer
from .juniper import JuniperNamer
from .nokia import NokiaNamer

logger = get_logger(__name__)

# Фабрика namer'а: hardware_model -> BaseNamer
NamerFactory = Callable[[str], BaseNamer]

# Таблица вендор -> фабрика, только для чтения
NAMER_FACTORIES: Mapping[Union[Vendor, str], NamerFactory] = MappingProxyType({
    Vendor.ARISTA: AristaNamer,
    Vendor.CISCO: CiscoNamer,
    Vendor.JUNIPER: JuniperNamer,
    Vendor.NOKIA: NokiaNamer,
    Vendor.CIENA: CienaNamer,
})


# Строка "Cisco" и Vendor.CISCO: один и тот же вендор
_VENDOR_BY_VALUE = {v.value: v for v in Vendor}


def _lookup_keys(vendor: Union[Vendor, str]) -> Tuple[Union[Vendor, str], ...]:
    """Ключи таблицы для вендора: сам вендор и его вторая форма (enum/строка)."""
    if isinstance(vendor, Vendor):
        return (vendor, vendor.value)
    member = _VENDOR_BY_VALUE.get(vendor)
    return (vendor, member) if member is not None else (vendor,)


def resolve_namer(
    vendor: Union[Vendor, str],
    hardware_model: str = "",
    factories: Mapping[Union[Vendor, str], NamerFactory] = NAMER_FACTORIES,
) -> BaseNamer:
    """
    Создаёт namer для вендора.

    На каждый вызов создаётся новый namer.

    Args:
        vendor: Вендор (Vendor или строка "Cisco")
        hardware_model: Модель оборудования
        factories: Таблица вендор -> фабрика

    Returns:
        BaseNamer: Namer вендора

    Raises:
        UnknownVendorError: Вендора нет в таблице
    """
    factory: Optional[NamerFactory] = None
    for key in _lookup_keys(vendor):
        factory = factories.get(key)
        if factory is not None:
            break
    if factory is None:
        label = vendor_label(vendor)
        raise UnknownVendorError(
            f"no namer for vendor {label}",
            vendor=label,
            supported=[vendor_label(v) for v in factories],
        )
    namer = factory(hardware_model)
    logger.debug("Namer выбран", vendor=vendor_label(vendor), hardware_model=hardware_model)
    return namer


__all__ = [
    "BaseNamer",
    "NamerPortParams",
    "NamerQoSParams",
    "NamerQoSQueueNames",
    "AristaNamer",
    "CiscoNamer",
    "JuniperNamer",
    "NokiaNamer",
    "CienaNamer",
    "NamerFactory",
    "NAMER_FACTORIES",
    "resolve_namer",
]
