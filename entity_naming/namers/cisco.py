"""
Namer для Cisco IOS XR.

Имя порта зависит от скорости: TenGigE, HundredGigE, FourHundredGigE.
Rack всегда 0, PIC в имени всегда 0.
"""

from typing import Dict

from ..core.constants import EthernetSpeed
from ..core.exceptions import UnsupportedSpeedError
from .base import BaseNamer, NamerPortParams

# Префикс имени порта по скорости (без завершающего "E")
SPEED_PREFIX_MAP: Dict[EthernetSpeed, str] = {
    EthernetSpeed.SPEED_10GB: "TenGig",
    EthernetSpeed.SPEED_100GB: "HundredGig",
    EthernetSpeed.SPEED_400GB: "FourHundredGig",
}


class CiscoNamer(BaseNamer):
    """Namer для Cisco."""

    vendor = "Cisco"

    def loopback_interface(self, index: int) -> str:
        return f"Loopback{index}"

    def aggregate_interface(self, index: int) -> str:
        self._check_max("aggregate", index, 65534)
        return f"Bundle-Ether{index + 1}"

    def aggregate_member_interface(self, index: int) -> str:
        return self.aggregate_interface(index)

    def linecard(self, index: int) -> str:
        self._check_max("linecard", index, 7)
        return f"0/{index}/CPU0"

    def controller_card(self, index: int) -> str:
        self._check_max("controller card", index, 1)
        return f"0/RP{index}/CPU0"

    def fabric(self, index: int) -> str:
        self._check_max("fabric", index, 7)
        return f"0/FC{index}"

    def port(self, pp: NamerPortParams) -> str:
        """
        <Prefix>E0/<slot>/0/<port>[/<channel>].

        Raises:
            UnsupportedSpeedError: Скорости нет в SPEED_PREFIX_MAP
        """
        prefix = SPEED_PREFIX_MAP.get(pp.speed)
        if prefix is None:
            supported = [speed.value for speed in SPEED_PREFIX_MAP]
            raise UnsupportedSpeedError(
                f"Cisco port speed {pp.speed.value} is not supported "
                f"(supported: {', '.join(supported)})",
                vendor=self.vendor,
                speed=pp.speed.value,
                supported=supported,
            )
        slot = pp.slot_index if pp.slot_index is not None else 0
        name = f"{prefix}E0/{slot}/0/{pp.port_index}"
        if pp.channel_index is not None:
            name += f"/{pp.channel_index}"
        return name
