"""
Namer для Nokia SR Linux.

Все номера в именах 1-based: lag1, Linecard1, ethernet-порт et-1/1.
Член агрегата: subinterface 0 (lag1.0).
"""

from .base import BaseNamer, NamerPortParams


class NokiaNamer(BaseNamer):
    """Namer для Nokia."""

    vendor = "Nokia"

    def loopback_interface(self, index: int) -> str:
        self._check_max("loopback", index, 255)
        return f"lo{index}"

    def aggregate_interface(self, index: int) -> str:
        self._check_max("aggregate", index, 127)
        return f"lag{index + 1}"

    def aggregate_member_interface(self, index: int) -> str:
        return self.aggregate_interface(index) + ".0"

    def linecard(self, index: int) -> str:
        self._check_max("linecard", index, 7)
        return f"Linecard{index + 1}"

    def controller_card(self, index: int) -> str:
        self._check_max("controller card", index, 1)
        return f"Supervisor{index + 1}"

    def fabric(self, index: int) -> str:
        self._check_max("fabric", index, 7)
        return f"Fabric{index + 1}"

    def port(self, pp: NamerPortParams) -> str:
        slot = pp.slot_index + 1 if pp.slot_index is not None else 1
        name = f"et-{slot}/{pp.port_index + 1}"
        if pp.channel_index is not None:
            name += f"/{pp.channel_index + 1}"
        return name
