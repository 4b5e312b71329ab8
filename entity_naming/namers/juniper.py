"""
Namer для Juniper Junos.

Единственный loopback: lo0. Член агрегата: логический unit 0 (ae1.0).
Порты именуются et-FPC/PIC/PORT[:CHANNEL]; на модульных устройствах
PIC в имени всегда 0.
"""

from ..core.exceptions import IndexRangeError, ParamsValidationError
from .base import BaseNamer, NamerPortParams


class JuniperNamer(BaseNamer):
    """Namer для Juniper."""

    vendor = "Juniper"

    def loopback_interface(self, index: int) -> str:
        if index != 0:
            raise IndexRangeError(
                f"Juniper loopback index cannot exceed 0 (must be zero), got {index}",
                vendor=self.vendor,
                entity="loopback",
                index=index,
                max_index=0,
            )
        return "lo0"

    def aggregate_interface(self, index: int) -> str:
        self._check_max("aggregate", index, 1151)
        return f"ae{index}"

    def aggregate_member_interface(self, index: int) -> str:
        return self.aggregate_interface(index) + ".0"

    def linecard(self, index: int) -> str:
        self._check_max("linecard", index, 7)
        return f"FPC{index}"

    def controller_card(self, index: int) -> str:
        self._check_max("controller card", index, 1)
        return f"RE{index}"

    def fabric(self, index: int) -> str:
        self._check_max("fabric", index, 5)
        return f"SIB{index}"

    def port(self, pp: NamerPortParams) -> str:
        """
        et-<fpc>/<pic>/<port>[:<channel>].

        Raises:
            ParamsValidationError: Порт не канализируемый
        """
        if not pp.channelizable:
            raise ParamsValidationError(
                "Juniper port names for unchannelizable ports are not supported",
                field="channel_state",
                value="unchannelizable",
            )
        if pp.slot_index is not None:
            fpc, pic = pp.slot_index, 0
        else:
            fpc, pic = 0, pp.pic_index
        name = f"et-{fpc}/{pic}/{pp.port_index}"
        if pp.channel_index is not None:
            name += f":{pp.channel_index}"
        return name
