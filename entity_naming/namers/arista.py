"""
Namer для Arista EOS.

Loopback и слоты нумеруются как в EOS: линейные карты начинаются
с Linecard3 (слоты 1-2 заняты супервизорами), агрегаты с Port-Channel1.
"""

from .base import BaseNamer, NamerPortParams


class AristaNamer(BaseNamer):
    """Namer для Arista."""

    vendor = "Arista"

    # Первый слот линейной карты в шасси
    LINECARD_SLOT_OFFSET = 3

    def loopback_interface(self, index: int) -> str:
        self._check_max("loopback", index, 1000)
        return f"Loopback{index}"

    def aggregate_interface(self, index: int) -> str:
        self._check_max("aggregate", index, 999998)
        return f"Port-Channel{index + 1}"

    def aggregate_member_interface(self, index: int) -> str:
        return self.aggregate_interface(index)

    def linecard(self, index: int) -> str:
        self._check_max("linecard", index, 7)
        return f"Linecard{index + self.LINECARD_SLOT_OFFSET}"

    def controller_card(self, index: int) -> str:
        self._check_max("controller card", index, 1)
        return f"Supervisor{index + 1}"

    def fabric(self, index: int) -> str:
        self._check_max("fabric", index, 5)
        return f"Fabric{index + 1}"

    def port(self, pp: NamerPortParams) -> str:
        """
        Ethernet[<slot+3>/]<port>[/<channel>].

        Канализируемый, но не разбитый порт получает канал 1:
        Ethernet4/3/1.
        """
        name = "Ethernet"
        if pp.slot_index is not None:
            name += f"{pp.slot_index + self.LINECARD_SLOT_OFFSET}/"
        name += str(pp.port_index)
        if pp.channel_index is not None:
            name += f"/{pp.channel_index}"
        elif pp.channelizable:
            name += "/1"
        return name
