"""
Domain logic для параметров запросов.

Проверяет PortParams / QoSParams и переводит их в NamerPortParams /
NamerQoSParams. Проверки идут в фиксированном порядке, выбрасывается
первая найденная ошибка.
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import EthernetSpeed, UNNAMEABLE_SPEEDS
from ..exceptions import ParamsValidationError
from ..models import ChannelState, PortParams, QoSParams


@dataclass(frozen=True)
class NamerPortParams:
    """
    Проверенные параметры порта.

    Результат ParamsNormalizer.normalize_port(), вход namer.port().

    Attributes:
        slot_index: Индекс слота, None на fixed form factor устройствах
        pic_index: Индекс PIC
        port_index: Индекс порта
        channel_index: Индекс канала, None если порт не канализирован
        channelizable: Порт может быть разбит на каналы
        speed: Скорость порта (не UNSET и не SPEED_UNKNOWN)
    """
    slot_index: Optional[int] = None
    pic_index: int = 0
    port_index: int = 0
    channel_index: Optional[int] = None
    channelizable: bool = False
    speed: EthernetSpeed = EthernetSpeed.SPEED_UNKNOWN


@dataclass(frozen=True)
class NamerQoSParams:
    """Проверенные параметры QoS (неотрицательные)."""
    num_strict_priority: int = 0
    num_weighted_round_robin: int = 0


class ParamsNormalizer:
    """
    Нормализация параметров порта и QoS.

    Example:
        normalizer = ParamsNormalizer()
        pp = PortParams(slot_index=1, port_index=3, speed=EthernetSpeed.SPEED_100GB)
        npp = normalizer.normalize_port(pp, fixed_form_factor=False)
        # npp.slot_index == 1, npp.channel_index is None, npp.channelizable is True
    """

    def normalize_port(self, pp: PortParams, fixed_form_factor: bool) -> NamerPortParams:
        """
        Проверяет и нормализует параметры порта.

        Args:
            pp: Публичные параметры порта
            fixed_form_factor: Устройство без слотов

        Returns:
            NamerPortParams: Параметры для namer.port()

        Raises:
            ParamsValidationError: Первое нарушенное правило
        """
        slot = pp.slot_index if pp.slot_index is not None else 0
        channel = pp.channel_index if pp.channel_index is not None else 0

        for field, label, value in (
            ("slot_index", "slot", slot),
            ("pic_index", "pic", pp.pic_index),
            ("port_index", "port", pp.port_index),
            ("channel_index", "channel", channel),
        ):
            if value < 0:
                raise ParamsValidationError(
                    f"{label} index cannot be negative: {value}",
                    field=field,
                    value=value,
                )

        if slot > 0 and fixed_form_factor:
            raise ParamsValidationError(
                "cannot have a non-zero slot index on a fixed form factor device",
                field="slot_index",
                value=slot,
            )

        channelized = pp.channel_state == ChannelState.CHANNELIZED
        if channel > 0 and not channelized:
            raise ParamsValidationError(
                "cannot have a non-zero channel index with an unchannelized port",
                field="channel_index",
                value=channel,
            )

        if pp.speed in UNNAMEABLE_SPEEDS:
            raise ParamsValidationError(
                "port speed cannot be unset or unknown",
                field="speed",
                value=pp.speed.value,
            )

        return NamerPortParams(
            slot_index=None if fixed_form_factor else slot,
            pic_index=pp.pic_index,
            port_index=pp.port_index,
            channel_index=channel if channelized else None,
            channelizable=pp.channel_state != ChannelState.UNCHANNELIZABLE,
            speed=pp.speed,
        )

    def normalize_qos(self, qos: QoSParams) -> NamerQoSParams:
        """
        Проверяет параметры QoS.

        Raises:
            ParamsValidationError: Отрицательное количество очередей
        """
        if qos.num_strict_priority < 0:
            raise ParamsValidationError(
                f"numStrictPriority cannot be negative: {qos.num_strict_priority}",
                field="num_strict_priority",
                value=qos.num_strict_priority,
            )
        if qos.num_weighted_round_robin < 0:
            raise ParamsValidationError(
                f"numWeightedRoundRobin cannot be negative: {qos.num_weighted_round_robin}",
                field="num_weighted_round_robin",
                value=qos.num_weighted_round_robin,
            )
        return NamerQoSParams(
            num_strict_priority=qos.num_strict_priority,
            num_weighted_round_robin=qos.num_weighted_round_robin,
        )
