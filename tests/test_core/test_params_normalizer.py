"""
Tests for ParamsNormalizer.

Проверяет:
- порядок проверок PortParams (первая ошибка выигрывает)
- приведение к NamerPortParams
- проверку QoSParams
"""

import pytest

from entity_naming.core.constants import EthernetSpeed
from entity_naming.core.domain import ParamsNormalizer
from entity_naming.core.exceptions import ParamsValidationError
from entity_naming.core.models import ChannelState, PortParams, QoSParams
from entity_naming.core.domain import NamerPortParams, NamerQoSParams
from entity_naming.core.domain import params as params_module
from entity_naming.namers import base as namers_base

SPEED = EthernetSpeed.SPEED_100GB


@pytest.mark.unit
class TestNormalizePortValidation:
    """Тесты проверок параметров порта."""

    def setup_method(self):
        self.normalizer = ParamsNormalizer()

    @pytest.mark.parametrize("pp, fixed, message", [
        (PortParams(slot_index=-1, speed=SPEED), False, "slot index cannot be negative: -1"),
        (PortParams(pic_index=-2, speed=SPEED), False, "pic index cannot be negative: -2"),
        (PortParams(port_index=-3, speed=SPEED), False, "port index cannot be negative: -3"),
        (
            PortParams(channel_index=-4, channel_state=ChannelState.CHANNELIZED, speed=SPEED),
            False,
            "channel index cannot be negative: -4",
        ),
        (
            PortParams(slot_index=1, speed=SPEED),
            True,
            "cannot have a non-zero slot index on a fixed form factor device",
        ),
        (
            PortParams(channel_index=2, channel_state=ChannelState.UNCHANNELIZED, speed=SPEED),
            False,
            "cannot have a non-zero channel index with an unchannelized port",
        ),
        (
            PortParams(channel_index=2, channel_state=ChannelState.UNCHANNELIZABLE, speed=SPEED),
            False,
            "cannot have a non-zero channel index with an unchannelized port",
        ),
        (PortParams(speed=EthernetSpeed.UNSET), False, "port speed cannot be unset or unknown"),
        (PortParams(speed=EthernetSpeed.SPEED_UNKNOWN), False, "port speed cannot be unset or unknown"),
    ])
    def test_rule(self, pp, fixed, message):
        with pytest.raises(ParamsValidationError) as exc_info:
            self.normalizer.normalize_port(pp, fixed_form_factor=fixed)
        assert exc_info.value.message == message

    def test_first_violation_wins(self):
        """Несколько нарушений: выбрасывается первое по порядку."""
        pp = PortParams(
            slot_index=-1,
            port_index=-1,
            channel_index=5,
            channel_state=ChannelState.UNCHANNELIZED,
            speed=EthernetSpeed.UNSET,
        )
        with pytest.raises(ParamsValidationError) as exc_info:
            self.normalizer.normalize_port(pp, fixed_form_factor=True)
        assert exc_info.value.field == "slot_index"

    def test_negative_port_before_fixed_slot(self):
        pp = PortParams(slot_index=2, port_index=-1, speed=SPEED)
        with pytest.raises(ParamsValidationError, match="port index"):
            self.normalizer.normalize_port(pp, fixed_form_factor=True)

    def test_zero_slot_on_fixed_device_allowed(self):
        pp = PortParams(slot_index=0, port_index=3, speed=SPEED)
        npp = self.normalizer.normalize_port(pp, fixed_form_factor=True)
        assert npp.slot_index is None

    def test_zero_channel_unchannelized_allowed(self):
        pp = PortParams(port_index=3, channel_index=0, speed=SPEED)
        npp = self.normalizer.normalize_port(pp, fixed_form_factor=False)
        assert npp.channel_index is None


@pytest.mark.unit
class TestNormalizePortTransform:
    """Тесты приведения к NamerPortParams."""

    def setup_method(self):
        self.normalizer = ParamsNormalizer()

    def test_modular_unchannelized(self):
        pp = PortParams(slot_index=1, pic_index=2, port_index=3, speed=SPEED)
        npp = self.normalizer.normalize_port(pp, fixed_form_factor=False)
        assert npp == NamerPortParams(
            slot_index=1,
            pic_index=2,
            port_index=3,
            channel_index=None,
            channelizable=True,
            speed=SPEED,
        )

    def test_missing_slot_is_zero(self):
        pp = PortParams(port_index=3, speed=SPEED)
        npp = self.normalizer.normalize_port(pp, fixed_form_factor=False)
        assert npp.slot_index == 0

    def test_channelized(self):
        pp = PortParams(slot_index=1, port_index=3, channel_index=4,
                        channel_state=ChannelState.CHANNELIZED, speed=SPEED)
        npp = self.normalizer.normalize_port(pp, fixed_form_factor=False)
        assert npp.channel_index == 4
        assert npp.channelizable is True

    def test_channelized_missing_channel_is_zero(self):
        pp = PortParams(port_index=3, channel_state=ChannelState.CHANNELIZED, speed=SPEED)
        npp = self.normalizer.normalize_port(pp, fixed_form_factor=False)
        assert npp.channel_index == 0

    def test_unchannelizable(self):
        pp = PortParams(port_index=3, channel_state=ChannelState.UNCHANNELIZABLE, speed=SPEED)
        npp = self.normalizer.normalize_port(pp, fixed_form_factor=False)
        assert npp.channelizable is False
        assert npp.channel_index is None


@pytest.mark.unit
class TestNormalizeQoS:
    """Тесты проверки QoSParams."""

    def setup_method(self):
        self.normalizer = ParamsNormalizer()

    def test_valid(self):
        result = self.normalizer.normalize_qos(QoSParams(num_strict_priority=2, num_weighted_round_robin=5))
        assert result == NamerQoSParams(num_strict_priority=2, num_weighted_round_robin=5)

    def test_negative_strict_priority(self):
        with pytest.raises(ParamsValidationError) as exc_info:
            self.normalizer.normalize_qos(QoSParams(num_strict_priority=-1, num_weighted_round_robin=-1))
        assert exc_info.value.message == "numStrictPriority cannot be negative: -1"

    def test_negative_wrr(self):
        with pytest.raises(ParamsValidationError) as exc_info:
            self.normalizer.normalize_qos(QoSParams(num_weighted_round_robin=-3))
        assert exc_info.value.message == "numWeightedRoundRobin cannot be negative: -3"


@pytest.mark.unit
class TestNamerParamsLayer:
    """Параметры namer'ов живут в core, namers их только импортируют."""

    def test_same_classes(self):
        assert namers_base.NamerPortParams is NamerPortParams
        assert namers_base.NamerQoSParams is NamerQoSParams

    def test_core_does_not_import_namers(self):
        names = vars(params_module).values()
        modules = {getattr(obj, "__module__", None) or "" for obj in names}
        assert not any(module.startswith("entity_naming.namers") for module in modules)
