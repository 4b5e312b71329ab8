"""
Tests for JuniperNamer.

Проверяет имена Junos: lo0, ae, FPC/RE/SIB, et-порты.
"""

import pytest

from entity_naming.core.exceptions import IndexRangeError, ParamsValidationError
from entity_naming.namers.base import NamerPortParams
from entity_naming.namers.juniper import JuniperNamer


@pytest.mark.unit
class TestJuniperIndexedEntities:
    """Тесты сущностей с индексом."""

    def setup_method(self):
        self.namer = JuniperNamer()

    @pytest.mark.parametrize("method, index, expected", [
        ("loopback_interface", 0, "lo0"),
        ("aggregate_interface", 0, "ae0"),
        ("aggregate_interface", 1151, "ae1151"),
        ("aggregate_member_interface", 0, "ae0.0"),
        ("aggregate_member_interface", 1151, "ae1151.0"),
        ("linecard", 0, "FPC0"),
        ("linecard", 7, "FPC7"),
        ("controller_card", 0, "RE0"),
        ("controller_card", 1, "RE1"),
        ("fabric", 0, "SIB0"),
        ("fabric", 5, "SIB5"),
    ])
    def test_name(self, method, index, expected):
        assert getattr(self.namer, method)(index) == expected

    @pytest.mark.parametrize("method, index", [
        ("aggregate_interface", 1152),
        ("aggregate_member_interface", 1152),
        ("linecard", 8),
        ("controller_card", 2),
        ("fabric", 6),
    ])
    def test_over_max(self, method, index):
        with pytest.raises(IndexRangeError, match="exceed"):
            getattr(self.namer, method)(index)

    @pytest.mark.parametrize("index", [1, 5])
    def test_loopback_only_zero(self, index):
        """Только lo0: сообщение про превышение и про ноль."""
        with pytest.raises(IndexRangeError) as exc_info:
            self.namer.loopback_interface(index)
        assert "exceed" in exc_info.value.message
        assert "zero" in exc_info.value.message


@pytest.mark.unit
class TestJuniperPort:
    """Тесты имён портов."""

    def setup_method(self):
        self.namer = JuniperNamer()

    @pytest.mark.parametrize("pp, expected", [
        (NamerPortParams(slot_index=1, port_index=3, channelizable=True), "et-1/0/3"),
        (NamerPortParams(slot_index=1, port_index=3, channel_index=4, channelizable=True), "et-1/0/3:4"),
        (NamerPortParams(pic_index=2, port_index=3, channelizable=True), "et-0/2/3"),
        (NamerPortParams(pic_index=2, port_index=3, channel_index=4, channelizable=True), "et-0/2/3:4"),
    ])
    def test_port(self, pp, expected):
        """Шаблон et-<fpc>/<pic>/<port>[:<channel>]."""
        assert self.namer.port(pp) == expected

    def test_pic_zero_with_slot(self):
        """При заданном слоте PIC в имени всегда 0."""
        pp = NamerPortParams(slot_index=2, pic_index=1, port_index=0, channelizable=True)
        assert self.namer.port(pp) == "et-2/0/0"

    def test_unchannelizable_port(self):
        """Неканализируемый порт не поддерживается."""
        pp = NamerPortParams(slot_index=1, port_index=3, channelizable=False)
        with pytest.raises(ParamsValidationError, match="unchannelizable"):
            self.namer.port(pp)
