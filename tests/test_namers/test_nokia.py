"""
Tests for NokiaNamer.

Все номера в именах Nokia 1-based.
"""

import pytest

from entity_naming.core.exceptions import IndexRangeError
from entity_naming.namers.base import NamerPortParams
from entity_naming.namers.nokia import NokiaNamer


@pytest.mark.unit
class TestNokiaIndexedEntities:
    """Тесты сущностей с индексом."""

    def setup_method(self):
        self.namer = NokiaNamer()

    @pytest.mark.parametrize("method, index, expected", [
        ("loopback_interface", 0, "lo0"),
        ("loopback_interface", 255, "lo255"),
        ("aggregate_interface", 0, "lag1"),
        ("aggregate_interface", 127, "lag128"),
        ("aggregate_member_interface", 0, "lag1.0"),
        ("aggregate_member_interface", 127, "lag128.0"),
        ("linecard", 0, "Linecard1"),
        ("linecard", 7, "Linecard8"),
        ("controller_card", 0, "Supervisor1"),
        ("controller_card", 1, "Supervisor2"),
        ("fabric", 0, "Fabric1"),
        ("fabric", 7, "Fabric8"),
    ])
    def test_name(self, method, index, expected):
        assert getattr(self.namer, method)(index) == expected

    @pytest.mark.parametrize("method, index", [
        ("loopback_interface", 256),
        ("aggregate_interface", 128),
        ("aggregate_member_interface", 128),
        ("linecard", 8),
        ("controller_card", 2),
        ("fabric", 8),
    ])
    def test_over_max(self, method, index):
        with pytest.raises(IndexRangeError, match="exceed"):
            getattr(self.namer, method)(index)


@pytest.mark.unit
class TestNokiaPort:
    """Тесты имён портов."""

    def setup_method(self):
        self.namer = NokiaNamer()

    @pytest.mark.parametrize("pp, expected", [
        (NamerPortParams(slot_index=1, port_index=3), "et-2/4"),
        (NamerPortParams(slot_index=1, port_index=3, channel_index=4, channelizable=True), "et-2/4/5"),
        (NamerPortParams(port_index=3), "et-1/4"),
        (NamerPortParams(port_index=3, channel_index=4, channelizable=True), "et-1/4/5"),
    ])
    def test_port(self, pp, expected):
        """Шаблон et-<slot+1>/<port+1>[/<channel+1>]."""
        assert self.namer.port(pp) == expected
