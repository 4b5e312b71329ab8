"""
Tests for EthernetSpeed / parse_speed.
"""

import pytest

from entity_naming.core.constants import UNNAMEABLE_SPEEDS, EthernetSpeed, parse_speed


@pytest.mark.unit
class TestParseSpeed:
    """Тесты разбора скорости."""

    @pytest.mark.parametrize("value, expected", [
        ("SPEED_100GB", EthernetSpeed.SPEED_100GB),
        ("100GB", EthernetSpeed.SPEED_100GB),
        ("100gb", EthernetSpeed.SPEED_100GB),
        (" 10GB ", EthernetSpeed.SPEED_10GB),
        ("speed_2500mb", EthernetSpeed.SPEED_2500MB),
        (EthernetSpeed.SPEED_400GB, EthernetSpeed.SPEED_400GB),
    ])
    def test_parse(self, value, expected):
        assert parse_speed(value) == expected

    @pytest.mark.parametrize("value", ["fast", "3GB", ""])
    def test_unknown(self, value):
        with pytest.raises(ValueError, match="unknown ethernet speed"):
            parse_speed(value)

    def test_unnameable(self):
        assert UNNAMEABLE_SPEEDS == {EthernetSpeed.UNSET, EthernetSpeed.SPEED_UNKNOWN}
