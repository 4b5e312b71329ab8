"""
Tests for typed exceptions.
"""

import pytest

from entity_naming.core.exceptions import (
    ConfigError,
    EntityNamingError,
    IndexRangeError,
    ParamsValidationError,
    UnknownVendorError,
    UnsupportedHardwareModelError,
    UnsupportedSpeedError,
    VendorConfigError,
    format_error_for_log,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    """Тесты иерархии исключений."""

    @pytest.mark.parametrize("exc_cls, parent", [
        (ParamsValidationError, EntityNamingError),
        (IndexRangeError, EntityNamingError),
        (VendorConfigError, EntityNamingError),
        (UnknownVendorError, VendorConfigError),
        (UnsupportedHardwareModelError, VendorConfigError),
        (UnsupportedSpeedError, VendorConfigError),
        (ConfigError, EntityNamingError),
    ])
    def test_subclass(self, exc_cls, parent):
        assert issubclass(exc_cls, parent)


@pytest.mark.unit
class TestExceptionDetails:
    """Тесты сообщений и деталей."""

    def test_base_str_without_details(self):
        assert str(EntityNamingError("boom")) == "boom"

    def test_params_validation_error(self):
        error = ParamsValidationError("slot index cannot be negative: -1", field="slot_index", value=-1)
        assert error.details == {"field": "slot_index", "value": -1}
        assert str(error) == "slot index cannot be negative: -1 (field='slot_index', value=-1)"

    def test_index_range_error(self):
        error = IndexRangeError(
            "Nokia fabric index cannot exceed 7, got 8",
            vendor="Nokia", entity="fabric", index=8, max_index=7,
        )
        assert error.details == {"vendor": "Nokia", "entity": "fabric", "index": 8, "max_index": 7}

    def test_index_zero_kept_in_details(self):
        error = IndexRangeError("x", index=0, max_index=0)
        assert error.details == {"index": 0, "max_index": 0}

    def test_unknown_vendor_supported(self):
        error = UnknownVendorError("no namer for vendor X", vendor="X", supported=["Arista", "Cisco"])
        assert error.supported == ("Arista", "Cisco")
        assert error.details["supported"] == "Arista, Cisco"
        assert error.details["vendor"] == "X"

    def test_unsupported_hardware_model(self):
        error = UnsupportedHardwareModelError(
            "unsupported hardware model: WR99", vendor="Ciena", hardware_model="WR99", supported=["WR13"],
        )
        assert error.hardware_model == "WR99"
        assert error.details == {"hardware_model": "WR99", "vendor": "Ciena"}

    def test_config_error(self):
        error = ConfigError("bad", config_file="config.yaml", key="device.vendor")
        assert error.details == {"config_file": "config.yaml", "key": "device.vendor"}

    def test_to_dict(self):
        error = UnsupportedSpeedError("no prefix", vendor="Cisco", speed="SPEED_1GB")
        assert error.to_dict() == {
            "error_type": "UnsupportedSpeedError",
            "message": "no prefix",
            "details": {"speed": "SPEED_1GB", "vendor": "Cisco"},
        }


@pytest.mark.unit
class TestFormatErrorForLog:
    """Тесты format_error_for_log."""

    def test_naming_error(self):
        error = ParamsValidationError("bad", field="speed")
        assert format_error_for_log(error) == "bad (field='speed')"

    def test_other_error(self):
        assert format_error_for_log(ValueError("oops")) == "ValueError: oops"
