"""
Pytest configuration и общие fixtures для тестов.

Предоставляет переиспользуемые fixtures:
- device_factory: DeviceParams по вендору и модели
- fake_factories: таблица вендоров с FakeNamer
- clean_env: окружение без ENTITY_NAMING_* и без config.yaml в cwd
"""

import pytest

from entity_naming.core.models import DeviceParams
from entity_naming.namers.base import BaseNamer, NamerPortParams


class FakeNamer(BaseNamer):
    """
    Namer для тестов фасада.

    Возвращает предсказуемые имена и запоминает последние параметры порта.
    """

    vendor = "fake"

    def __init__(self, hardware_model: str = "", fixed_form_factor: bool = False):
        super().__init__(hardware_model)
        self.fixed_form_factor = fixed_form_factor
        self.last_port = None

    def loopback_interface(self, index):
        return f"fake-lo{index}"

    def aggregate_interface(self, index):
        return f"fake-agg{index}"

    def aggregate_member_interface(self, index):
        return f"fake-agg{index}.member"

    def linecard(self, index):
        return f"fake-lc{index}"

    def controller_card(self, index):
        return f"fake-cc{index}"

    def fabric(self, index):
        return f"fake-fab{index}"

    def port(self, pp: NamerPortParams) -> str:
        self.last_port = pp
        return f"fake-port{pp.port_index}"

    def is_fixed_form_factor(self) -> bool:
        return self.fixed_form_factor


@pytest.fixture
def device_factory():
    """
    Fixture для создания DeviceParams.

    Usage:
        device = device_factory(Vendor.CIENA, "WR7")
    """
    def _create(vendor, hardware_model: str = "") -> DeviceParams:
        return DeviceParams(vendor=vendor, hardware_model=hardware_model)
    return _create


@pytest.fixture
def fake_factories():
    """Таблица вендоров: "fake" (модульное) и "fake-fixed" (fixed form factor)."""
    return {
        "fake": FakeNamer,
        "fake-fixed": lambda model: FakeNamer(model, fixed_form_factor=True),
    }


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Изолирует загрузку конфигурации.

    cwd -> пустая tmp-директория, переменные ENTITY_NAMING_* удалены.
    """
    for name in ("ENTITY_NAMING_VENDOR", "ENTITY_NAMING_HARDWARE_MODEL", "ENTITY_NAMING_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# Маркеры для группировки тестов
def pytest_configure(config):
    """Регистрация custom markers для pytest."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (быстрые, без внешних зависимостей)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (CLI, конфигурация из файлов)"
    )
