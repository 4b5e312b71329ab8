"""
Базовый класс namer'а.

Namer: стратегия именования сущностей одного вендора. Все namer'ы
наследуются от BaseNamer и реализуют одинаковый набор методов.

Контракт:
- методы с index никогда не вызываются с отрицательным индексом
  (проверка в фасаде entity_naming.naming);
- port() получает уже проверенные NamerPortParams;
- превышение диапазона: IndexRangeError, иные невозможные запросы:
  ParamsValidationError / VendorConfigError.

Пример создания namer'а для нового вендора:
    class AcmeNamer(BaseNamer):
        vendor = "Acme"

        def loopback_interface(self, index):
            self._check_max("loopback", index, 63)
            return f"lo{index}"
        ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from ..core.domain.params import NamerPortParams, NamerQoSParams
from ..core.exceptions import IndexRangeError


@dataclass(frozen=True)
class NamerQoSQueueNames:
    """Имена очередей вендора для общих QoS-классов."""
    nc1: str
    af4: str
    af3: str
    af2: str
    af1: str
    be1: str
    be0: str


# Имена очередей, совпадающие с названиями классов
CANONICAL_QOS_QUEUES = NamerQoSQueueNames(
    nc1="NC1",
    af4="AF4",
    af3="AF3",
    af2="AF2",
    af1="AF1",
    be1="BE1",
    be0="BE0",
)


class BaseNamer(ABC):
    """
    Абстрактный namer.

    Attributes:
        vendor: Имя вендора для сообщений об ошибках
        hardware_model: Модель оборудования ("" = по умолчанию)
    """

    vendor: str = ""

    # Таблица очередей вендора для common_qos_queues()
    qos_queues: NamerQoSQueueNames = CANONICAL_QOS_QUEUES

    def __init__(self, hardware_model: str = ""):
        self.hardware_model = hardware_model

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(hardware_model={self.hardware_model!r})"

    @abstractmethod
    def loopback_interface(self, index: int) -> str:
        """Имя loopback-интерфейса с индексом index."""

    @abstractmethod
    def aggregate_interface(self, index: int) -> str:
        """Имя агрегированного (LAG) интерфейса с индексом index."""

    @abstractmethod
    def aggregate_member_interface(self, index: int) -> str:
        """Имя интерфейса, к которому привязываются члены агрегата index."""

    @abstractmethod
    def linecard(self, index: int) -> str:
        """Имя линейной карты с индексом index."""

    @abstractmethod
    def controller_card(self, index: int) -> str:
        """Имя управляющей карты с индексом index."""

    @abstractmethod
    def fabric(self, index: int) -> str:
        """Имя фабрики с индексом index."""

    @abstractmethod
    def port(self, pp: NamerPortParams) -> str:
        """Имя физического порта."""

    def is_fixed_form_factor(self) -> bool:
        """Устройство без съёмных слотов (имя порта без слота)."""
        return False

    def common_qos_queues(self, qos: NamerQoSParams) -> NamerQoSQueueNames:
        """
        Имена очередей для общих QoS-классов.

        qos пока не влияет на результат ни у одного вендора.
        """
        return self.qos_queues

    def _check_max(self, entity: str, index: int, max_index: int) -> None:
        """
        Проверяет верхнюю границу индекса.

        Raises:
            IndexRangeError: index > max_index
        """
        if index > max_index:
            raise IndexRangeError(
                f"{self.vendor} {entity} index cannot exceed {max_index}, got {index}",
                vendor=self.vendor,
                entity=entity,
                index=index,
                max_index=max_index,
            )
