"""
Namer для Ciena Waveserver.

Карты адресуются как <полка>/<слот>, 16 слотов на полку. Индекс карты
1-based и сквозной по всем полкам: 17 -> полка 2, слот 1.

Какие слоты под какие карты, зависит от модели шасси:

    Модель  Линейные карты  Управляющие  Фабрики
    WR13    1-6,10,11       7,8          12-16
    WR7     4-7             2,3          8-10
    WR2     4,5             2,3          нет

Пустая hardware_model означает WR13.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from ..core.exceptions import (
    IndexRangeError,
    UnsupportedHardwareModelError,
    VendorConfigError,
)
from .base import BaseNamer, NamerPortParams

SLOTS_PER_SHELF = 16

DEFAULT_HARDWARE_MODEL = "WR13"


@dataclass(frozen=True)
class ChassisLayout:
    """
    Разрешённые слоты карт для модели шасси.

    Attributes:
        linecard: Слоты линейных карт
        controller_card: Слоты управляющих карт
        fabric: Слоты фабрик, None если фабрик нет
        slot_ranges: Писать слоты в ошибках отрезками ("1-6,10,11")
    """
    linecard: FrozenSet[int]
    controller_card: FrozenSet[int]
    fabric: Optional[FrozenSet[int]]
    slot_ranges: bool = False

    def describe(self, slots: Iterable[int]) -> str:
        """Слоты для сообщения об ошибке: "1-6,10,11" или "4,5,6,7"."""
        if self.slot_ranges:
            return format_slot_ranges(slots)
        return ",".join(str(slot) for slot in sorted(slots))


CHASSIS_LAYOUTS: Dict[str, ChassisLayout] = {
    "WR13": ChassisLayout(
        linecard=frozenset({1, 2, 3, 4, 5, 6, 10, 11}),
        controller_card=frozenset({7, 8}),
        fabric=frozenset({12, 13, 14, 15, 16}),
        slot_ranges=True,
    ),
    "WR7": ChassisLayout(
        linecard=frozenset({4, 5, 6, 7}),
        controller_card=frozenset({2, 3}),
        fabric=frozenset({8, 9, 10}),
    ),
    "WR2": ChassisLayout(
        linecard=frozenset({4, 5}),
        controller_card=frozenset({2, 3}),
        fabric=None,
    ),
}


def compress_slot_list(slots: Iterable[int]) -> List[Tuple[int, int]]:
    """Сжимает номера слотов в отрезки [(start, end), ...]."""
    xs = sorted(set(slots))
    if not xs:
        return []
    ranges: List[Tuple[int, int]] = []
    start = end = xs[0]
    for slot in xs[1:]:
        if slot == end + 1:
            end = slot
        else:
            ranges.append((start, end))
            start = end = slot
    ranges.append((start, end))
    return ranges


def format_slot_ranges(slots: Iterable[int]) -> str:
    """
    Форматирует слоты как "1-6,10,11".

    Диапазоном записываются только серии из трёх и более слотов,
    пара соседних остаётся перечислением: "2,3".
    """
    parts: List[str] = []
    for start, end in compress_slot_list(slots):
        if end - start >= 2:
            parts.append(f"{start}-{end}")
        else:
            parts.extend(str(slot) for slot in range(start, end + 1))
    return ",".join(parts)


def split_card_index(index: int) -> Tuple[int, int]:
    """Сквозной 1-based индекс карты -> (полка, слот)."""
    return (index - 1) // SLOTS_PER_SHELF + 1, (index - 1) % SLOTS_PER_SHELF + 1


class CienaNamer(BaseNamer):
    """Namer для Ciena."""

    vendor = "Ciena"

    def loopback_interface(self, index: int) -> str:
        self._check_max("loopback", index, 509)
        return f"loop{index}"

    def aggregate_interface(self, index: int) -> str:
        self._check_max("aggregate", index, 255)
        return f"agg{index + 1}"

    def aggregate_member_interface(self, index: int) -> str:
        return self.aggregate_interface(index)

    def linecard(self, index: int) -> str:
        layout = self._layout()
        return "ib-" + self._card_location("linecard", index, layout, layout.linecard)

    def controller_card(self, index: int) -> str:
        layout = self._layout()
        return "ctm-" + self._card_location("controller card", index, layout, layout.controller_card)

    def fabric(self, index: int) -> str:
        layout = self._layout()
        if layout.fabric is None:
            raise VendorConfigError(
                f"Ciena fabric is not supported for {self._model()}",
                vendor=self.vendor,
                details={"hardware_model": self._model()},
            )
        return "fb-" + self._card_location("fabric", index, layout, layout.fabric)

    def port(self, pp: NamerPortParams) -> str:
        """<channel или 1>/[<slot>/]<port>."""
        channel = pp.channel_index if pp.channel_index is not None else 1
        name = f"{channel}/"
        if pp.slot_index is not None:
            name += f"{pp.slot_index}/"
        name += str(pp.port_index)
        return name

    def _model(self) -> str:
        return self.hardware_model or DEFAULT_HARDWARE_MODEL

    def _layout(self) -> ChassisLayout:
        """
        Раскладка слотов для модели шасси.

        Raises:
            UnsupportedHardwareModelError: Модель не из CHASSIS_LAYOUTS
        """
        model = self._model()
        layout = CHASSIS_LAYOUTS.get(model)
        if layout is None:
            supported = list(CHASSIS_LAYOUTS)
            raise UnsupportedHardwareModelError(
                f"unsupported hardware model: {model} (supported: {', '.join(supported)})",
                vendor=self.vendor,
                hardware_model=model,
                supported=supported,
            )
        return layout

    def _card_location(self, entity: str, index: int, layout: ChassisLayout, allowed: FrozenSet[int]) -> str:
        """
        Индекс карты -> "<полка>/<слот>".

        Raises:
            IndexRangeError: index == 0 или слот не разрешён для модели
        """
        if index < 1:
            raise IndexRangeError(
                f"Ciena {entity} index must be positive, got {index}",
                vendor=self.vendor,
                entity=entity,
                index=index,
            )
        shelf, slot = split_card_index(index)
        if slot not in allowed:
            raise IndexRangeError(
                f"Ciena {entity} slot index for {self._model()} must be in "
                f"[{layout.describe(allowed)}], got {slot}",
                vendor=self.vendor,
                entity=entity,
                index=index,
            )
        return f"{shelf}/{slot}"
