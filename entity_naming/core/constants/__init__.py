"""
Константы Entity Naming.

Импорт:
    from entity_naming.core.constants import EthernetSpeed
"""

from .speeds import (
    EthernetSpeed,
    UNNAMEABLE_SPEEDS,
    parse_speed,
)

__all__ = [
    "EthernetSpeed",
    "UNNAMEABLE_SPEEDS",
    "parse_speed",
]
