"""
Domain Layer для Entity Naming.

Проверка и приведение публичных параметров к виду, который
понимают namer'ы вендоров.

Normalizers:
- ParamsNormalizer: PortParams -> NamerPortParams, QoSParams -> NamerQoSParams

Использование:
    from entity_naming.core.domain import ParamsNormalizer

    normalizer = ParamsNormalizer()
    npp = normalizer.normalize_port(pp, fixed_form_factor=False)
"""

from .params import NamerPortParams, NamerQoSParams, ParamsNormalizer

__all__ = [
    "ParamsNormalizer",
    "NamerPortParams",
    "NamerQoSParams",
]
