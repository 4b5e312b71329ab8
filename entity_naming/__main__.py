"""
Точка входа для запуска модуля.

Позволяет запускать утилиту как:
    python -m entity_naming [опции] [команда]

Примеры:
    python -m entity_naming --vendor Cisco linecard 1
    python -m entity_naming --vendor Juniper port --slot 1 --port 3 --speed 100GB
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
