"""
CLI для Entity Naming.

Примеры использования:
    python -m entity_naming --vendor Cisco aggregate 0
    python -m entity_naming --vendor Ciena --hardware-model WR7 linecard 4
    python -m entity_naming --vendor Arista port --slot 1 --port 3 --speed 100GB
    python -m entity_naming --vendor Nokia --format json qos

Коды возврата:
    0 - имя построено
    1 - ошибка именования (параметры, диапазон, вендор)
    2 - ошибка аргументов (argparse)
    3 - ошибка конфигурации
"""

import argparse
import json
import logging
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import load_config
from .core.constants import parse_speed
from .core.exceptions import ConfigError, EntityNamingError, format_error_for_log
from .core.logging import LogConfig, get_logger, setup_logging_from_config
from .core.models import ChannelState, DeviceParams, PortParams, QoSParams, Vendor, vendor_label
from .naming import EntityNamer

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NAMING_ERROR = 1
EXIT_CONFIG_ERROR = 3

# Команда с индексом -> метод EntityNamer
INDEX_COMMANDS: Dict[str, str] = {
    "loopback": "loopback_interface",
    "aggregate": "aggregate_interface",
    "aggregate-member": "aggregate_member_interface",
    "linecard": "linecard",
    "controller-card": "controller_card",
    "fabric": "fabric",
}


def setup_parser() -> argparse.ArgumentParser:
    """
    Создаёт парсер аргументов командной строки.

    Returns:
        ArgumentParser: Настроенный парсер
    """
    parser = argparse.ArgumentParser(
        prog="entity_naming",
        description="Имена сущностей сетевого оборудования по вендору",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s --vendor Cisco aggregate 0
  %(prog)s --vendor Ciena --hardware-model WR7 linecard 4
  %(prog)s --vendor Juniper port --slot 1 --port 3 --channel 4 --channel-state channelized --speed 100GB
  %(prog)s --vendor Nokia --format json qos
        """,
    )

    # Общие аргументы
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Подробный вывод (DEBUG)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Путь к файлу конфигурации YAML (default: config.yaml)",
    )
    parser.add_argument(
        "--vendor",
        default=None,
        help=f"Вендор: {', '.join(v.value for v in Vendor)} (default: device.vendor из конфига)",
    )
    parser.add_argument(
        "--hardware-model",
        default=None,
        help="Модель оборудования (default: device.hardware_model из конфига)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default=None,
        help="Формат вывода (default: output.format из конфига)",
    )

    # Подкоманды
    subparsers = parser.add_subparsers(dest="command", help="Команды")
    subparsers.required = True

    # === Сущности с индексом ===
    index_help = {
        "loopback": "Loopback-интерфейс",
        "aggregate": "Агрегированный интерфейс (LAG)",
        "aggregate-member": "Интерфейс агрегата для его членов",
        "linecard": "Линейная карта",
        "controller-card": "Управляющая карта",
        "fabric": "Модуль фабрики",
    }
    for command, help_text in index_help.items():
        index_parser = subparsers.add_parser(command, help=help_text)
        index_parser.add_argument("index", type=int, help="Индекс (zero-based, у Ciena карт 1-based)")

    # === PORT ===
    port_parser = subparsers.add_parser("port", help="Физический порт")
    port_parser.add_argument("--slot", type=int, default=None, help="Индекс слота")
    port_parser.add_argument("--pic", type=int, default=0, help="Индекс PIC (default: 0)")
    port_parser.add_argument("--port", type=int, required=True, help="Индекс порта")
    port_parser.add_argument("--channel", type=int, default=None, help="Индекс канала")
    port_parser.add_argument(
        "--channel-state",
        choices=[state.value for state in ChannelState],
        default=ChannelState.UNCHANNELIZED.value,
        help="Состояние канализации (default: unchannelized)",
    )
    port_parser.add_argument(
        "--speed",
        type=parse_speed,
        required=True,
        help="Скорость порта: 100GB или SPEED_100GB",
    )

    # === QOS ===
    qos_parser = subparsers.add_parser("qos", help="Имена очередей для общих QoS-классов")
    qos_parser.add_argument("--strict-priority", type=int, default=0, help="Strict-priority очереди")
    qos_parser.add_argument("--wrr", type=int, default=0, help="WRR очереди")

    return parser


def _parse_vendor(value: str) -> Any:
    """
    "cisco" -> Vendor.CISCO.

    Неизвестная строка возвращается как есть: её отклонит выбор namer'а.
    """
    for vendor in Vendor:
        if vendor.value.lower() == value.lower():
            return vendor
    return value


def _setup_logging(app_logging: Dict[str, Any], verbose: bool) -> None:
    """Настраивает логирование из секции logging, -v повышает уровень до DEBUG."""
    log_config = LogConfig.from_dict(app_logging)
    if verbose:
        log_config.level = logging.DEBUG
    setup_logging_from_config(log_config)


def _run_command(
    namer: EntityNamer,
    device: DeviceParams,
    args: argparse.Namespace,
) -> Tuple[str, Any]:
    """
    Выполняет команду.

    Returns:
        Tuple[str, Any]: (текстовый вывод, данные для JSON)
    """
    if args.command in INDEX_COMMANDS:
        method: Callable[[DeviceParams, int], str] = getattr(namer, INDEX_COMMANDS[args.command])
        name = method(device, args.index)
        return name, {"index": args.index, "name": name}

    if args.command == "port":
        pp = PortParams(
            slot_index=args.slot,
            pic_index=args.pic,
            port_index=args.port,
            channel_index=args.channel,
            channel_state=ChannelState(args.channel_state),
            speed=args.speed,
        )
        name = namer.port(device, pp)
        return name, {"port": pp.to_dict(), "name": name}

    # qos
    qos = QoSParams(
        num_strict_priority=args.strict_priority,
        num_weighted_round_robin=args.wrr,
    )
    queues = namer.common_qos_queues(device, qos)
    return str(queues), {"queues": queues.to_dict()}


def main(argv: Optional[List[str]] = None, namer: Optional[EntityNamer] = None) -> int:
    """
    Главная функция CLI.

    Args:
        argv: Аргументы (default: sys.argv[1:])
        namer: EntityNamer (для тестов с подменённой таблицей вендоров)

    Returns:
        int: Код возврата
    """
    parser = setup_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
        app_config = cfg.validated()
    except ConfigError as e:
        print(f"Ошибка конфигурации: {format_error_for_log(e)}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    _setup_logging(app_config.logging.model_dump(), args.verbose or app_config.debug)

    vendor = args.vendor or app_config.device.vendor
    if not vendor:
        error = ConfigError(
            "Вендор не задан: укажите --vendor или device.vendor в конфиге",
            config_file=cfg.config_file,
            key="device.vendor",
        )
        logger.error(format_error_for_log(error))
        return EXIT_CONFIG_ERROR

    hardware_model = (
        args.hardware_model if args.hardware_model is not None
        else app_config.device.hardware_model
    )
    device = DeviceParams(vendor=_parse_vendor(vendor), hardware_model=hardware_model)
    output_format = args.format or app_config.output.format

    logger.debug(f"Команда {args.command}", vendor=str(device), operation=args.command)

    try:
        text, data = _run_command(namer or EntityNamer(), device, args)
    except EntityNamingError as e:
        logger.error(format_error_for_log(e), operation=args.command)
        if output_format == "json":
            print(json.dumps(e.to_dict(), ensure_ascii=False, default=str))
        return EXIT_NAMING_ERROR

    if output_format == "json":
        result = {
            "vendor": vendor_label(device.vendor),
            "hardware_model": device.hardware_model,
            "command": args.command,
            **data,
        }
        print(json.dumps(result, ensure_ascii=False))
    else:
        print(text)
    return EXIT_OK
