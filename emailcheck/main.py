"""Точка входа CLI для проверки и очистки e-mail адресов."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from emailcheck.config import get_settings
from emailcheck.modules.batch import (
    EmailBatchChecker,
    EmailCheckResult,
    iter_addresses,
)

LOGGER = logging.getLogger("emailcheck.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Email address validator and sanitizer")
    parser.add_argument(
        "addresses",
        nargs="*",
        help="Адреса для проверки",
    )
    parser.add_argument(
        "--file",
        help="Файл с адресами, по одному на строку ('-' для stdin)",
    )
    parser.add_argument(
        "--mode",
        choices=["validate", "sanitize", "report"],
        default="report",
        help="Формат вывода: вердикт, очищенный адрес или полный отчёт",
    )
    parser.add_argument(
        "--dedupe",
        action="store_true",
        default=None,
        help="Помечать повторяющиеся очищенные адреса как дубликаты",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Код возврата 1, если хотя бы один адрес отброшен",
    )
    return parser


def read_addresses(path: Path, encoding: str) -> List[str]:
    """Читает адреса из файла, по одному на строку."""
    with path.open(encoding=encoding) as handle:
        return list(iter_addresses(handle))


def format_result(result: EmailCheckResult, mode: str) -> str:
    """Строка вывода для одного адреса в выбранном режиме."""
    if mode == "validate":
        return f"{result.raw}\t{'valid' if result.valid else 'invalid'}"
    if mode == "sanitize":
        return result.sanitized
    return f"{result.raw}\t{result.status}\t{result.sanitized}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Проверяет адреса из аргументов, файла или stdin и печатает результат."""
    settings = get_settings()
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format=settings.log_format)

    addresses: List[str] = list(args.addresses)
    checker = EmailBatchChecker(dedupe=args.dedupe)
    try:
        if args.file == "-":
            addresses.extend(iter_addresses(sys.stdin))
        elif args.file is not None:
            addresses.extend(read_addresses(Path(args.file), settings.input_encoding))
        elif not addresses:
            addresses.extend(iter_addresses(sys.stdin))
        results, summary = checker.check(addresses)
    except KeyboardInterrupt:
        LOGGER.info("Проверка остановлена пользователем.")
        return 130
    except OSError as exc:
        parser.error(f"не удалось прочитать {args.file}: {exc.strerror or exc}")
    except UnicodeDecodeError as exc:
        parser.error(f"файл {args.file} не в кодировке {settings.input_encoding}: {exc.reason}")
    except LookupError:
        parser.error(f"неизвестная кодировка {settings.input_encoding}")

    for result in results:
        print(format_result(result, args.mode))

    if args.strict and summary.rejected:
        LOGGER.info("Отброшено адресов: %s", summary.rejected)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
