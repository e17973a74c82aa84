"""Пакетная проверка и очистка списков e-mail адресов."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from emailcheck.config import get_settings
from emailcheck.modules.utils.email import is_valid_email, sanitize_email

LOGGER = logging.getLogger("emailcheck.batch")

STATUS_VALID = "valid"
STATUS_REPAIRED = "repaired"
STATUS_REJECTED = "rejected"
STATUS_DUPLICATE = "duplicate"


@dataclass(frozen=True)
class EmailCheckResult:
    """Результат проверки одного адреса."""

    raw: str
    valid: bool
    sanitized: str
    status: str  # valid | repaired | rejected | duplicate


@dataclass
class BatchSummary:
    """Статистика пакетной проверки."""

    total: int = 0
    valid: int = 0
    repaired: int = 0
    rejected: int = 0
    duplicates: int = 0
    blank: int = 0


def iter_addresses(lines: Iterable[str]) -> Iterator[str]:
    """Отдаёт строки без символов перевода строки."""
    for line in lines:
        yield line.rstrip("\r\n")


class EmailBatchChecker:
    """Прогоняет адреса через валидатор и санитайзер, считает статистику."""

    def __init__(self, dedupe: Optional[bool] = None) -> None:
        self.dedupe = get_settings().dedupe if dedupe is None else dedupe

    def check_one(self, address: str) -> EmailCheckResult:
        """Классифицирует один адрес без учёта дубликатов."""
        valid = is_valid_email(address)
        sanitized = sanitize_email(address)
        if valid:
            status = STATUS_VALID
        elif sanitized:
            status = STATUS_REPAIRED
        else:
            status = STATUS_REJECTED
        return EmailCheckResult(raw=address, valid=valid, sanitized=sanitized, status=status)

    def check(self, addresses: Iterable[str]) -> Tuple[List[EmailCheckResult], BatchSummary]:
        """Проверяет список адресов; пустые строки пропускаются."""
        summary = BatchSummary()
        results: List[EmailCheckResult] = []
        seen: Set[str] = set()

        for address in addresses:
            if not address.strip():
                summary.blank += 1
                continue

            summary.total += 1
            result = self.check_one(address)

            if self.dedupe and result.sanitized:
                if result.sanitized in seen:
                    result = EmailCheckResult(
                        raw=result.raw,
                        valid=result.valid,
                        sanitized=result.sanitized,
                        status=STATUS_DUPLICATE,
                    )
                else:
                    seen.add(result.sanitized)

            if result.status == STATUS_VALID:
                summary.valid += 1
            elif result.status == STATUS_REPAIRED:
                summary.repaired += 1
            elif result.status == STATUS_DUPLICATE:
                summary.duplicates += 1
            else:
                summary.rejected += 1
                LOGGER.debug("Адрес отброшен: %r", address)

            results.append(result)

        LOGGER.info(
            "Проверено %s адресов: валидных %s, исправлено %s, отброшено %s, дубликатов %s",
            summary.total,
            summary.valid,
            summary.repaired,
            summary.rejected,
            summary.duplicates,
        )
        return results, summary
