"""Валидация и санитизация e-mail адресов.

Обе функции реализуют одну и ту же практичную грамматику (RFC 5321 без
quoted local part, комментариев и IP-литералов), но по-разному:
``is_valid_email`` отвергает адрес при первом нарушении, а
``sanitize_email`` пытается его починить и возвращает пустую строку, если
это невозможно. Санитайзер не вызывает валидатор повторно и не проверяет
длины и TLD, поэтому результат валиден для типовых адресов, но не всегда.
"""

from __future__ import annotations

import re
import string

from emailcheck.modules.constants import (
    DOMAIN_TRIM_CHARS,
    EMAIL_MAX_LENGTH,
    EMAIL_MIN_LENGTH,
    LABEL_CHARS,
    LABEL_TRIM_CHARS,
    LOCAL_CHARS,
    LOCAL_MAX_LENGTH,
    TLD_CHARS,
    TLD_MIN_LENGTH,
    TRIM_CHARS,
    WHITESPACE_CONTROL_CHARS,
)

__all__ = ["is_valid_email", "sanitize_email"]

_WHITESPACE_CONTROL_RE = re.compile(f"[{WHITESPACE_CONTROL_CHARS}]")
_LOCAL_RE = re.compile(f"[{LOCAL_CHARS}]+")
_LABEL_RE = re.compile(f"[{LABEL_CHARS}]+")
_TLD_RE = re.compile(f"[{TLD_CHARS}]+")

# После приведения к нижнему регистру заглавных букв не остаётся
_LOCAL_STRIP_RE = re.compile(f"[^{LOCAL_CHARS.replace('A-Z', '')}]")
_LABEL_STRIP_RE = re.compile(r"[^a-z0-9-]")
_DOTS_RE = re.compile(r"\.{2,}")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def is_valid_email(email: str) -> bool:
    """Проверяет адрес: длины, единственный @, символы local part и домена, TLD."""
    if not isinstance(email, str):
        return False
    email = email.strip(TRIM_CHARS)

    if _WHITESPACE_CONTROL_RE.search(email):
        return False

    if not EMAIL_MIN_LENGTH <= len(email) <= EMAIL_MAX_LENGTH:
        return False

    # Ровно один @, и не в начале строки
    if email.find("@") < 1 or email.count("@") > 1:
        return False

    local, domain = email.split("@", 1)

    if len(local) > LOCAL_MAX_LENGTH:
        return False
    if not _LOCAL_RE.fullmatch(local):
        return False
    if local.startswith(".") or local.endswith(".") or ".." in local:
        return False

    if ".." in domain or domain.strip(DOMAIN_TRIM_CHARS) != domain:
        return False

    labels = domain.split(".")
    if len(labels) < 2:
        return False

    for label in labels:
        if not label or label.strip("-") != label or not _LABEL_RE.fullmatch(label):
            return False

    tld = labels[-1]
    if len(tld) < TLD_MIN_LENGTH or not _TLD_RE.fullmatch(tld):
        return False

    return True


def sanitize_email(email: str) -> str:
    """Возвращает очищенный адрес в нижнем регистре или пустую строку.

    Из local part удаляются недопустимые символы, в домене схлопываются
    повторные точки, с меток срезаются дефисы по краям и удаляются символы
    вне ``[a-z0-9-]``. Пустые метки отбрасываются; если осталось меньше
    двух, адрес считается непоправимым.
    """
    if not isinstance(email, str):
        return ""
    email = email.strip(TRIM_CHARS).translate(_ASCII_LOWER)

    if len(email) < EMAIL_MIN_LENGTH:
        return ""

    if email.find("@", 1) == -1:
        return ""

    # Второй @ попадёт в домен и будет удалён фильтром меток
    local, domain = email.split("@", 1)

    local = _LOCAL_STRIP_RE.sub("", local)
    if not local:
        return ""

    domain = _DOTS_RE.sub(".", domain)
    domain = domain.strip(DOMAIN_TRIM_CHARS)
    if not domain:
        return ""

    labels = []
    for label in domain.split("."):
        label = _LABEL_STRIP_RE.sub("", label.strip(LABEL_TRIM_CHARS))
        if label:
            labels.append(label)

    if len(labels) < 2:
        return ""

    return f"{local}@{'.'.join(labels)}"
