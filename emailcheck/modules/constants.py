"""Общие константы грамматики e-mail адресов."""

from __future__ import annotations

import re

EMAIL_MIN_LENGTH = 6  # a@b.co
EMAIL_MAX_LENGTH = 254
LOCAL_MAX_LENGTH = 64
TLD_MIN_LENGTH = 2

# Символы, которые срезаются по краям строки (как trim по умолчанию)
TRIM_CHARS = " \t\n\r\0\x0b"
DOMAIN_TRIM_CHARS = TRIM_CHARS + "."
LABEL_TRIM_CHARS = TRIM_CHARS + "-"

LOCAL_SYMBOLS = "!#$%&'*+/=?^_`{|}~.-"

# Классы символов только ASCII: IDN не поддерживаются
LOCAL_CHARS = "A-Za-z0-9" + re.escape(LOCAL_SYMBOLS)
LABEL_CHARS = "A-Za-z0-9-"
TLD_CHARS = "A-Za-z"
WHITESPACE_CONTROL_CHARS = r"\x00-\x20\x7f"
