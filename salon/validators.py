"""Shared validation utilities"""

import re
from datetime import date, time
from typing import Optional

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}(:\d{2})?$"


def digits_only(value: Optional[str]) -> str:
    """Strip every non-digit character"""
    if not value:
        return ""
    return re.sub(r"\D", "", value)


def is_valid_cpf(value: Optional[str]) -> bool:
    """
    Validate a CPF (Brazilian individual taxpayer number).

    Rules:
        - exactly 11 digits after stripping punctuation
        - not all digits identical (000.000.000-00 passes the checksum)
        - digits 10 and 11 are the modulo-11 check digits of the
          preceding 9 and 10 digits (weights 10..2 and 11..2)
    """
    cpf = digits_only(value)

    if len(cpf) != 11 or cpf == cpf[0] * 11:
        return False

    numbers = [int(d) for d in cpf]
    for position in (9, 10):
        total = sum(
            numbers[i] * (position + 1 - i)
            for i in range(position)
        )
        check = (total * 10) % 11 % 10
        if check != numbers[position]:
            return False

    return True


def normalize_cpf(value: Optional[str]) -> str:
    """
    Return the 11 CPF digits.

    Raises:
        ValueError: If the CPF is malformed or fails the check digits
    """
    if not is_valid_cpf(value):
        raise ValueError("Invalid CPF")
    return digits_only(value)


def normalize_phone(value: Optional[str]) -> str:
    """
    Return the digits of a Brazilian phone number (DDD + number).

    Raises:
        ValueError: If the number does not have 10 or 11 digits
    """
    phone = digits_only(value)
    if len(phone) not in (10, 11):
        raise ValueError("Invalid phone number")
    return phone


def normalize_date(value: str) -> str:
    """
    Check that a "YYYY-MM-DD" string is a real calendar date.

    Raises:
        ValueError: If the date does not exist (e.g. 2024-13-45)
    """
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValueError("Invalid date") from None
    return value


def normalize_time(value: str) -> str:
    """
    Cut "HH:MM:SS" down to "HH:MM".

    Raises:
        ValueError: If the time does not exist (e.g. 99:99)
    """
    try:
        time.fromisoformat(value)
    except ValueError:
        raise ValueError("Invalid time") from None
    return value[:5]
