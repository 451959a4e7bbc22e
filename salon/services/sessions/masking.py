# salon/services/sessions/masking.py
"""
Display masking for personal data.

  CPF    123.456.789-09  →  ***.456.***-**
  phone  (11) 98765-4321 →  (**) *****-4321
"""

import re

CPF_PLACEHOLDER = "***.***.***-**"
PHONE_PLACEHOLDER = "(**) *****-****"


def _digits(value: str) -> str:
    return re.sub(r"\D", "", value)


def mask_cpf(cpf: str | None) -> str:
    if not cpf:
        return CPF_PLACEHOLDER
    clean = _digits(cpf)
    if len(clean) < 6:
        return CPF_PLACEHOLDER
    return f"***.{clean[3:6]}.***-**"


def mask_phone(phone: str | None) -> str:
    if not phone:
        return PHONE_PLACEHOLDER
    clean = _digits(phone)
    if len(clean) < 4:
        return PHONE_PLACEHOLDER
    return f"(**) *****-{clean[-4:]}"


class PiiMasker:
    """Per-request view of personal fields: raw when revealed, masked otherwise."""

    def __init__(self, reveal: bool):
        self.reveal = reveal

    def cpf(self, value: str | None) -> str | None:
        return value if self.reveal else mask_cpf(value)

    def phone(self, value: str | None) -> str | None:
        return value if self.reveal else mask_phone(value)
