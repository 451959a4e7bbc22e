# salon/services/sessions/__init__.py
"""
Admin sessions and the sensitive-data reveal gate.

Two token tiers:
  session: granted by the admin password, lives session_ttl_hours
  reveal: granted by the reveal password for an existing session,
           lives reveal_ttl_minutes and unmasks CPF/phone fields
"""

from .store import SessionStore, MemorySessionStore
from .redis_store import RedisSessionStore
from .gate import RevealGate, token_fingerprint
from .masking import PiiMasker, mask_cpf, mask_phone

__all__ = [
    "SessionStore",
    "MemorySessionStore",
    "RedisSessionStore",
    "RevealGate",
    "token_fingerprint",
    "PiiMasker",
    "mask_cpf",
    "mask_phone",
]
