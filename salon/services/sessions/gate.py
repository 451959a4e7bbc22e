# salon/services/sessions/gate.py

import hashlib
import hmac
import logging
import secrets

from ...errors import AuthenticationFailed, Unauthorized
from .store import SessionStore

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


def token_fingerprint(token: str | None) -> str:
    """Short, log-safe identifier of a token."""
    if not token:
        return "no-token"
    return hashlib.sha256(token.encode("utf-8")).hexdigest()[:12]


def _password_matches(candidate: str | None, secret: str) -> bool:
    # An unset secret never matches, not even an empty candidate
    if not secret or candidate is None:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), secret.encode("utf-8"))


class RevealGate:
    """Admin login plus the time-boxed grant that unmasks personal data."""

    def __init__(
        self,
        admin_password: str,
        reveal_password: str,
        sessions: SessionStore,
        grants: SessionStore,
    ):
        self.admin_password = admin_password
        self.reveal_password = reveal_password
        self.sessions = sessions
        self.grants = grants

    # ── Sessions ─────────────────────────────────────────────────────────

    def login(self, password: str | None) -> str:
        if not _password_matches(password, self.admin_password):
            logger.warning("Admin login rejected")
            raise AuthenticationFailed()

        token = secrets.token_hex(TOKEN_BYTES)
        self.sessions.put(token)
        evicted = self.sessions.sweep()

        logger.info(f"Admin login, session={token_fingerprint(token)}, evicted={evicted}")
        return token

    def verify(self, token: str | None) -> bool:
        if not token:
            return False
        return token in self.sessions

    def logout(self, token: str | None) -> None:
        if not token:
            return
        self.sessions.delete(token)
        self.grants.delete(token)
        logger.info(f"Admin logout, session={token_fingerprint(token)}")

    # ── Reveal grants ────────────────────────────────────────────────────

    def request_reveal(self, password: str | None, session_token: str | None) -> None:
        if not self.verify(session_token):
            raise Unauthorized()

        if not _password_matches(password, self.reveal_password):
            logger.warning(f"Reveal rejected, session={token_fingerprint(session_token)}")
            raise AuthenticationFailed()

        self.grants.put(session_token)
        logger.info(f"Reveal granted, session={token_fingerprint(session_token)}")

    def hide(self, session_token: str | None) -> None:
        if not session_token:
            return
        self.grants.delete(session_token)
        logger.info(f"Reveal hidden, session={token_fingerprint(session_token)}")

    def should_reveal(self, session_token: str | None) -> bool:
        if not session_token:
            return False
        if not self.verify(session_token):
            # A grant never outlives its session
            self.grants.delete(session_token)
            return False
        return session_token in self.grants
