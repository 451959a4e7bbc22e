# salon/dependencies.py

from fastapi import Depends, Header, Query, Request

from .config import Settings
from .errors import Unauthorized
from .services.clock import BusinessClock
from .services.reviews import IdentityStrategy, get_identity_strategy
from .services.sessions import PiiMasker, RevealGate
from .services.slots import SlotPolicy


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gate(request: Request) -> RevealGate:
    return request.app.state.gate


def get_clock(request: Request) -> BusinessClock:
    return request.app.state.clock


def get_slot_policy(settings: Settings = Depends(get_app_settings)) -> SlotPolicy:
    return SlotPolicy.from_settings(settings)


def get_review_identity(settings: Settings = Depends(get_app_settings)) -> IdentityStrategy:
    return get_identity_strategy(settings.review_identity)


def session_token(
    authorization: str | None = Header(None),
    x_session_token: str | None = Header(None),
    token: str | None = Query(None),
) -> str | None:
    """Session token from Bearer header, X-Session-Token or ?token=."""
    if authorization:
        scheme, _, value = authorization.partition(" ")
        if scheme.lower() == "bearer" and value:
            return value.strip()
    return x_session_token or token


def require_admin(
    token: str | None = Depends(session_token),
    gate: RevealGate = Depends(get_gate),
) -> str:
    if not gate.verify(token):
        raise Unauthorized()
    return token


def get_masker(
    token: str = Depends(require_admin),
    gate: RevealGate = Depends(get_gate),
) -> PiiMasker:
    """Decided per request, never remembered."""
    return PiiMasker(gate.should_reveal(token))
