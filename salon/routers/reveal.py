# salon/routers/reveal.py
"""
Sensitive-data reveal endpoints.

reveal-data / hide-data / check-reveal carry the session token in the body;
get-phone is a regular admin route and additionally needs an active grant.
"""

from typing import Literal

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_gate, require_admin
from ..errors import Forbidden, NotFound
from ..models.tables import Clients, OnlineAppointments
from ..schemas.auth import (
    CheckRevealResponse,
    PhoneResponse,
    RevealRequest,
    SessionTokenRequest,
    SuccessResponse,
)
from ..services.sessions import RevealGate

router = APIRouter(prefix="/api/admin", tags=["reveal"])


@router.post("/reveal-data", response_model=SuccessResponse)
def reveal_data(data: RevealRequest, gate: RevealGate = Depends(get_gate)):
    gate.request_reveal(data.password, data.session_token)
    return SuccessResponse(message="Data revealed")


@router.post("/hide-data", response_model=SuccessResponse)
def hide_data(data: SessionTokenRequest, gate: RevealGate = Depends(get_gate)):
    gate.hide(data.session_token)
    return SuccessResponse(message="Data hidden")


@router.post("/check-reveal", response_model=CheckRevealResponse)
def check_reveal(data: SessionTokenRequest, gate: RevealGate = Depends(get_gate)):
    return CheckRevealResponse(revealed=gate.should_reveal(data.session_token))


@router.get("/get-phone/{kind}/{id}", response_model=PhoneResponse)
def get_phone(
    kind: Literal["client", "appointment"],
    id: int,
    token: str = Depends(require_admin),
    gate: RevealGate = Depends(get_gate),
    db: Session = Depends(get_db),
):
    """Raw phone for the WhatsApp shortcut."""
    if not gate.should_reveal(token):
        raise Forbidden("Reveal the data first to use WhatsApp")

    if kind == "client":
        phone = db.query(Clients.phone).filter(Clients.id == id).scalar()
    else:
        phone = (
            db.query(OnlineAppointments.client_phone)
            .filter(OnlineAppointments.id == id)
            .scalar()
        )

    if not phone:
        raise NotFound("Phone not found")
    return PhoneResponse(phone=phone)
