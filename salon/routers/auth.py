# salon/routers/auth.py

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import get_gate
from ..schemas.auth import (
    LoginRequest,
    LoginResponse,
    SuccessResponse,
    TokenRequest,
    VerifyResponse,
)
from ..services.sessions import RevealGate

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, gate: RevealGate = Depends(get_gate)):
    token = gate.login(data.password)
    return LoginResponse(token=token)


@router.post("/verify", response_model=VerifyResponse)
def verify(data: TokenRequest, gate: RevealGate = Depends(get_gate)):
    if gate.verify(data.token):
        return VerifyResponse(valid=True)
    return JSONResponse(status_code=401, content={"valid": False})


@router.post("/logout", response_model=SuccessResponse)
def logout(data: TokenRequest, gate: RevealGate = Depends(get_gate)):
    gate.logout(data.token)
    return SuccessResponse()
