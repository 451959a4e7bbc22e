# salon/schemas/auth.py

from typing import Optional
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    password: Optional[str] = None


class LoginResponse(BaseModel):
    success: bool = True
    token: str


class TokenRequest(BaseModel):
    token: Optional[str] = None


class VerifyResponse(BaseModel):
    valid: bool


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None


class RevealRequest(BaseModel):
    password: Optional[str] = None
    session_token: Optional[str] = Field(None, alias="sessionToken")

    model_config = {"populate_by_name": True}


class SessionTokenRequest(BaseModel):
    session_token: Optional[str] = Field(None, alias="sessionToken")

    model_config = {"populate_by_name": True}


class CheckRevealResponse(BaseModel):
    revealed: bool


class PhoneResponse(BaseModel):
    phone: str
