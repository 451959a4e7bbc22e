# salon/schemas/clients.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ..validators import is_valid_cpf
from .common import DateStr


class ClientCreate(BaseModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    cpf: Optional[str] = None
    email: Optional[str] = None
    birthdate: Optional[DateStr] = None
    notes: Optional[str] = None

    @field_validator("cpf")
    @classmethod
    def _check_cpf(cls, value: Optional[str]) -> Optional[str]:
        if value and not is_valid_cpf(value):
            raise ValueError("Invalid CPF")
        return value or None


class ClientCreated(BaseModel):
    success: bool = True
    id: int
    name: str


class ClientRead(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    birthdate: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    cpf: Optional[str] = None
    phone: Optional[str] = None


class ClientProfile(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    birthdate: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    cpf_display: Optional[str] = None
    phone_display: Optional[str] = None


class ClientSale(BaseModel):
    id: int
    value: float
    payment_method: str
    sale_date: str
    service_name: Optional[str] = None


class ClientAppointment(BaseModel):
    id: int
    appointment_date: str
    appointment_time: str
    notes: Optional[str] = None
    status: str
    service_name: Optional[str] = None


class ClientHistory(BaseModel):
    client: Optional[ClientProfile] = None
    sales: list[ClientSale]
    appointments: list[ClientAppointment]
    totalSpent: float
    visitCount: int
