# salon/schemas/online_appointments.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ..validators import is_valid_cpf
from .common import DateStr, TimeStr


class OnlineAppointmentCreate(BaseModel):
    client_name: str = Field(min_length=1)
    client_phone: str = Field(min_length=1)
    client_cpf: Optional[str] = None
    client_email: Optional[str] = None
    service_id: Optional[int] = None
    appointment_date: DateStr
    appointment_time: TimeStr
    notes: Optional[str] = None

    @field_validator("client_cpf")
    @classmethod
    def _check_cpf(cls, value: Optional[str]) -> Optional[str]:
        if value and not is_valid_cpf(value):
            raise ValueError("Invalid CPF")
        return value


class OnlineAppointmentCreated(BaseModel):
    """Public booking receipt: no personal data echoed back."""
    success: bool = True
    id: int
    appointment_date: str
    appointment_time: str
    status: str

    model_config = {"from_attributes": True}


class OnlineAppointmentRead(BaseModel):
    id: int
    client_name: str
    client_email: Optional[str] = None
    client_cpf: Optional[str] = None
    client_phone: Optional[str] = None
    service_id: Optional[int] = None
    service_name: Optional[str] = None
    service_price: Optional[float] = None
    appointment_date: str
    appointment_time: str
    status: str
    reminder_sent: bool
    created_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None


class ReminderRead(BaseModel):
    id: int
    client_name: str
    client_email: Optional[str] = None
    client_cpf: Optional[str] = None
    client_phone: Optional[str] = None
    service_id: Optional[int] = None
    service_name: Optional[str] = None
    appointment_date: str
    appointment_time: str
    status: str
