# salon/schemas/appointments.py

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel

from .common import DateStr, TimeStr


class AppointmentCreate(BaseModel):
    client_id: Optional[int] = None
    service_id: Optional[int] = None
    appointment_date: DateStr
    appointment_time: TimeStr
    status: Literal["scheduled", "done"] = "scheduled"
    notes: Optional[str] = None


class AppointmentStatusUpdate(BaseModel):
    status: Literal["scheduled", "done", "cancelled"]


class AppointmentRead(BaseModel):
    id: int
    client_id: Optional[int] = None
    client_name: Optional[str] = None
    client_phone: Optional[str] = None
    client_cpf: Optional[str] = None
    service_id: Optional[int] = None
    service_name: Optional[str] = None
    appointment_date: str
    appointment_time: str
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
