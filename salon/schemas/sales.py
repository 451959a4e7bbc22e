# salon/schemas/sales.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .common import DateStr


class SaleCreate(BaseModel):
    client_id: Optional[int] = None
    service_id: Optional[int] = None
    value: float = Field(ge=0)
    payment_method: str = Field(min_length=1)
    sale_date: Optional[DateStr] = None
    notes: Optional[str] = None


class SaleRead(BaseModel):
    id: int
    client_id: Optional[int] = None
    client_name: Optional[str] = None
    service_id: Optional[int] = None
    service_name: Optional[str] = None
    value: float
    payment_method: str
    sale_date: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
