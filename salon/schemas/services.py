# salon/schemas/services.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ServiceCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(ge=0)
    duration: int = Field(gt=0, description="Minutes")

    model_config = {"from_attributes": True}


class ServiceRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    duration: int
    active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
