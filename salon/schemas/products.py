# salon/schemas/products.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, computed_field


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    category: Optional[str] = None
    quantity: int = Field(0, ge=0)
    min_stock: Optional[int] = Field(None, ge=0)


class StockUpdate(BaseModel):
    delta: int


class ProductRead(BaseModel):
    id: int
    name: str
    category: Optional[str] = None
    quantity: int
    min_stock: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def low_stock(self) -> bool:
        return self.quantity <= self.min_stock
