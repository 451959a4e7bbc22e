# salon/schemas/reviews.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    client_name: str = Field(min_length=1)
    client_phone: Optional[str] = None
    client_cpf: Optional[str] = None
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None


class ReviewUpdate(BaseModel):
    client_name: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None


class ReviewRead(BaseModel):
    """Public view: identity fields are never returned."""
    id: int
    client_name: str
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ReviewSaved(BaseModel):
    success: bool = True
    review: ReviewRead


class ReviewCheck(BaseModel):
    hasReview: bool
    review: Optional[ReviewRead] = None
