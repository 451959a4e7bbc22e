# salon/schemas/slots.py

from pydantic import BaseModel


class TodaySlotsResponse(BaseModel):
    date: str
    slots: list[str]
    total: int
    available: int
