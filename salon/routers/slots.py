# salon/routers/slots.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_clock, get_slot_policy
from ..schemas.slots import TodaySlotsResponse
from ..services.clock import BusinessClock
from ..services.slots import SlotPolicy, available_slots

router = APIRouter(prefix="/api", tags=["slots"])


@router.get("/available-slots", response_model=list[str])
def get_available_slots(
    date: str,
    service_id: int | None = None,
    db: Session = Depends(get_db),
    policy: SlotPolicy = Depends(get_slot_policy),
    clock: BusinessClock = Depends(get_clock),
):
    """Bookable times for a date. service_id is accepted but slots are shared by all services."""
    return available_slots(db, date, policy, clock)


@router.get("/today-slots", response_model=TodaySlotsResponse)
def get_today_slots(
    db: Session = Depends(get_db),
    policy: SlotPolicy = Depends(get_slot_policy),
    clock: BusinessClock = Depends(get_clock),
):
    today = clock.today().isoformat()
    slots = available_slots(db, today, policy, clock)

    return TodaySlotsResponse(
        date=today,
        slots=slots,
        total=len(policy.template),
        available=len(slots),
    )
