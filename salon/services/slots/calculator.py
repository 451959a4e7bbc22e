# salon/services/slots/calculator.py
"""
Available slots for one date.

Dates and times are stored as "YYYY-MM-DD" / "HH:MM" strings; a slot is
taken when the exact string pair is held by a non-cancelled appointment in
either appointment table.
"""

from datetime import datetime

from sqlalchemy import union
from sqlalchemy.orm import Session

from ...models.tables import Appointments, CANCELLED_STATUSES, OnlineAppointments
from ..clock import BusinessClock
from .config import SlotPolicy, time_str_to_minutes


def available_slots(
    db: Session,
    target_date: str,
    policy: SlotPolicy,
    clock: BusinessClock,
) -> list[str]:
    """
    Return the bookable "HH:MM" times for target_date in template order.

    target_date is compared as a plain string, so malformed dates simply
    match no bookings. Only today's slots are filtered by elapsed time.
    """
    taken = booked_times(db, target_date)
    slots = [slot for slot in policy.template if slot not in taken]

    now = clock.now()
    if target_date == now.date().isoformat():
        slots = drop_elapsed(slots, now, policy.margin_minutes)

    return slots


def booked_times(db: Session, target_date: str) -> set[str]:
    """Times claimed on target_date across online and manual appointments."""
    online = (
        db.query(OnlineAppointments.appointment_time)
        .filter(
            OnlineAppointments.appointment_date == target_date,
            OnlineAppointments.status.notin_(CANCELLED_STATUSES),
        )
    )
    manual = (
        db.query(Appointments.appointment_time)
        .filter(
            Appointments.appointment_date == target_date,
            Appointments.status.notin_(CANCELLED_STATUSES),
        )
    )
    rows = db.execute(union(online.statement, manual.statement)).all()
    return {row[0][:5] for row in rows}


def drop_elapsed(slots: list[str], now: datetime, margin_minutes: int) -> list[str]:
    """Keep slots starting strictly after now + margin_minutes."""
    cutoff = now.hour * 3600 + now.minute * 60 + now.second + margin_minutes * 60
    return [
        slot for slot in slots
        if time_str_to_minutes(slot) * 60 > cutoff
    ]
