# salon/services/booking.py
"""
Appointment creation and status transitions.

Slot ownership:
  Every non-cancelled appointment (online or manual) holds one slot_claims
  row; UNIQUE(appointment_date, appointment_time) makes the store reject a
  second holder even when two requests pass the pre-check concurrently.
"""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import Conflict, NotFound
from ..models.tables import (
    Appointments,
    Clients,
    MANUAL_CANCELLED,
    ONLINE_CANCELLED,
    ONLINE_CONFIRMED,
    OnlineAppointments,
    Services,
    SlotClaims,
)
from .slots import booked_times

logger = logging.getLogger(__name__)

SLOT_TAKEN_MESSAGE = "Time slot not available"


def slot_is_taken(db: Session, appointment_date: str, appointment_time: str) -> bool:
    return appointment_time[:5] in booked_times(db, appointment_date)


def create_online_appointment(db: Session, data: dict) -> OnlineAppointments:
    """
    Book a slot from the public site.

    Raises:
        NotFound: service_id does not point to an active service
        Conflict: the (date, time) pair is already held
    """
    _require_active_service(db, data.get("service_id"))
    _precheck_slot(db, data["appointment_date"], data["appointment_time"])

    obj = OnlineAppointments(**data)
    db.add(obj)
    db.flush()
    db.add(_claim_for(obj, online_appointment_id=obj.id))
    _commit_claim(db, obj.appointment_date, obj.appointment_time)

    db.refresh(obj)
    logger.info(
        f"Online appointment {obj.id} booked for "
        f"{obj.appointment_date} {obj.appointment_time}"
    )
    return obj


def create_manual_appointment(db: Session, data: dict) -> Appointments:
    """Book a slot from the admin panel (same slot rules as online bookings)."""
    if data.get("client_id") is not None and not db.get(Clients, data["client_id"]):
        raise NotFound("Client not found")
    if data.get("service_id") is not None and not db.get(Services, data["service_id"]):
        raise NotFound("Service not found")
    _precheck_slot(db, data["appointment_date"], data["appointment_time"])

    obj = Appointments(**data)
    db.add(obj)
    db.flush()
    if obj.status != MANUAL_CANCELLED:
        db.add(_claim_for(obj, appointment_id=obj.id))
    _commit_claim(db, obj.appointment_date, obj.appointment_time)

    db.refresh(obj)
    logger.info(
        f"Manual appointment {obj.id} booked for "
        f"{obj.appointment_date} {obj.appointment_time}"
    )
    return obj


def delete_manual_appointment(db: Session, appointment_id: int) -> None:
    obj = db.get(Appointments, appointment_id)
    if not obj:
        raise NotFound("Appointment not found")

    db.query(SlotClaims).filter(SlotClaims.appointment_id == appointment_id).delete()
    db.delete(obj)
    db.commit()
    logger.info(f"Manual appointment {appointment_id} deleted")


def set_manual_status(db: Session, appointment_id: int, status: str) -> Appointments:
    """
    Move a manual appointment between scheduled, done and cancelled.

    Cancelling releases the slot; leaving cancelled has to win it back.
    """
    obj = db.get(Appointments, appointment_id)
    if not obj:
        raise NotFound("Appointment not found")

    if status == MANUAL_CANCELLED and obj.status != MANUAL_CANCELLED:
        db.query(SlotClaims).filter(SlotClaims.appointment_id == appointment_id).delete()
    elif status != MANUAL_CANCELLED and obj.status == MANUAL_CANCELLED:
        _precheck_slot(db, obj.appointment_date, obj.appointment_time)
        db.add(_claim_for(obj, appointment_id=obj.id))

    obj.status = status
    _commit_claim(db, obj.appointment_date, obj.appointment_time)

    db.refresh(obj)
    logger.info(f"Manual appointment {appointment_id} marked {status}")
    return obj


def confirm_online_appointment(db: Session, appointment_id: int) -> OnlineAppointments:
    obj = _get_online(db, appointment_id)

    if obj.status == ONLINE_CANCELLED:
        # Re-confirming a cancelled booking has to win its slot back
        _precheck_slot(db, obj.appointment_date, obj.appointment_time)
        db.add(_claim_for(obj, online_appointment_id=obj.id))

    obj.status = ONLINE_CONFIRMED
    obj.confirmed_at = func.now()
    _commit_claim(db, obj.appointment_date, obj.appointment_time)

    db.refresh(obj)
    logger.info(f"Online appointment {appointment_id} confirmed")
    return obj


def cancel_online_appointment(db: Session, appointment_id: int) -> OnlineAppointments:
    obj = _get_online(db, appointment_id)

    obj.status = ONLINE_CANCELLED
    obj.cancelled_at = func.now()
    db.query(SlotClaims).filter(SlotClaims.online_appointment_id == appointment_id).delete()
    db.commit()

    db.refresh(obj)
    logger.info(f"Online appointment {appointment_id} cancelled, slot released")
    return obj


def mark_reminder_sent(db: Session, appointment_id: int) -> OnlineAppointments:
    obj = _get_online(db, appointment_id)
    obj.reminder_sent = True
    db.commit()
    db.refresh(obj)
    return obj


# ── Helpers ──────────────────────────────────────────────────────────────


def _get_online(db: Session, appointment_id: int) -> OnlineAppointments:
    obj = db.get(OnlineAppointments, appointment_id)
    if not obj:
        raise NotFound("Appointment not found")
    return obj


def _require_active_service(db: Session, service_id: int | None) -> None:
    if service_id is None:
        return
    service = db.get(Services, service_id)
    if not service or not service.active:
        raise NotFound("Service not found")


def _precheck_slot(db: Session, appointment_date: str, appointment_time: str) -> None:
    if slot_is_taken(db, appointment_date, appointment_time):
        logger.info(f"Slot {appointment_date} {appointment_time} already taken")
        raise Conflict(SLOT_TAKEN_MESSAGE)


def _claim_for(obj, **owner) -> SlotClaims:
    return SlotClaims(
        appointment_date=obj.appointment_date,
        appointment_time=obj.appointment_time[:5],
        **owner,
    )


def _commit_claim(db: Session, appointment_date: str, appointment_time: str) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(
            f"Slot {appointment_date} {appointment_time} "
            f"claimed concurrently, booking rejected"
        )
        raise Conflict(SLOT_TAKEN_MESSAGE) from None
