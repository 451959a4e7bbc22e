# salon/routers/online_appointments.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_clock, get_masker, require_admin
from ..models.tables import (
    ONLINE_CONFIRMED,
    OnlineAppointments as DBOnlineAppointments,
    Services as DBServices,
)
from ..schemas.common import RecordSaved
from ..schemas.online_appointments import (
    OnlineAppointmentCreate,
    OnlineAppointmentCreated,
    OnlineAppointmentRead,
    ReminderRead,
)
from ..services import booking
from ..services.clock import BusinessClock
from ..services.sessions import PiiMasker

router = APIRouter(prefix="/api/appointments", tags=["online-appointments"])
admin_router = APIRouter(
    prefix="/api/admin",
    tags=["online-appointments"],
    dependencies=[Depends(require_admin)],
)


@router.post("", response_model=OnlineAppointmentCreated)
def create_appointment(data: OnlineAppointmentCreate, db: Session = Depends(get_db)):
    fields = data.model_dump()
    fields["client_cpf"] = fields["client_cpf"] or ""
    obj = booking.create_online_appointment(db, fields)
    return OnlineAppointmentCreated(
        id=obj.id,
        appointment_date=obj.appointment_date,
        appointment_time=obj.appointment_time,
        status=obj.status,
    )


@admin_router.get("/online-appointments", response_model=list[OnlineAppointmentRead])
def list_online_appointments(
    db: Session = Depends(get_db),
    masker: PiiMasker = Depends(get_masker),
):
    rows = (
        db.query(
            DBOnlineAppointments,
            DBServices.name.label("service_name"),
            DBServices.price.label("service_price"),
        )
        .outerjoin(DBServices, DBOnlineAppointments.service_id == DBServices.id)
        .order_by(
            DBOnlineAppointments.appointment_date.desc(),
            DBOnlineAppointments.appointment_time.desc(),
        )
        .all()
    )

    return [
        OnlineAppointmentRead(
            id=obj.id,
            client_name=obj.client_name,
            client_email=obj.client_email,
            client_cpf=masker.cpf(obj.client_cpf),
            client_phone=masker.phone(obj.client_phone),
            service_id=obj.service_id,
            service_name=service_name,
            service_price=service_price,
            appointment_date=obj.appointment_date,
            appointment_time=obj.appointment_time,
            status=obj.status,
            reminder_sent=obj.reminder_sent,
            created_at=obj.created_at,
            confirmed_at=obj.confirmed_at,
            cancelled_at=obj.cancelled_at,
        )
        for obj, service_name, service_price in rows
    ]


@admin_router.put("/online-appointments/{id}/confirm", response_model=RecordSaved)
def confirm_appointment(id: int, db: Session = Depends(get_db)):
    obj = booking.confirm_online_appointment(db, id)
    return RecordSaved(id=obj.id)


@admin_router.put("/online-appointments/{id}/cancel", response_model=RecordSaved)
def cancel_appointment(id: int, db: Session = Depends(get_db)):
    obj = booking.cancel_online_appointment(db, id)
    return RecordSaved(id=obj.id)


@admin_router.put("/online-appointments/{id}/reminder-sent", response_model=RecordSaved)
def reminder_sent(id: int, db: Session = Depends(get_db)):
    obj = booking.mark_reminder_sent(db, id)
    return RecordSaved(id=obj.id)


@admin_router.get("/reminders", response_model=list[ReminderRead])
def list_reminders(
    db: Session = Depends(get_db),
    masker: PiiMasker = Depends(get_masker),
    clock: BusinessClock = Depends(get_clock),
):
    """Confirmed bookings for tomorrow that still need a reminder."""
    tomorrow = clock.tomorrow().isoformat()

    rows = (
        db.query(DBOnlineAppointments, DBServices.name.label("service_name"))
        .outerjoin(DBServices, DBOnlineAppointments.service_id == DBServices.id)
        .filter(
            DBOnlineAppointments.appointment_date == tomorrow,
            DBOnlineAppointments.status == ONLINE_CONFIRMED,
            DBOnlineAppointments.reminder_sent.is_(False),
        )
        .order_by(DBOnlineAppointments.appointment_time)
        .all()
    )

    return [
        ReminderRead(
            id=obj.id,
            client_name=obj.client_name,
            client_email=obj.client_email,
            client_cpf=masker.cpf(obj.client_cpf),
            client_phone=masker.phone(obj.client_phone),
            service_id=obj.service_id,
            service_name=service_name,
            appointment_date=obj.appointment_date,
            appointment_time=obj.appointment_time,
            status=obj.status,
        )
        for obj, service_name in rows
    ]
