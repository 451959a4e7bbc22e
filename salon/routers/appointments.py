# salon/routers/appointments.py
# Manual appointments entered from the admin panel

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_masker
from ..models.tables import (
    Appointments as DBAppointments,
    Clients as DBClients,
    Services as DBServices,
)
from ..schemas.appointments import (
    AppointmentCreate,
    AppointmentRead,
    AppointmentStatusUpdate,
)
from ..schemas.auth import SuccessResponse
from ..schemas.common import RecordSaved
from ..services import booking
from ..services.sessions import PiiMasker

router = APIRouter(
    prefix="/api/admin/appointments",
    tags=["appointments"],
    dependencies=[Depends(get_masker)],
)


@router.get("", response_model=list[AppointmentRead])
def list_appointments(
    db: Session = Depends(get_db),
    masker: PiiMasker = Depends(get_masker),
):
    rows = (
        db.query(
            DBAppointments,
            DBClients.name.label("client_name"),
            DBClients.phone.label("client_phone"),
            DBClients.cpf.label("client_cpf"),
            DBServices.name.label("service_name"),
        )
        .outerjoin(DBClients, DBAppointments.client_id == DBClients.id)
        .outerjoin(DBServices, DBAppointments.service_id == DBServices.id)
        .order_by(DBAppointments.appointment_date.desc(), DBAppointments.appointment_time.desc())
        .all()
    )

    return [
        AppointmentRead(
            id=obj.id,
            client_id=obj.client_id,
            client_name=client_name,
            client_phone=masker.phone(client_phone),
            client_cpf=masker.cpf(client_cpf),
            service_id=obj.service_id,
            service_name=service_name,
            appointment_date=obj.appointment_date,
            appointment_time=obj.appointment_time,
            status=obj.status,
            notes=obj.notes,
            created_at=obj.created_at,
        )
        for obj, client_name, client_phone, client_cpf, service_name in rows
    ]


@router.post("", response_model=RecordSaved)
def create_appointment(data: AppointmentCreate, db: Session = Depends(get_db)):
    obj = booking.create_manual_appointment(db, data.model_dump())
    return RecordSaved(id=obj.id)


@router.put("/{id}/status", response_model=RecordSaved)
def update_status(id: int, data: AppointmentStatusUpdate, db: Session = Depends(get_db)):
    obj = booking.set_manual_status(db, id, data.status)
    return RecordSaved(id=obj.id)


@router.delete("/{id}", response_model=SuccessResponse)
def delete_appointment(id: int, db: Session = Depends(get_db)):
    booking.delete_manual_appointment(db, id)
    return SuccessResponse()
