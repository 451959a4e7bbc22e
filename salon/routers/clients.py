# salon/routers/clients.py

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_masker
from ..errors import NotFound
from ..models.tables import (
    Appointments as DBAppointments,
    Clients as DBClients,
    Sales as DBSales,
    Services as DBServices,
)
from ..schemas.auth import SuccessResponse
from ..schemas.clients import (
    ClientAppointment,
    ClientCreate,
    ClientCreated,
    ClientHistory,
    ClientProfile,
    ClientRead,
    ClientSale,
)
from ..services.sessions import PiiMasker

router = APIRouter(
    prefix="/api/admin/clients",
    tags=["clients"],
    dependencies=[Depends(get_masker)],
)


@router.get("", response_model=list[ClientRead])
def list_clients(
    db: Session = Depends(get_db),
    masker: PiiMasker = Depends(get_masker),
):
    return [
        ClientRead(
            id=obj.id,
            name=obj.name,
            email=obj.email,
            birthdate=obj.birthdate,
            notes=obj.notes,
            created_at=obj.created_at,
            cpf=masker.cpf(obj.cpf),
            phone=masker.phone(obj.phone),
        )
        for obj in db.query(DBClients).order_by(DBClients.name).all()
    ]


@router.post("", response_model=ClientCreated)
def create_client(data: ClientCreate, db: Session = Depends(get_db)):
    obj = DBClients(**data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return ClientCreated(id=obj.id, name=obj.name)


@router.delete("/{id}", response_model=SuccessResponse)
def delete_client(id: int, db: Session = Depends(get_db)):
    obj = db.get(DBClients, id)
    if not obj:
        raise NotFound("Client not found")

    db.delete(obj)
    db.commit()
    return SuccessResponse()


@router.get("/{id}/history", response_model=ClientHistory)
def client_history(
    id: int,
    db: Session = Depends(get_db),
    masker: PiiMasker = Depends(get_masker),
):
    obj = db.get(DBClients, id)
    client = None
    if obj:
        client = ClientProfile(
            id=obj.id,
            name=obj.name,
            email=obj.email,
            birthdate=obj.birthdate,
            notes=obj.notes,
            created_at=obj.created_at,
            cpf_display=masker.cpf(obj.cpf),
            phone_display=masker.phone(obj.phone),
        )

    sales = (
        db.query(DBSales, DBServices.name.label("service_name"))
        .outerjoin(DBServices, DBSales.service_id == DBServices.id)
        .filter(DBSales.client_id == id)
        .order_by(DBSales.sale_date.desc(), DBSales.id.desc())
        .all()
    )
    appointments = (
        db.query(DBAppointments, DBServices.name.label("service_name"))
        .outerjoin(DBServices, DBAppointments.service_id == DBServices.id)
        .filter(DBAppointments.client_id == id)
        .order_by(DBAppointments.appointment_date.desc(), DBAppointments.appointment_time.desc())
        .all()
    )
    total_spent, visit_count = (
        db.query(func.coalesce(func.sum(DBSales.value), 0), func.count(DBSales.id))
        .filter(DBSales.client_id == id)
        .one()
    )

    return ClientHistory(
        client=client,
        sales=[
            ClientSale(
                id=sale.id,
                value=sale.value,
                payment_method=sale.payment_method,
                sale_date=sale.sale_date,
                service_name=service_name,
            )
            for sale, service_name in sales
        ],
        appointments=[
            ClientAppointment(
                id=appt.id,
                appointment_date=appt.appointment_date,
                appointment_time=appt.appointment_time,
                notes=appt.notes,
                status=appt.status,
                service_name=service_name,
            )
            for appt, service_name in appointments
        ],
        totalSpent=float(total_spent),
        visitCount=int(visit_count),
    )
