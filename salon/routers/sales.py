# salon/routers/sales.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_clock, require_admin
from ..errors import NotFound
from ..models.tables import (
    Clients as DBClients,
    Sales as DBSales,
    Services as DBServices,
)
from ..schemas.auth import SuccessResponse
from ..schemas.common import RecordSaved
from ..schemas.sales import SaleCreate, SaleRead
from ..services.clock import BusinessClock

router = APIRouter(
    prefix="/api/admin/sales",
    tags=["sales"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=list[SaleRead])
def list_sales(db: Session = Depends(get_db)):
    rows = (
        db.query(
            DBSales,
            DBClients.name.label("client_name"),
            DBServices.name.label("service_name"),
        )
        .outerjoin(DBClients, DBSales.client_id == DBClients.id)
        .outerjoin(DBServices, DBSales.service_id == DBServices.id)
        .order_by(DBSales.sale_date.desc(), DBSales.id.desc())
        .all()
    )

    return [
        SaleRead(
            id=obj.id,
            client_id=obj.client_id,
            client_name=client_name,
            service_id=obj.service_id,
            service_name=service_name,
            value=obj.value,
            payment_method=obj.payment_method,
            sale_date=obj.sale_date,
            notes=obj.notes,
            created_at=obj.created_at,
        )
        for obj, client_name, service_name in rows
    ]


@router.post("", response_model=RecordSaved)
def create_sale(
    data: SaleCreate,
    db: Session = Depends(get_db),
    clock: BusinessClock = Depends(get_clock),
):
    if data.client_id is not None and not db.get(DBClients, data.client_id):
        raise NotFound("Client not found")
    if data.service_id is not None and not db.get(DBServices, data.service_id):
        raise NotFound("Service not found")

    fields = data.model_dump()
    fields["sale_date"] = fields["sale_date"] or clock.today().isoformat()

    obj = DBSales(**fields)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return RecordSaved(id=obj.id)


@router.delete("/{id}", response_model=SuccessResponse)
def delete_sale(id: int, db: Session = Depends(get_db)):
    obj = db.get(DBSales, id)
    if not obj:
        raise NotFound("Sale not found")

    db.delete(obj)
    db.commit()
    return SuccessResponse()
