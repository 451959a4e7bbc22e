# salon/routers/services.py
# DELETE = soft-delete (active = false)

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import require_admin
from ..errors import NotFound
from ..models.tables import Services as DBServices
from ..schemas.auth import SuccessResponse
from ..schemas.services import ServiceCreate, ServiceRead

router = APIRouter(prefix="/api/services", tags=["services"])
admin_router = APIRouter(
    prefix="/api/admin/services",
    tags=["services"],
    dependencies=[Depends(require_admin)],
)


def _active_services(db: Session) -> list[DBServices]:
    return (
        db.query(DBServices)
        .filter(DBServices.active.is_(True))
        .order_by(DBServices.name)
        .all()
    )


@router.get("", response_model=list[ServiceRead])
def list_services(db: Session = Depends(get_db)):
    return _active_services(db)


@admin_router.get("", response_model=list[ServiceRead])
def admin_list_services(db: Session = Depends(get_db)):
    return _active_services(db)


@admin_router.post("", response_model=ServiceRead)
def create_service(data: ServiceCreate, db: Session = Depends(get_db)):
    obj = DBServices(**data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@admin_router.delete("/{id}", response_model=SuccessResponse)
def delete_service(id: int, db: Session = Depends(get_db)):
    obj = db.get(DBServices, id)
    if not obj:
        raise NotFound("Service not found")

    obj.active = False
    db.commit()
    return SuccessResponse()
