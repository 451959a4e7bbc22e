# salon/routers/products.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import require_admin
from ..errors import NotFound
from ..models.tables import Products as DBProducts
from ..schemas.auth import SuccessResponse
from ..schemas.products import ProductCreate, ProductRead, StockUpdate

router = APIRouter(
    prefix="/api/admin/products",
    tags=["products"],
    dependencies=[Depends(require_admin)],
)

DEFAULT_MIN_STOCK = 5


@router.get("", response_model=list[ProductRead])
def list_products(db: Session = Depends(get_db)):
    return db.query(DBProducts).order_by(DBProducts.name).all()


@router.post("", response_model=ProductRead)
def create_product(data: ProductCreate, db: Session = Depends(get_db)):
    fields = data.model_dump()
    if fields["min_stock"] is None:
        fields["min_stock"] = DEFAULT_MIN_STOCK

    obj = DBProducts(**fields)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@router.put("/{id}/stock", response_model=ProductRead)
def update_stock(id: int, data: StockUpdate, db: Session = Depends(get_db)):
    obj = db.get(DBProducts, id)
    if not obj:
        raise NotFound("Product not found")

    obj.quantity = max(0, obj.quantity + data.delta)
    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{id}", response_model=SuccessResponse)
def delete_product(id: int, db: Session = Depends(get_db)):
    obj = db.get(DBProducts, id)
    if not obj:
        raise NotFound("Product not found")

    db.delete(obj)
    db.commit()
    return SuccessResponse()
