# salon/routers/reviews.py
# Public: one review per client identity (phone or CPF, see REVIEW_IDENTITY)

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_review_identity, require_admin
from ..errors import ValidationFailed
from ..schemas.auth import SuccessResponse
from ..schemas.reviews import (
    ReviewCheck,
    ReviewCreate,
    ReviewRead,
    ReviewSaved,
    ReviewUpdate,
)
from ..services import reviews as review_service
from ..services.reviews import IdentityStrategy

router = APIRouter(prefix="/api/reviews", tags=["reviews"])
admin_router = APIRouter(
    prefix="/api/admin/reviews",
    tags=["reviews"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=list[ReviewRead])
def list_reviews(db: Session = Depends(get_db)):
    return review_service.list_public_reviews(db)


@router.get("/check/{identity}", response_model=ReviewCheck)
def check_review(
    identity: str,
    db: Session = Depends(get_db),
    strategy: IdentityStrategy = Depends(get_review_identity),
):
    obj = review_service.find_review(db, strategy, identity)
    if not obj:
        return ReviewCheck(hasReview=False)
    return ReviewCheck(hasReview=True, review=ReviewRead.model_validate(obj))


@router.post("", response_model=ReviewSaved)
def create_review(
    data: ReviewCreate,
    db: Session = Depends(get_db),
    strategy: IdentityStrategy = Depends(get_review_identity),
):
    identity = getattr(data, strategy.column)
    if not identity:
        raise ValidationFailed(f"{strategy.column} is required")

    obj = review_service.create_review(
        db,
        strategy,
        identity,
        client_name=data.client_name,
        rating=data.rating,
        comment=data.comment,
    )
    return ReviewSaved(review=ReviewRead.model_validate(obj))


@router.put("/{identity}", response_model=ReviewSaved)
def update_review(
    identity: str,
    data: ReviewUpdate,
    db: Session = Depends(get_db),
    strategy: IdentityStrategy = Depends(get_review_identity),
):
    obj = review_service.update_review(
        db,
        strategy,
        identity,
        client_name=data.client_name,
        rating=data.rating,
        comment=data.comment,
    )
    return ReviewSaved(review=ReviewRead.model_validate(obj))


@admin_router.delete("/{id}", response_model=SuccessResponse)
def delete_review(id: int, db: Session = Depends(get_db)):
    review_service.delete_review(db, id)
    return SuccessResponse()
