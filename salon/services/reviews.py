# salon/services/reviews.py
"""
Reviews: one per client identity.

The identity column is a policy choice (phone or CPF). Identity values are
reduced to digits before they are compared or stored.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import Conflict, NotFound, ValidationFailed
from ..models.tables import Reviews
from ..validators import normalize_cpf, normalize_phone

logger = logging.getLogger(__name__)

PUBLIC_LIMIT = 50
DUPLICATE_MESSAGE = "You have already left a review. Use the edit option."


@dataclass(frozen=True)
class IdentityStrategy:
    name: str
    column: str
    normalizer: Callable[[str], str]
    invalid_message: str

    def normalize(self, value: str | None) -> str:
        try:
            return self.normalizer(value)
        except ValueError:
            raise ValidationFailed(self.invalid_message) from None

    @property
    def attribute(self):
        return getattr(Reviews, self.column)


IDENTITY_STRATEGIES = {
    "phone": IdentityStrategy("phone", "client_phone", normalize_phone, "Invalid phone number"),
    "cpf": IdentityStrategy("cpf", "client_cpf", normalize_cpf, "Invalid CPF"),
}


def get_identity_strategy(name: str) -> IdentityStrategy:
    try:
        return IDENTITY_STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown review identity: {name}") from None


def list_public_reviews(db: Session) -> list[Reviews]:
    return (
        db.query(Reviews)
        .filter(Reviews.approved.is_(True))
        .order_by(Reviews.created_at.desc(), Reviews.id.desc())
        .limit(PUBLIC_LIMIT)
        .all()
    )


def find_review(db: Session, strategy: IdentityStrategy, identity: str | None) -> Reviews | None:
    value = strategy.normalize(identity)
    return db.query(Reviews).filter(strategy.attribute == value).first()


def create_review(
    db: Session,
    strategy: IdentityStrategy,
    identity: str | None,
    client_name: str,
    rating: int,
    comment: str | None,
) -> Reviews:
    value = strategy.normalize(identity)

    if db.query(Reviews.id).filter(strategy.attribute == value).first():
        raise Conflict(DUPLICATE_MESSAGE)

    obj = Reviews(
        client_name=client_name,
        rating=rating,
        comment=comment or "",
        **{strategy.column: value},
    )
    db.add(obj)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict(DUPLICATE_MESSAGE) from None

    db.refresh(obj)
    logger.info(f"Review {obj.id} created (rating={rating})")
    return obj


def update_review(
    db: Session,
    strategy: IdentityStrategy,
    identity: str | None,
    client_name: str,
    rating: int,
    comment: str | None,
) -> Reviews:
    obj = find_review(db, strategy, identity)
    if not obj:
        raise NotFound("Review not found")

    obj.client_name = client_name
    obj.rating = rating
    obj.comment = comment or ""
    obj.created_at = func.now()
    db.commit()

    db.refresh(obj)
    logger.info(f"Review {obj.id} updated (rating={rating})")
    return obj


def delete_review(db: Session, review_id: int) -> None:
    deleted = db.query(Reviews).filter(Reviews.id == review_id).delete()
    if not deleted:
        raise NotFound("Review not found")
    db.commit()
    logger.info(f"Review {review_id} deleted")
