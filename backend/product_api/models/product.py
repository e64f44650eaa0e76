"""Product ORM — persists the single resource exposed by the API.

Invariants:
    - id is an autoincrement integer primary key, assigned by the store
    - name is non-nullable, at most 100 characters
    - price is non-nullable and strictly positive (CHECK constraint)
    - availability defaults to True at creation
    - created_at / updated_at are set by the application on write

Design Decisions:
    - Float for price: the API speaks JSON numbers, no currency arithmetic happens here
    - name length bound shared with the validation rule (NAME_MAX_LENGTH), so an
      over-long name is a 400 and never reaches the column
    - CHECK constraint mirrors the validation rule so a bypassing writer cannot
      store price <= 0
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from product_api.core.validation import NAME_MAX_LENGTH
from product_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """A sellable item with a name, a positive price and an availability flag."""
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_price_positive"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=False,
    )
    price: Mapped[float] = mapped_column(Float, nullable=False)
    availability: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
