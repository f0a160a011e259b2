from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from order_locator.core.database import Base


class Order(Base):
    """One stored delivery request. Rows are only ever inserted."""

    __tablename__ = "orders"

    # Internal identity, never exposed outside the store
    id: Mapped[int] = mapped_column(primary_key=True)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    name: Mapped[str] = mapped_column(String, default="")
    phone: Mapped[str] = mapped_column(String, default="")
    address: Mapped[str] = mapped_column(String, default="")
    preferable_delivery_time: Mapped[str] = mapped_column(String, default="")
