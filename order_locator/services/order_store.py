import logging
from typing import List

import pydantic
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from order_locator.core.errors import StorageError
from order_locator.models.order import Order
from order_locator.schemas.order import OrderCreate, OrderRead

logger = logging.getLogger(__name__)


class OrderStore:
    """Append-only access to the orders table.

    There is no update or delete: a stored order never changes.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, order_data: OrderCreate) -> None:
        new_order = Order(
            name=order_data.name,
            phone=order_data.phone,
            address=order_data.address,
            preferable_delivery_time=order_data.preferable_delivery_time,
        )
        try:
            self.session.add(new_order)
            await self.session.commit()
        except (SQLAlchemyError, OSError) as e:
            await self.session.rollback()
            raise StorageError(f"could not store order: {e}") from e

        logger.info("Stored order for %r", order_data.name)

    async def list_all(self) -> List[OrderRead]:
        stmt = select(Order).order_by(Order.id)
        try:
            result = await self.session.execute(stmt)
            rows = result.scalars().all()
            return [OrderRead.model_validate(row) for row in rows]
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"could not read orders: {e}") from e
        except pydantic.ValidationError as e:
            raise StorageError(f"could not decode stored order: {e}") from e
