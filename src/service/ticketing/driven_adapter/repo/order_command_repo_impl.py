from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_order_command_repo import IOrderCommandRepo
from src.service.ticketing.domain.entity.order_entity import OrderEntity
from src.service.ticketing.driven_adapter.model.order_model import OrderModel


class OrderCommandRepoImpl(IOrderCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, order: OrderEntity) -> int:
        model = OrderModel(
            order_date=order.order_date,
            subtotal=order.subtotal,
            discount_amount=order.discount_amount,
            payment_method=order.payment_method,
            status=order.status.value,
            customer_email=order.customer_email,
        )
        self.session.add(model)
        await self.session.flush()  # Assigns order_id

        return model.order_id
