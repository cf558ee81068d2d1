from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.customer_dto import LoyaltyCandidate
from src.service.ticketing.app.interface.i_customer_command_repo import ICustomerCommandRepo
from src.service.ticketing.domain.entity.customer_entity import CustomerEntity
from src.service.ticketing.domain.enum.loyalty_tier import LoyaltyTier
from src.service.ticketing.driven_adapter.model.customer_model import CustomerModel
from src.service.ticketing.driven_adapter.model.order_model import OrderModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.repo.model_mapper import model_to_customer


class CustomerCommandRepoImpl(ICustomerCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[CustomerEntity]:
        result = await self.session.execute(
            select(CustomerModel).where(CustomerModel.email == email)
        )
        model = result.scalar_one_or_none()
        return model_to_customer(model) if model else None

    @Logger.io
    async def list_with_ticket_count(self, *, min_purchases: int) -> List[LoyaltyCandidate]:
        ticket_count = func.count(TicketModel.qr_code)
        result = await self.session.execute(
            select(CustomerModel, ticket_count.label('ticket_count'))
            .outerjoin(OrderModel, OrderModel.customer_email == CustomerModel.email)
            .outerjoin(TicketModel, TicketModel.order_id == OrderModel.order_id)
            .group_by(
                CustomerModel.email,
                CustomerModel.first_name,
                CustomerModel.last_name,
                CustomerModel.loyalty_tier,
            )
            .having(ticket_count >= min_purchases)
            .order_by(CustomerModel.email)
        )
        return [
            LoyaltyCandidate(customer=model_to_customer(model), ticket_count=count)
            for model, count in result.all()
        ]

    @Logger.io
    async def update_loyalty_tier(self, *, email: str, tier: LoyaltyTier) -> None:
        await self.session.execute(
            update(CustomerModel)
            .where(CustomerModel.email == email)
            .values(loyalty_tier=tier.value)
            .execution_options(synchronize_session=False)
        )
