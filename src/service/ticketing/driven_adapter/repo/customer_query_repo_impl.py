"""
Customer Query Repository Implementation - CQRS Read Side
"""

from typing import List, Optional

from sqlalchemy import and_, select

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.customer_dto import PurchaseHistoryItem
from src.service.ticketing.app.interface.i_customer_query_repo import ICustomerQueryRepo
from src.service.ticketing.domain.entity.customer_entity import CustomerEntity
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.value_object.seat_position import SeatPosition
from src.service.ticketing.driven_adapter.model.check_in_model import CheckInModel
from src.service.ticketing.driven_adapter.model.customer_model import CustomerModel
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.order_model import OrderModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.repo.model_mapper import model_to_customer
from src.service.ticketing.driven_adapter.repo.query_repo_base import QueryRepoBase


class CustomerQueryRepoImpl(QueryRepoBase, ICustomerQueryRepo):
    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[CustomerEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(CustomerModel).where(CustomerModel.email == email)
            )
            model = result.scalar_one_or_none()
            return model_to_customer(model) if model else None

    @Logger.io
    async def list_purchase_history(self, *, email: str) -> List[PurchaseHistoryItem]:
        stmt = (
            select(TicketModel, OrderModel, EventModel.status, CheckInModel.qr_code)
            .join(OrderModel, TicketModel.order_id == OrderModel.order_id)
            .join(
                EventModel,
                and_(
                    EventModel.name == TicketModel.event_name,
                    EventModel.event_date == TicketModel.event_date,
                    EventModel.venue_name == TicketModel.venue_name,
                    EventModel.venue_address == TicketModel.venue_address,
                ),
            )
            .outerjoin(CheckInModel, CheckInModel.qr_code == TicketModel.qr_code)
            .where(OrderModel.customer_email == email)
            .order_by(OrderModel.order_date.desc(), OrderModel.order_id.desc())
        )

        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [
                PurchaseHistoryItem(
                    qr_code=ticket.qr_code,
                    order_id=order.order_id,
                    order_date=order.order_date,
                    payment_method=order.payment_method,
                    price=order.subtotal,
                    event_name=ticket.event_name,
                    event_date=ticket.event_date,
                    event_status=EventStatus(event_status),
                    venue_name=ticket.venue_name,
                    position=SeatPosition(
                        section=ticket.section, row=ticket.seat_row, number=ticket.seat_number
                    ),
                    checked_in=checked_in_qr is not None,
                )
                for ticket, order, event_status, checked_in_qr in result.all()
            ]
