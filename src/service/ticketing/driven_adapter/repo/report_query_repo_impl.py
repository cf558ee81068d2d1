"""
Sales Report Query Repository Implementation - CQRS Read Side

One row per event (events without sales included); the check-in rate is
derived from the counts in EventSalesReport.
"""

from typing import List, Optional

from sqlalchemy import Numeric, and_, cast, distinct, func, select

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.report_dto import EventSalesReport
from src.service.ticketing.app.interface.i_report_query_repo import IReportQueryRepo
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.driven_adapter.model.check_in_model import CheckInModel
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.order_model import OrderModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.model.venue_model import VenueModel
from src.service.ticketing.driven_adapter.repo.query_repo_base import QueryRepoBase


class ReportQueryRepoImpl(QueryRepoBase, IReportQueryRepo):
    @Logger.io
    async def get_sales_report(
        self, *, event_name: Optional[str] = None, min_tickets: Optional[int] = None
    ) -> List[EventSalesReport]:
        tickets_sold = func.count(distinct(TicketModel.qr_code)).label('tickets_sold')
        total_revenue = func.coalesce(func.sum(OrderModel.subtotal), 0).label('total_revenue')

        stmt = (
            select(
                EventModel.name,
                EventModel.event_date,
                EventModel.status,
                VenueModel.name,
                VenueModel.capacity,
                tickets_sold,
                func.count(distinct(OrderModel.customer_email)),
                total_revenue,
                cast(func.avg(OrderModel.subtotal), Numeric(10, 2)),
                func.min(OrderModel.subtotal),
                func.max(OrderModel.subtotal),
                func.count(distinct(CheckInModel.qr_code)),
            )
            .join(
                VenueModel,
                and_(
                    EventModel.venue_name == VenueModel.name,
                    EventModel.venue_address == VenueModel.address,
                ),
            )
            .outerjoin(
                TicketModel,
                and_(
                    TicketModel.event_name == EventModel.name,
                    TicketModel.event_date == EventModel.event_date,
                    TicketModel.venue_name == EventModel.venue_name,
                    TicketModel.venue_address == EventModel.venue_address,
                ),
            )
            .outerjoin(OrderModel, OrderModel.order_id == TicketModel.order_id)
            .outerjoin(CheckInModel, CheckInModel.qr_code == TicketModel.qr_code)
        )

        if event_name:
            stmt = stmt.where(EventModel.name.icontains(event_name, autoescape=True))

        stmt = stmt.group_by(
            EventModel.name,
            EventModel.event_date,
            EventModel.venue_name,
            EventModel.venue_address,
            EventModel.status,
            VenueModel.name,
            VenueModel.capacity,
        )
        if min_tickets is not None:
            stmt = stmt.having(tickets_sold >= min_tickets)
        stmt = stmt.order_by(
            total_revenue.desc(), tickets_sold.desc(), EventModel.event_date, EventModel.name
        )

        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [
                EventSalesReport(
                    event_name=name,
                    event_date=event_date,
                    event_status=EventStatus(status),
                    venue_name=venue_name,
                    venue_capacity=capacity,
                    tickets_sold=sold,
                    unique_customers=customers,
                    total_revenue=revenue,
                    avg_ticket_price=avg_price,
                    min_ticket_price=min_price,
                    max_ticket_price=max_price,
                    checked_in_count=checked_in,
                )
                for (
                    name,
                    event_date,
                    status,
                    venue_name,
                    capacity,
                    sold,
                    customers,
                    revenue,
                    avg_price,
                    min_price,
                    max_price,
                    checked_in,
                ) in result.all()
            ]
