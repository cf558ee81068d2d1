from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.query.get_sales_report_use_case import GetSalesReportUseCase
from src.service.ticketing.driving_adapter.schema.report_schema import (
    SalesReportResponse,
    SalesReportRowResponse,
)


router = APIRouter()


def _to_float(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


@router.get('/reports/sales', status_code=status.HTTP_200_OK)
@Logger.io
async def get_sales_report(
    event_name: Optional[str] = None,
    min_tickets: Optional[int] = Query(default=None, ge=0),
    use_case: GetSalesReportUseCase = Depends(GetSalesReportUseCase.depends),
) -> SalesReportResponse:
    rows = await use_case.get_report(event_name=event_name, min_tickets=min_tickets)
    return SalesReportResponse(
        reports=[
            SalesReportRowResponse(
                event_name=row.event_name,
                event_date=row.event_date,
                status=row.event_status.value,
                venue_name=row.venue_name,
                capacity=row.venue_capacity,
                tickets_sold=row.tickets_sold,
                unique_customers=row.unique_customers,
                total_revenue=float(row.total_revenue),
                avg_ticket_price=_to_float(row.avg_ticket_price),
                min_price=_to_float(row.min_ticket_price),
                max_price=_to_float(row.max_ticket_price),
                checked_in_count=row.checked_in_count,
                checkin_rate=row.checkin_rate,
            )
            for row in rows
        ]
    )
