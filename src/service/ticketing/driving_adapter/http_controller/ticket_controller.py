from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.check_in_ticket_use_case import CheckInTicketUseCase
from src.service.ticketing.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.driving_adapter.schema.ticket_schema import (
    CheckInRequest,
    CheckInResponse,
    TicketDetailResponse,
    TicketResponse,
)


router = APIRouter()


def _ticket_detail(
    ticket: TicketEntity, *, checkin_time: Optional[datetime] = None, gate: Optional[str] = None
) -> TicketDetailResponse:
    return TicketDetailResponse(
        qr_code=ticket.qr_code,
        status=ticket.status.value,
        issue_date=ticket.issue_date,
        order_id=ticket.order_id,
        event_name=ticket.event.name,
        event_date=ticket.event.date,
        venue_name=ticket.event.venue_name,
        venue_address=ticket.event.venue_address,
        section=ticket.position.section,
        row=ticket.position.row,
        number=ticket.position.number,
        seat=ticket.position.label,
        checkin_time=checkin_time,
        gate=gate,
    )


@router.post('/checkin', status_code=status.HTTP_200_OK)
@Logger.io
async def check_in_ticket(
    request: CheckInRequest,
    use_case: CheckInTicketUseCase = Depends(CheckInTicketUseCase.depends),
) -> CheckInResponse:
    result = await use_case.check_in(qr_code=request.qr_code, gate=request.gate)
    return CheckInResponse(
        ticket=_ticket_detail(
            result.ticket,
            checkin_time=result.check_in.checkin_time,
            gate=result.check_in.gate,
        )
    )


@router.get('/tickets/{qr_code}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket(
    qr_code: str,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    detail = await use_case.get_by_qr_code(qr_code=qr_code)
    return TicketResponse(
        ticket=_ticket_detail(detail.ticket, checkin_time=detail.checkin_time, gate=detail.gate)
    )
