from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.domain.value_object.seat_position import SeatPosition
from src.service.ticketing.driving_adapter.schema.purchase_schema import (
    PurchaseRequest,
    PurchaseResponse,
    PurchasedTicketResponse,
)


router = APIRouter()


@router.post('/purchase', status_code=status.HTTP_200_OK)
@Logger.io
async def purchase_tickets(
    request: PurchaseRequest,
    use_case: PurchaseTicketsUseCase = Depends(PurchaseTicketsUseCase.depends),
) -> PurchaseResponse:
    tickets = await use_case.purchase_tickets(
        customer_email=request.customer_email,
        event=EventKey(
            name=request.event_name,
            date=request.event_date,
            venue_name=request.venue_name,
            venue_address=request.venue_address,
        ),
        seats=[
            SeatPosition(section=seat.section, row=seat.row, number=seat.number)
            for seat in request.seats
        ],
        payment_method=request.payment_method,
    )

    return PurchaseResponse(
        tickets=[
            PurchasedTicketResponse(
                qr_code=ticket.qr_code,
                section=ticket.position.section,
                row=ticket.position.row,
                number=ticket.position.number,
                price=float(ticket.price),
                order_id=ticket.order_id,
            )
            for ticket in tickets
        ]
    )
