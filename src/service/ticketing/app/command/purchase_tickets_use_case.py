"""
Purchase Tickets Use Case

All-or-nothing purchase of one or more seats for one event:
- One unit of work (one transaction) per request
- Every validation step returns a value; a failed step becomes an error
  object, the transaction scope is left without commit (the unit of work
  rolls back on exit) and only then is the error raised
- Seat availability is re-read under a row lock and the SOLD transition is
  guarded, so the store's isolation decides between concurrent buyers
"""

from datetime import datetime, timezone
import time
from typing import Callable, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import CustomBaseError, StorageFailureError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.ticketing.app.dto.purchase_dto import PurchasedTicket
from src.service.ticketing.domain.entity.order_entity import OrderEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.qr_code import generate_qr_code
from src.service.ticketing.domain.ticketing_error import (
    CustomerNotFoundError,
    DuplicateQRCodeError,
    EventNotFoundError,
    SeatUnavailableError,
)
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.domain.value_object.seat_position import SeatPosition


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PurchaseTicketsUseCase:
    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        qr_code_generator: Callable[[], str] = generate_qr_code,
        clock: Callable[[], datetime] = _utc_now,
        max_qr_attempts: int = settings.QR_CODE_MAX_ATTEMPTS,
    ) -> None:
        self.uow = uow
        self.qr_code_generator = qr_code_generator
        self.clock = clock
        self.max_qr_attempts = max_qr_attempts

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def purchase_tickets(
        self,
        *,
        customer_email: str,
        event: EventKey,
        seats: List[SeatPosition],
        payment_method: str,
    ) -> List[PurchasedTicket]:
        """
        Issue one order and one ticket per seat and mark every seat SOLD, or change nothing.

        Raises:
            CustomerNotFoundError: no customer with that email
            EventNotFoundError: no event with that composite identity
            SeatUnavailableError: a seat is missing or not AVAILABLE (whole request aborted)
            StorageFailureError: QR retries exhausted or the store failed
        """
        Logger.base.info(
            f'🎫 [PURCHASE] {customer_email} requests {len(seats)} seat(s) '
            f'for {event.name} on {event.date}'
        )
        started_at = time.perf_counter()
        failure: CustomBaseError | None = None
        purchased: List[PurchasedTicket] = []

        try:
            async with self.uow:
                failure = await self._check_customer_and_event(
                    customer_email=customer_email, event=event
                )
                if failure is None:
                    for position in seats:
                        result = await self._purchase_seat(
                            customer_email=customer_email,
                            event=event,
                            position=position,
                            payment_method=payment_method,
                        )
                        if isinstance(result, CustomBaseError):
                            failure = result
                            break
                        purchased.append(result)

                if failure is None:
                    await self.uow.commit()
        except SQLAlchemyError as e:
            Logger.base.exception(f'💥 [PURCHASE] Storage failure for {customer_email}: {e}')
            self._record(result=StorageFailureError.__name__, ticket_count=0, started_at=started_at)
            raise StorageFailureError() from e

        if failure is not None:
            Logger.base.warning(f'🚫 [PURCHASE] Rolled back: {failure.message}')
            self._record(result=type(failure).__name__, ticket_count=0, started_at=started_at)
            raise failure

        Logger.base.info(
            f'✅ [PURCHASE] Issued {len(purchased)} ticket(s) to {customer_email}: '
            f'{[ticket.qr_code for ticket in purchased]}'
        )
        self._record(result='success', ticket_count=len(purchased), started_at=started_at)
        return purchased

    async def _check_customer_and_event(
        self, *, customer_email: str, event: EventKey
    ) -> CustomBaseError | None:
        customer = await self.uow.customer_command_repo.get_by_email(email=customer_email)
        if customer is None:
            return CustomerNotFoundError(customer_email)

        found_event = await self.uow.event_command_repo.get_by_key(key=event)
        if found_event is None:
            return EventNotFoundError()
        return None

    async def _purchase_seat(
        self,
        *,
        customer_email: str,
        event: EventKey,
        position: SeatPosition,
        payment_method: str,
    ) -> PurchasedTicket | CustomBaseError:
        seat = await self.uow.event_seat_command_repo.get_available_for_update(
            event=event, position=position
        )
        if seat is None:
            return SeatUnavailableError(position)

        now = self.clock()
        order_id = await self.uow.order_command_repo.create(
            order=OrderEntity.for_seat(
                customer_email=customer_email,
                price=seat.price,
                payment_method=payment_method,
                order_date=now,
            )
        )

        ticket = await self._issue_ticket(
            order_id=order_id, event=event, position=position, issue_date=now
        )
        if ticket is None:
            return StorageFailureError()

        if not await self.uow.event_seat_command_repo.mark_sold(event=event, position=position):
            return SeatUnavailableError(position)

        return PurchasedTicket(
            qr_code=ticket.qr_code,
            position=position,
            price=seat.price,
            order_id=order_id,
        )

    async def _issue_ticket(
        self, *, order_id: int, event: EventKey, position: SeatPosition, issue_date: datetime
    ) -> TicketEntity | None:
        """Insert the ticket, regenerating the QR code on collision; None once attempts run out"""
        for attempt in range(1, self.max_qr_attempts + 1):
            ticket = TicketEntity(
                qr_code=self.qr_code_generator(),
                order_id=order_id,
                event=event,
                position=position,
                issue_date=issue_date,
            )
            try:
                return await self.uow.ticket_command_repo.create(ticket=ticket)
            except DuplicateQRCodeError as e:
                metrics.record_qr_code_collision()
                Logger.base.warning(
                    f'⚠️ [PURCHASE] {e} (attempt {attempt}/{self.max_qr_attempts}), regenerating'
                )

        Logger.base.error(
            f'❌ [PURCHASE] No unique QR code after {self.max_qr_attempts} attempts '
            f'for seat {position.label}'
        )
        return None

    @staticmethod
    def _record(*, result: str, ticket_count: int, started_at: float) -> None:
        metrics.record_purchase(
            result=result,
            ticket_count=ticket_count,
            duration=time.perf_counter() - started_at,
        )
