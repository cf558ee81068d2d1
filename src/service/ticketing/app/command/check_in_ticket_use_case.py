from datetime import datetime, timezone
from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.ticketing.app.dto.ticket_dto import CheckInResult
from src.service.ticketing.domain.entity.check_in_entity import CheckInEntity
from src.service.ticketing.domain.ticketing_error import (
    AlreadyCheckedInError,
    TicketNotFoundError,
)


class CheckInTicketUseCase:
    """Record a venue check-in; at most one per QR code."""

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.uow = uow
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def check_in(self, *, qr_code: str, gate: str) -> CheckInResult:
        failure: CustomBaseError | None = None
        result: CheckInResult | None = None

        async with self.uow:
            ticket = await self.uow.ticket_command_repo.get_by_qr_code(qr_code=qr_code)
            if ticket is None:
                failure = TicketNotFoundError(qr_code, 'Invalid QR code')
            else:
                existing = await self.uow.check_in_command_repo.get_by_qr_code(qr_code=qr_code)
                if existing is None:
                    check_in = CheckInEntity(qr_code=qr_code, checkin_time=self.clock(), gate=gate)
                    if await self.uow.check_in_command_repo.create(check_in=check_in):
                        await self.uow.commit()
                        result = CheckInResult(ticket=ticket, check_in=check_in)
                    else:
                        # Lost a race with a concurrent check-in: report the row that won
                        existing = await self.uow.check_in_command_repo.get_by_qr_code(
                            qr_code=qr_code
                        )
                if result is None:
                    failure = AlreadyCheckedInError(
                        qr_code, existing.checkin_time if existing else self.clock()
                    )

        if failure is not None:
            metrics.record_check_in(result=type(failure).__name__)
            raise failure

        assert result is not None
        Logger.base.info(
            f'✅ [CHECK_IN] {qr_code} checked in at gate {gate} '
            f'({result.ticket.event.name}, seat {result.ticket.position.label})'
        )
        metrics.record_check_in(result='success')
        return result
