from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_check_in_command_repo import ICheckInCommandRepo
from src.service.ticketing.domain.entity.check_in_entity import CheckInEntity
from src.service.ticketing.driven_adapter.model.check_in_model import CheckInModel


class CheckInCommandRepoImpl(ICheckInCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_qr_code(self, *, qr_code: str) -> Optional[CheckInEntity]:
        result = await self.session.execute(
            select(CheckInModel).where(CheckInModel.qr_code == qr_code)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return CheckInEntity(qr_code=model.qr_code, checkin_time=model.checkin_time, gate=model.gate)

    @Logger.io
    async def create(self, *, check_in: CheckInEntity) -> bool:
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(CheckInModel).values(
                        qr_code=check_in.qr_code,
                        checkin_time=check_in.checkin_time,
                        gate=check_in.gate,
                    )
                )
        except IntegrityError:
            Logger.base.warning(f'⚠️ [CHECK_IN] {check_in.qr_code} already has a check-in row')
            return False
        return True
