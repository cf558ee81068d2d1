from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.report_dto import EventSalesReport
from src.service.ticketing.app.interface.i_report_query_repo import IReportQueryRepo


class GetSalesReportUseCase:
    def __init__(self, report_query_repo: IReportQueryRepo) -> None:
        self.report_query_repo = report_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        report_query_repo: IReportQueryRepo = Depends(Provide[Container.report_query_repo]),
    ) -> Self:
        return cls(report_query_repo=report_query_repo)

    @Logger.io
    async def get_report(
        self, *, event_name: Optional[str] = None, min_tickets: Optional[int] = None
    ) -> List[EventSalesReport]:
        rows = await self.report_query_repo.get_sales_report(
            event_name=event_name or None, min_tickets=min_tickets
        )
        Logger.base.info(f'📊 [SALES_REPORT] {len(rows)} events in report')
        return rows
