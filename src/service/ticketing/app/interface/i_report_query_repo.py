from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.app.dto.report_dto import EventSalesReport


class IReportQueryRepo(ABC):
    @abstractmethod
    async def get_sales_report(
        self, *, event_name: Optional[str] = None, min_tickets: Optional[int] = None
    ) -> List[EventSalesReport]:
        """Per-event sales, ordered by revenue desc then tickets sold desc"""
        pass
