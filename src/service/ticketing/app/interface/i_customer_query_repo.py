from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.app.dto.customer_dto import PurchaseHistoryItem
from src.service.ticketing.domain.entity.customer_entity import CustomerEntity


class ICustomerQueryRepo(ABC):
    """Customer Query Repository Interface - CQRS Read Side"""

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[CustomerEntity]:
        pass

    @abstractmethod
    async def list_purchase_history(self, *, email: str) -> List[PurchaseHistoryItem]:
        """Tickets bought by the customer, newest order first"""
        pass
