from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.app.dto.customer_dto import LoyaltyCandidate
from src.service.ticketing.domain.entity.customer_entity import CustomerEntity
from src.service.ticketing.domain.enum.loyalty_tier import LoyaltyTier


class ICustomerCommandRepo(ABC):
    """Customer repository inside a unit of work - CQRS Write Side"""

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[CustomerEntity]:
        pass

    @abstractmethod
    async def list_with_ticket_count(self, *, min_purchases: int) -> List[LoyaltyCandidate]:
        """Customers holding at least `min_purchases` tickets, with their count"""
        pass

    @abstractmethod
    async def update_loyalty_tier(self, *, email: str, tier: LoyaltyTier) -> None:
        pass
