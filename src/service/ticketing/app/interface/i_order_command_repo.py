from abc import ABC, abstractmethod

from src.service.ticketing.domain.entity.order_entity import OrderEntity


class IOrderCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, order: OrderEntity) -> int:
        """Insert the order and return its generated order_id"""
        pass
