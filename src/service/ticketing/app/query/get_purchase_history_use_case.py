from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.customer_dto import PurchaseHistory
from src.service.ticketing.app.interface.i_customer_query_repo import ICustomerQueryRepo
from src.service.ticketing.domain.ticketing_error import CustomerNotFoundError


class GetPurchaseHistoryUseCase:
    def __init__(self, customer_query_repo: ICustomerQueryRepo) -> None:
        self.customer_query_repo = customer_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        customer_query_repo: ICustomerQueryRepo = Depends(Provide[Container.customer_query_repo]),
    ) -> Self:
        return cls(customer_query_repo=customer_query_repo)

    @Logger.io
    async def get_history(self, *, email: str) -> PurchaseHistory:
        """
        Tickets bought by a customer, newest order first.

        A known customer without purchases gets an empty history, not an error.

        Raises:
            CustomerNotFoundError: no customer with that email
        """
        customer = await self.customer_query_repo.get_by_email(email=email)
        if customer is None:
            raise CustomerNotFoundError(email)

        items = await self.customer_query_repo.list_purchase_history(email=email)
        history = PurchaseHistory(customer=customer, items=items)

        Logger.base.info(
            f'🧾 [HISTORY] {email}: {history.ticket_count} tickets, total {history.total_spent}'
        )
        return history
