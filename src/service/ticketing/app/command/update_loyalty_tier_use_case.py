from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.customer_dto import LoyaltyUpgrade
from src.service.ticketing.domain.enum.loyalty_tier import LoyaltyTier
from src.service.ticketing.domain.ticketing_error import InvalidTierError


class UpdateLoyaltyTierUseCase:
    """
    Promote frequent buyers to a loyalty tier.

    Upgrade-only: a customer moves to `target_tier` when they hold at least
    `min_purchases` tickets and their current tier ranks below the target.
    Customers already at or above the target are left alone; nobody is
    downgraded.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def update_tiers(self, *, min_purchases: int, target_tier: str) -> List[LoyaltyUpgrade]:
        try:
            tier = LoyaltyTier(target_tier)
        except ValueError:
            raise InvalidTierError() from None

        upgrades: List[LoyaltyUpgrade] = []
        async with self.uow:
            candidates = await self.uow.customer_command_repo.list_with_ticket_count(
                min_purchases=min_purchases
            )
            for candidate in candidates:
                customer = candidate.customer
                if not customer.loyalty_tier.is_below(tier):
                    continue
                await self.uow.customer_command_repo.update_loyalty_tier(
                    email=customer.email, tier=tier
                )
                upgrades.append(
                    LoyaltyUpgrade(
                        email=customer.email,
                        full_name=customer.full_name,
                        old_tier=customer.loyalty_tier,
                        new_tier=tier,
                        ticket_count=candidate.ticket_count,
                    )
                )
            await self.uow.commit()

        Logger.base.info(
            f'🏅 [LOYALTY] {len(upgrades)} customer(s) upgraded to {tier.value} '
            f'(min_purchases={min_purchases})'
        )
        return upgrades
