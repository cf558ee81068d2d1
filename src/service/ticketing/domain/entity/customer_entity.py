import attrs

from src.service.ticketing.domain.enum.loyalty_tier import LoyaltyTier


@attrs.define
class CustomerEntity:
    email: str
    first_name: str
    last_name: str
    loyalty_tier: LoyaltyTier = LoyaltyTier.BRONZE

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'
