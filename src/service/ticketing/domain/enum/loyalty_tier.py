from enum import Enum


class LoyaltyTier(Enum):
    BRONZE = 'Bronze'
    SILVER = 'Silver'
    GOLD = 'Gold'

    @property
    def rank(self) -> int:
        return _TIER_RANK[self]

    def is_below(self, other: 'LoyaltyTier') -> bool:
        return self.rank < other.rank


_TIER_RANK = {
    LoyaltyTier.BRONZE: 1,
    LoyaltyTier.SILVER: 2,
    LoyaltyTier.GOLD: 3,
}
