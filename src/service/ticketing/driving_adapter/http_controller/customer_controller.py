from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.update_loyalty_tier_use_case import (
    UpdateLoyaltyTierUseCase,
)
from src.service.ticketing.app.query.get_purchase_history_use_case import (
    GetPurchaseHistoryUseCase,
)
from src.service.ticketing.driving_adapter.schema.customer_schema import (
    LoyaltyUpdateRequest,
    LoyaltyUpdateResponse,
    LoyaltyUpgradeResponse,
    PurchaseHistoryItemResponse,
    PurchaseHistoryResponse,
)


router = APIRouter()


@router.get('/history/{email}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_purchase_history(
    email: str,
    use_case: GetPurchaseHistoryUseCase = Depends(GetPurchaseHistoryUseCase.depends),
) -> PurchaseHistoryResponse:
    history = await use_case.get_history(email=email)
    return PurchaseHistoryResponse(
        email=history.customer.email,
        customer_name=history.customer.full_name,
        loyalty_tier=history.customer.loyalty_tier.value,
        total_tickets=history.ticket_count,
        total_spent=float(history.total_spent),
        history=[
            PurchaseHistoryItemResponse(
                qr_code=item.qr_code,
                order_id=item.order_id,
                payment_method=item.payment_method,
                purchase_date=item.order_date,
                total_price=float(item.price),
                event_name=item.event_name,
                event_date=item.event_date,
                event_status=item.event_status.value,
                venue_name=item.venue_name,
                seat_location=item.position.label,
                checkin_status=item.checkin_status,
            )
            for item in history.items
        ],
    )


@router.post('/loyalty/update', status_code=status.HTTP_200_OK)
@Logger.io
async def update_loyalty_tiers(
    request: LoyaltyUpdateRequest,
    use_case: UpdateLoyaltyTierUseCase = Depends(UpdateLoyaltyTierUseCase.depends),
) -> LoyaltyUpdateResponse:
    upgrades = await use_case.update_tiers(
        min_purchases=request.min_purchases, target_tier=request.target_tier
    )
    message = (
        f'Updated {len(upgrades)} customers to {request.target_tier} tier'
        if upgrades
        else 'No customers qualify for upgrade'
    )
    return LoyaltyUpdateResponse(
        message=message,
        updated=[
            LoyaltyUpgradeResponse(
                email=upgrade.email,
                name=upgrade.full_name,
                old_tier=upgrade.old_tier.value,
                new_tier=upgrade.new_tier.value,
                purchase_count=upgrade.ticket_count,
            )
            for upgrade in upgrades
        ],
    )
