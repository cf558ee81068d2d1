"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    check_in_ticket_use_case,
    purchase_tickets_use_case,
    update_event_status_use_case,
    update_loyalty_tier_use_case,
)
from src.service.ticketing.app.query import (
    get_purchase_history_use_case,
    get_sales_report_use_case,
    get_ticket_use_case,
    list_event_seats_use_case,
    list_events_use_case,
    list_venues_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    purchase_tickets_use_case,
    check_in_ticket_use_case,
    update_event_status_use_case,
    update_loyalty_tier_use_case,
    list_events_use_case,
    list_venues_use_case,
    list_event_seats_use_case,
    get_purchase_history_use_case,
    get_sales_report_use_case,
    get_ticket_use_case,
]
