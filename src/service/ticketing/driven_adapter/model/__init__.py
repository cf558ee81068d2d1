"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.ticketing.driven_adapter.model.check_in_model import CheckInModel
from src.service.ticketing.driven_adapter.model.customer_model import CustomerModel
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.event_seat_model import EventSeatModel
from src.service.ticketing.driven_adapter.model.order_model import OrderModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.model.venue_model import VenueModel

__all__ = [
    'CheckInModel',
    'CustomerModel',
    'EventModel',
    'EventSeatModel',
    'OrderModel',
    'TicketModel',
    'VenueModel',
]
