"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_check_in_command_repo import ICheckInCommandRepo
from src.service.ticketing.app.interface.i_customer_command_repo import ICustomerCommandRepo
from src.service.ticketing.app.interface.i_customer_query_repo import ICustomerQueryRepo
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.app.interface.i_event_seat_command_repo import IEventSeatCommandRepo
from src.service.ticketing.app.interface.i_order_command_repo import IOrderCommandRepo
from src.service.ticketing.app.interface.i_report_query_repo import IReportQueryRepo
from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo

__all__ = [
    'ICheckInCommandRepo',
    'ICustomerCommandRepo',
    'ICustomerQueryRepo',
    'IEventCommandRepo',
    'IEventQueryRepo',
    'IEventSeatCommandRepo',
    'IOrderCommandRepo',
    'IReportQueryRepo',
    'ITicketCommandRepo',
    'ITicketQueryRepo',
]
