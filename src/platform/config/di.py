"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.ticketing.driven_adapter.repo.customer_query_repo_impl import (
    CustomerQueryRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl
from src.service.ticketing.driven_adapter.repo.report_query_repo_impl import ReportQueryRepoImpl
from src.service.ticketing.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Unit of work (write side) - a fresh one per request, owns one transaction
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork,
        session_factory=database.provided.session,
    )

    # Query repositories (stateless - use session_factory per call)
    event_query_repo = providers.Factory(
        EventQueryRepoImpl,
        session_factory=database.provided.session,
    )
    customer_query_repo = providers.Factory(
        CustomerQueryRepoImpl,
        session_factory=database.provided.session,
    )
    report_query_repo = providers.Factory(
        ReportQueryRepoImpl,
        session_factory=database.provided.session,
    )
    ticket_query_repo = providers.Factory(
        TicketQueryRepoImpl,
        session_factory=database.provided.session,
    )


container = Container()
