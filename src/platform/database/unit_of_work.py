"""
Unit of Work Pattern - one database session and transaction per business operation

Architecture:
- UoW owns the session lifecycle: acquired on enter, released on exit
- UoW owns commit; anything not committed is rolled back on exit
- Repositories get the shared session through the UoW
- Use cases coordinate multiple repositories through the UoW
"""

from __future__ import annotations

import abc
from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_check_in_command_repo import ICheckInCommandRepo
    from src.service.ticketing.app.interface.i_customer_command_repo import ICustomerCommandRepo
    from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
    from src.service.ticketing.app.interface.i_event_seat_command_repo import (
        IEventSeatCommandRepo,
    )
    from src.service.ticketing.app.interface.i_order_command_repo import IOrderCommandRepo
    from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for Ticketing Service

    Responsibilities:
    - Manage database session lifecycle
    - Coordinate one transaction across multiple repositories
    - Provide commit interface; rollback is guaranteed on exit

    Usage:
        async with uow:
            order_id = await uow.order_command_repo.create(order=...)
            await uow.commit()
    """

    customer_command_repo: ICustomerCommandRepo
    event_command_repo: IEventCommandRepo
    event_seat_command_repo: IEventSeatCommandRepo
    order_command_repo: IOrderCommandRepo
    ticket_command_repo: ITicketCommandRepo
    check_in_command_repo: ICheckInCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        # No-op after a successful commit
        await self.rollback()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    The session is opened from `session_factory` on enter and closed on exit,
    after the rollback, whatever happened inside the block.
    """

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None
        self._exit_stack: AsyncExitStack | None = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.ticketing.driven_adapter.repo.check_in_command_repo_impl import (
            CheckInCommandRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.customer_command_repo_impl import (
            CustomerCommandRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.event_command_repo_impl import (
            EventCommandRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.event_seat_command_repo_impl import (
            EventSeatCommandRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.order_command_repo_impl import (
            OrderCommandRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.ticket_command_repo_impl import (
            TicketCommandRepoImpl,
        )

        self._exit_stack = AsyncExitStack()
        session = await self._exit_stack.enter_async_context(self.session_factory())
        self.session = session

        # Create repositories with shared session
        self.customer_command_repo = CustomerCommandRepoImpl(session=session)
        self.event_command_repo = EventCommandRepoImpl(session=session)
        self.event_seat_command_repo = EventSeatCommandRepoImpl(session=session)
        self.order_command_repo = OrderCommandRepoImpl(session=session)
        self.ticket_command_repo = TicketCommandRepoImpl(session=session)
        self.check_in_command_repo = CheckInCommandRepoImpl(session=session)

        await super().__aenter__()
        return self

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._exit_stack is not None:
                await self._exit_stack.aclose()
            self._exit_stack = None
            self.session = None

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('Unit of work used outside of `async with`')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
