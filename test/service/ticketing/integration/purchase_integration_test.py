"""
Purchase Tickets API - integration tests against a real schema

Covers the all-or-nothing contract: a committed purchase issues one order and
one ticket per seat and marks every seat SOLD; any failure leaves no trace.
"""

import asyncio
import re

import httpx
import pytest

from src.platform.database.orm_db_setting import Database, get_session_maker
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.exception.exceptions import StorageFailureError
from src.service.ticketing.app.command.purchase_tickets_use_case import PurchaseTicketsUseCase
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.domain.value_object.seat_position import SeatPosition
from src.service.ticketing.driven_adapter.model import CustomerModel
from test.constants import (
    CREDIT_CARD,
    JANE_EMAIL,
    JOHN_EMAIL,
    MIXED_CASE_EMAIL,
    MSG_VENUE_ADDRESS,
    MSG_VENUE_NAME,
    ROCK_EVENT_DATE,
    ROCK_EVENT_NAME,
    UNKNOWN_EMAIL,
)
from test.service.ticketing.integration.helpers import (
    count_orders,
    count_tickets,
    purchase,
    purchase_payload,
    rock_event,
    seat_status,
)


ROCK_KEY = EventKey(
    name=ROCK_EVENT_NAME,
    date=ROCK_EVENT_DATE,
    venue_name=MSG_VENUE_NAME,
    venue_address=MSG_VENUE_ADDRESS,
)


def _use_case(qr_code_generator) -> PurchaseTicketsUseCase:
    return PurchaseTicketsUseCase(
        uow=SqlAlchemyUnitOfWork(Database().session),
        qr_code_generator=qr_code_generator,
        max_qr_attempts=3,
    )


class TestPurchaseSuccess:
    @pytest.mark.asyncio
    async def test_single_seat_purchase(self, client: httpx.AsyncClient, seeded):
        # When
        response = await purchase(client, ('A', '1', '5'))

        # Then
        assert response.status_code == 200
        body = response.json()
        assert body['success'] is True
        assert body['message'] == 'Tickets purchased successfully'
        assert len(body['tickets']) == 1
        ticket = body['tickets'][0]
        assert (ticket['section'], ticket['row'], ticket['number']) == ('A', '1', '5')
        assert ticket['price'] == 50.0
        assert re.fullmatch(r'QR\d{13}[0-9A-Z]{9}', ticket['qr_code'])
        assert isinstance(ticket['order_id'], int)

        # And: the seat is SOLD, one order and one ticket exist
        assert await seat_status('A', '1', '5') == 'SOLD'
        assert await count_orders() == 1
        assert await count_tickets() == 1

    @pytest.mark.asyncio
    async def test_multi_seat_purchase_keeps_request_order(
        self, client: httpx.AsyncClient, seeded
    ):
        # When
        response = await purchase(client, ('B', '2', '3'), ('A', '1', '1'), ('A', '1', '2'))

        # Then
        assert response.status_code == 200
        tickets = response.json()['tickets']
        assert [(t['section'], t['number']) for t in tickets] == [('B', '3'), ('A', '1'), ('A', '2')]
        assert [t['price'] for t in tickets] == [75.0, 50.0, 50.0]
        assert len({t['qr_code'] for t in tickets}) == 3
        assert len({t['order_id'] for t in tickets}) == 3

    @pytest.mark.asyncio
    async def test_numeric_seat_labels_are_accepted(self, client: httpx.AsyncClient, seeded):
        payload = purchase_payload()
        payload['seats'] = [{'section': 'A', 'row': 1, 'number': 7}]

        response = await client.post('/api/purchase', json=payload)

        assert response.status_code == 200
        assert await seat_status('A', '1', '7') == 'SOLD'

    @pytest.mark.asyncio
    async def test_mixed_case_email_is_matched_as_stored(
        self, client: httpx.AsyncClient, seeded
    ):
        # Given
        async with get_session_maker()() as session:
            session.add(
                CustomerModel(
                    email=MIXED_CASE_EMAIL,
                    first_name='Mia',
                    last_name='Case',
                    loyalty_tier='Bronze',
                )
            )
            await session.commit()

        # When
        response = await purchase(client, ('A', '1', '8'), email=MIXED_CASE_EMAIL)
        history = await client.get(f'/api/history/{MIXED_CASE_EMAIL}')

        # Then
        assert response.status_code == 200
        assert history.status_code == 200
        assert [h['seat_location'] for h in history.json()['history']] == ['A-1-8']

    @pytest.mark.asyncio
    async def test_purchased_ticket_can_be_looked_up(self, client: httpx.AsyncClient, seeded):
        # Given
        response = await purchase(client, ('A', '1', '4'))
        qr_code = response.json()['tickets'][0]['qr_code']

        # When
        lookup = await client.get(f'/api/tickets/{qr_code}')

        # Then
        assert lookup.status_code == 200
        ticket = lookup.json()['ticket']
        assert ticket['qr_code'] == qr_code
        assert ticket['event_name'] == ROCK_EVENT_NAME
        assert ticket['seat'] == 'A-1-4'
        assert ticket['status'] == 'ISSUED'
        assert ticket['checkin_time'] is None


class TestPurchaseFailures:
    @pytest.mark.asyncio
    async def test_sold_seat_is_rejected(self, client: httpx.AsyncClient, seeded):
        # Given
        first = await purchase(client, ('A', '1', '5'))
        assert first.status_code == 200

        # When: someone else tries the same seat
        second = await purchase(client, ('A', '1', '5'), email=JANE_EMAIL)

        # Then
        assert second.status_code == 409
        assert second.json() == {'success': False, 'error': 'Seat A-1-5 is not available'}
        assert await count_orders() == 1

    @pytest.mark.asyncio
    async def test_one_sold_seat_aborts_the_whole_request(
        self, client: httpx.AsyncClient, seeded
    ):
        # Given
        assert (await purchase(client, ('A', '1', '3'))).status_code == 200

        # When: A-1-2 is free, A-1-3 is sold
        response = await purchase(client, ('A', '1', '2'), ('A', '1', '3'), email=JANE_EMAIL)

        # Then: nothing from the failed request remains
        assert response.status_code == 409
        assert response.json()['error'] == 'Seat A-1-3 is not available'
        assert await seat_status('A', '1', '2') == 'AVAILABLE'
        assert await count_orders() == 1
        assert await count_tickets() == 1

    @pytest.mark.asyncio
    async def test_unknown_seat_is_unavailable(self, client: httpx.AsyncClient, seeded):
        response = await purchase(client, ('Z', '9', '99'))

        assert response.status_code == 409
        assert response.json()['error'] == 'Seat Z-9-99 is not available'

    @pytest.mark.asyncio
    async def test_unknown_customer(self, client: httpx.AsyncClient, seeded):
        response = await purchase(client, ('A', '1', '5'), email=UNKNOWN_EMAIL)

        assert response.status_code == 404
        assert response.json() == {'success': False, 'error': 'Customer not found'}
        assert await seat_status('A', '1', '5') == 'AVAILABLE'

    @pytest.mark.asyncio
    async def test_unknown_event(self, client: httpx.AsyncClient, seeded):
        event = {**rock_event(), 'event_date': '2030-01-01'}

        response = await purchase(client, ('A', '1', '5'), event=event)

        assert response.status_code == 404
        assert response.json()['error'] == 'Event not found'

    @pytest.mark.asyncio
    async def test_same_name_at_other_venue_is_a_different_event(
        self, client: httpx.AsyncClient, seeded
    ):
        event = {**rock_event(), 'venue_address': '1 Other St'}

        response = await purchase(client, ('A', '1', '5'), event=event)

        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'mutate',
        [
            lambda p: p.update(seats=[]),
            lambda p: p.pop('customer_email'),
            lambda p: p.update(customer_email='not-an-email'),
            lambda p: p.update(event_date='not-a-date'),
            lambda p: p.update(payment_method=''),
        ],
        ids=['no-seats', 'missing-email', 'bad-email', 'bad-date', 'blank-payment'],
    )
    async def test_malformed_request_is_400(self, client: httpx.AsyncClient, seeded, mutate):
        payload = purchase_payload(('A', '1', '5'))
        mutate(payload)

        response = await client.post('/api/purchase', json=payload)

        assert response.status_code == 400
        assert response.json()['success'] is False
        assert await count_orders() == 0


class TestPurchaseConcurrency:
    @pytest.mark.asyncio
    async def test_two_buyers_one_seat_exactly_one_wins(self, client: httpx.AsyncClient, seeded):
        # When: both requests race for the same seat
        responses = await asyncio.gather(
            purchase(client, ('A', '1', '9'), email=JOHN_EMAIL),
            purchase(client, ('A', '1', '9'), email=JANE_EMAIL),
        )

        # Then
        assert sorted(r.status_code for r in responses) == [200, 409]
        assert await seat_status('A', '1', '9') == 'SOLD'
        assert await count_tickets() == 1

    @pytest.mark.asyncio
    async def test_overlapping_multi_seat_requests_never_split_seats(
        self, client: httpx.AsyncClient, seeded
    ):
        responses = await asyncio.gather(
            purchase(client, ('B', '2', '1'), ('B', '2', '2'), email=JOHN_EMAIL),
            purchase(client, ('B', '2', '2'), ('B', '2', '3'), email=JANE_EMAIL),
        )

        assert sorted(r.status_code for r in responses) == [200, 409]
        assert await count_tickets() == 2


class TestQRCodeCollision:
    @pytest.mark.asyncio
    async def test_collision_is_retried_with_a_new_code(self, seeded):
        # Given: QRFIXED already belongs to a ticket
        await _use_case(lambda: 'QRFIXED').purchase_tickets(
            customer_email=JOHN_EMAIL,
            event=ROCK_KEY,
            seats=[SeatPosition(section='A', row='1', number='1')],
            payment_method=CREDIT_CARD,
        )
        codes = iter(['QRFIXED', 'QRFRESH'])

        # When
        tickets = await _use_case(lambda: next(codes)).purchase_tickets(
            customer_email=JANE_EMAIL,
            event=ROCK_KEY,
            seats=[SeatPosition(section='A', row='1', number='2')],
            payment_method=CREDIT_CARD,
        )

        # Then
        assert [t.qr_code for t in tickets] == ['QRFRESH']
        assert await seat_status('A', '1', '2') == 'SOLD'
        assert await count_tickets() == 2

    @pytest.mark.asyncio
    async def test_exhausted_retries_roll_everything_back(self, seeded):
        # Given
        await _use_case(lambda: 'QRFIXED').purchase_tickets(
            customer_email=JOHN_EMAIL,
            event=ROCK_KEY,
            seats=[SeatPosition(section='A', row='1', number='1')],
            payment_method=CREDIT_CARD,
        )

        # When: every attempt collides
        with pytest.raises(StorageFailureError):
            await _use_case(lambda: 'QRFIXED').purchase_tickets(
                customer_email=JANE_EMAIL,
                event=ROCK_KEY,
                seats=[SeatPosition(section='A', row='1', number='2')],
                payment_method=CREDIT_CARD,
            )

        # Then
        assert await seat_status('A', '1', '2') == 'AVAILABLE'
        assert await count_orders() == 1
        assert await count_tickets() == 1
