import httpx
import pytest

from test.constants import (
    JAZZ_EVENT_NAME,
    JANE_EMAIL,
    MSG_CAPACITY,
    MSG_VENUE_NAME,
    ROCK_EVENT_NAME,
)
from test.service.ticketing.integration.helpers import buy_one, jazz_event


class TestSalesReport:
    @pytest.mark.asyncio
    async def test_report_aggregates_per_event(self, client: httpx.AsyncClient, seeded):
        # Given: three Rock tickets for two customers, one checked in
        first_qr = await buy_one(client, ('A', '1', '1'))
        await buy_one(client, ('A', '1', '2'))
        await buy_one(client, ('B', '2', '1'), email=JANE_EMAIL)
        await client.post('/api/checkin', json={'qr_code': first_qr, 'gate': 'G1'})

        # When
        response = await client.get('/api/reports/sales')

        # Then: events ordered by revenue, unsold events included
        assert response.status_code == 200
        reports = response.json()['reports']
        assert [r['event_name'] for r in reports] == [ROCK_EVENT_NAME, JAZZ_EVENT_NAME]

        rock = reports[0]
        assert rock['venue_name'] == MSG_VENUE_NAME
        assert rock['capacity'] == MSG_CAPACITY
        assert rock['status'] == 'SCHEDULED'
        assert rock['tickets_sold'] == 3
        assert rock['unique_customers'] == 2
        assert rock['total_revenue'] == 175.0
        assert rock['avg_ticket_price'] == 58.33
        assert rock['min_price'] == 50.0
        assert rock['max_price'] == 75.0
        assert rock['checked_in_count'] == 1
        assert rock['checkin_rate'] == 33.33

        jazz = reports[1]
        assert jazz['tickets_sold'] == 0
        assert jazz['total_revenue'] == 0.0
        assert jazz['avg_ticket_price'] is None
        assert jazz['checkin_rate'] is None

    @pytest.mark.asyncio
    async def test_event_name_filter(self, client: httpx.AsyncClient, seeded):
        response = await client.get('/api/reports/sales', params={'event_name': 'jazz'})

        assert [r['event_name'] for r in response.json()['reports']] == [JAZZ_EVENT_NAME]

    @pytest.mark.asyncio
    async def test_min_tickets_filter(self, client: httpx.AsyncClient, seeded):
        await buy_one(client, ('Main', 'AA', '1'), event=jazz_event())

        response = await client.get('/api/reports/sales', params={'min_tickets': 1})

        reports = response.json()['reports']
        assert [r['event_name'] for r in reports] == [JAZZ_EVENT_NAME]
        assert reports[0]['total_revenue'] == 30.0

    @pytest.mark.asyncio
    async def test_negative_min_tickets_is_400(self, client: httpx.AsyncClient, seeded):
        response = await client.get('/api/reports/sales', params={'min_tickets': -1})

        assert response.status_code == 400
