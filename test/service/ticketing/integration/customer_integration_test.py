import httpx
import pytest

from test.constants import BOB_EMAIL, JANE_EMAIL, JOHN_EMAIL, ROCK_EVENT_NAME, UNKNOWN_EMAIL
from test.service.ticketing.integration.helpers import buy_one


class TestPurchaseHistory:
    @pytest.mark.asyncio
    async def test_history_newest_first_with_totals(self, client: httpx.AsyncClient, seeded):
        # Given
        first_qr = await buy_one(client, ('A', '1', '1'))
        second_qr = await buy_one(client, ('B', '2', '1'))
        await client.post('/api/checkin', json={'qr_code': first_qr, 'gate': 'G1'})

        # When
        response = await client.get(f'/api/history/{JOHN_EMAIL}')

        # Then
        assert response.status_code == 200
        body = response.json()
        assert body['customer_name'] == 'John Doe'
        assert body['loyalty_tier'] == 'Bronze'
        assert body['total_tickets'] == 2
        assert body['total_spent'] == 125.0
        history = body['history']
        assert [h['qr_code'] for h in history] == [second_qr, first_qr]
        assert [h['seat_location'] for h in history] == ['B-2-1', 'A-1-1']
        assert [h['checkin_status'] for h in history] == ['Not Checked In', 'Checked In']
        assert history[0]['event_name'] == ROCK_EVENT_NAME
        assert history[0]['total_price'] == 75.0
        assert history[0]['payment_method'] == 'Credit Card'

    @pytest.mark.asyncio
    async def test_customer_without_purchases(self, client: httpx.AsyncClient, seeded):
        response = await client.get(f'/api/history/{JANE_EMAIL}')

        assert response.status_code == 200
        body = response.json()
        assert body['history'] == []
        assert body['total_tickets'] == 0
        assert body['total_spent'] == 0.0

    @pytest.mark.asyncio
    async def test_unknown_customer(self, client: httpx.AsyncClient, seeded):
        response = await client.get(f'/api/history/{UNKNOWN_EMAIL}')

        assert response.status_code == 404
        assert response.json()['error'] == 'Customer not found'


class TestLoyaltyUpdate:
    @pytest.mark.asyncio
    async def test_frequent_buyer_is_upgraded(self, client: httpx.AsyncClient, seeded):
        # Given: John (Bronze) holds 2 tickets, Jane (Silver) and Bob (Gold) hold none
        await buy_one(client, ('A', '1', '1'))
        await buy_one(client, ('A', '1', '2'))

        # When
        response = await client.post(
            '/api/loyalty/update', json={'min_purchases': 2, 'target_tier': 'Silver'}
        )

        # Then
        assert response.status_code == 200
        body = response.json()
        assert body['message'] == 'Updated 1 customers to Silver tier'
        assert body['updated'] == [
            {
                'email': JOHN_EMAIL,
                'name': 'John Doe',
                'old_tier': 'Bronze',
                'new_tier': 'Silver',
                'purchase_count': 2,
            }
        ]
        history = await client.get(f'/api/history/{JOHN_EMAIL}')
        assert history.json()['loyalty_tier'] == 'Silver'

    @pytest.mark.asyncio
    async def test_higher_tiers_are_never_downgraded(self, client: httpx.AsyncClient, seeded):
        # min_purchases=0 makes every customer a candidate
        response = await client.post(
            '/api/loyalty/update', json={'min_purchases': 0, 'target_tier': 'Silver'}
        )

        assert [u['email'] for u in response.json()['updated']] == [JOHN_EMAIL]
        bob = await client.get(f'/api/history/{BOB_EMAIL}')
        assert bob.json()['loyalty_tier'] == 'Gold'

    @pytest.mark.asyncio
    async def test_nobody_qualifies(self, client: httpx.AsyncClient, seeded):
        response = await client.post(
            '/api/loyalty/update', json={'min_purchases': 5, 'target_tier': 'Gold'}
        )

        assert response.status_code == 200
        assert response.json()['message'] == 'No customers qualify for upgrade'
        assert response.json()['updated'] == []

    @pytest.mark.asyncio
    async def test_invalid_tier(self, client: httpx.AsyncClient, seeded):
        response = await client.post(
            '/api/loyalty/update', json={'min_purchases': 1, 'target_tier': 'Platinum'}
        )

        assert response.status_code == 400
        assert response.json()['error'] == 'Invalid tier'

    @pytest.mark.asyncio
    async def test_negative_threshold_is_rejected(self, client: httpx.AsyncClient, seeded):
        response = await client.post(
            '/api/loyalty/update', json={'min_purchases': -1, 'target_tier': 'Gold'}
        )

        assert response.status_code == 400
