from datetime import datetime
from decimal import Decimal

import pytest

from src.platform.logging.loguru_io_utils import (
    MASK,
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)
from src.service.ticketing.domain.entity.order_entity import OrderEntity


pytestmark = pytest.mark.unit


class TestMasking:
    def test_payment_method_keyword_is_masked(self):
        assert should_mask_keyword('payment_method', 'Visa 4111') == MASK
        assert should_mask_keyword('gate', 'G1') == 'G1'

    def test_payment_method_inside_repr_is_masked(self):
        masked = mask_sensitive("OrderEntity(customer_email='a@b.com', payment_method='Visa')")

        assert 'Visa' not in masked
        assert f"payment_method='{MASK}'" in masked
        assert "customer_email='a@b.com'" in masked

    def test_entity_repr_is_masked(self):
        order = OrderEntity.for_seat(
            customer_email='a@b.com',
            price=Decimal('50.00'),
            payment_method='Visa 4111',
            order_date=datetime(2025, 1, 1),
        )

        assert '4111' not in mask_sensitive(order)

    def test_values_without_secrets_are_returned_unchanged(self):
        value = {'gate': 'G1'}

        assert mask_sensitive(value) is value


class TestArgsNormalization:
    def test_unknown_kwargs_are_dropped(self):
        def target(a, *, b):
            return a, b

        args, kwargs = normalize_args_kwargs(target, 1, b=2, injected=3)

        assert args == (1,)
        assert kwargs == {'b': 2}


class TestTruncate:
    def test_long_content_is_truncated(self):
        result = truncate_content('x' * 600)

        assert result.startswith('x' * 500)
        assert result.endswith('[truncated 100 chars]')

    def test_short_content_is_untouched(self):
        assert truncate_content('short') == 'short'
