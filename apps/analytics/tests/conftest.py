import pytest
from datetime import datetime, time, timedelta
from django.utils import timezone
from apps.orders.models import Order, OrderStatus


@pytest.fixture
def days_ago():
    """Return a helper that moves an order's creation to noon, N local days ago."""
    def _move(order, days, status=None):
        day = timezone.localdate() - timedelta(days=days)
        created_at = timezone.make_aware(datetime.combine(day, time(12, 0)))
        changes = {'created_at': created_at}
        if status is not None:
            changes['status'] = status
        Order.objects.filter(id=order.id).update(**changes)
        order.refresh_from_db()
        return order
    return _move


@pytest.fixture
def report_orders(place_order, pho, spring_rolls, days_ago):
    """
    Orders over three days:
        today: pho (85000) pending, spring rolls x2 (90000) preparing
        yesterday: pho x2 (170000) delivered, pho (85000) cancelled
        40 days ago: pho (85000) delivered
    """
    place_order()
    today_second = place_order(lines=[{'menu_item_id': spring_rolls.id, 'quantity': 2}])
    Order.objects.filter(id=today_second.id).update(status=OrderStatus.PREPARING)

    days_ago(place_order(lines=[{'menu_item_id': pho.id, 'quantity': 2}]), 1, OrderStatus.DELIVERED)
    days_ago(place_order(), 1, OrderStatus.CANCELLED)
    days_ago(place_order(), 40, OrderStatus.DELIVERED)
