"""Read-side order queries for guests and staff."""

from datetime import date
from typing import Iterable, Optional

from django.conf import settings
from django.db.models import Prefetch, QuerySet

from apps.orders.models import Order, OrderItem, OrderStatusHistory

from .exceptions import OrderNotFoundError


def _with_relations(queryset: QuerySet) -> QuerySet:
    return queryset.select_related('room', 'assigned_staff')


def _with_items(queryset: QuerySet) -> QuerySet:
    return _with_relations(queryset).prefetch_related(
        Prefetch('items', queryset=OrderItem.objects.select_related('menu_item'))
    )


def get_order(*, order_id) -> Order:
    """
    Order with room, assigned staff and items, for guest tracking.

    Raises:
        OrderNotFoundError: If order doesn't exist
    """
    try:
        return _with_items(Order.objects.all()).get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError("Order not found")


def list_orders(
    *,
    statuses: Optional[Iterable[str]] = None,
    room_id=None,
    limit: Optional[int] = None,
    offset: int = 0,
) -> QuerySet:
    """
    Orders for the staff board, newest first.

    Args:
        statuses: Keep only orders in any of these statuses
        room_id: Keep only orders of this room
        limit: Page size (ORDER_LIST_DEFAULT_LIMIT if not given)
        offset: Number of orders to skip
    """
    if limit is None:
        limit = settings.ORDER_LIST_DEFAULT_LIMIT

    orders = _with_relations(Order.objects.order_by('-created_at'))

    statuses = [s for s in (statuses or []) if s]
    if statuses:
        orders = orders.filter(status__in=statuses)

    if room_id is not None:
        orders = orders.filter(room_id=room_id)

    return orders[offset:offset + limit]


def filter_orders_for_management(
    *,
    status: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    room_number: Optional[str] = None,
) -> QuerySet:
    """
    Orders with items for the management screen, newest first.

    Both dates are inclusive calendar days in the hotel's time zone.
    """
    orders = _with_items(Order.objects.order_by('-created_at'))

    if status:
        orders = orders.filter(status=status)

    if date_from:
        orders = orders.filter(created_at__date__gte=date_from)

    if date_to:
        orders = orders.filter(created_at__date__lte=date_to)

    if room_number:
        orders = orders.filter(room__room_number=room_number)

    return orders


def get_order_history(*, order_id) -> QuerySet:
    """
    Status history of an order, newest first.

    Raises:
        OrderNotFoundError: If order doesn't exist
    """
    if not Order.objects.filter(id=order_id).exists():
        raise OrderNotFoundError("Order not found")

    return (
        OrderStatusHistory.objects
        .filter(order_id=order_id)
        .select_related('changed_by')
        .order_by('-created_at', '-id')
    )
