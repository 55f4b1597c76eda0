"""
Order status workflow.

Every status change appends exactly one history row per affected order,
in the same transaction as the change itself.
"""

import logging
from typing import Iterable, List, Optional

from django.db import transaction

from apps.orders.models import Order, OrderStatus, OrderStatusHistory

from .exceptions import OrderNotFoundError, InvalidOrderStatusError

logger = logging.getLogger(__name__)


def _validate_status(status: str) -> None:
    if not status:
        raise InvalidOrderStatusError("Status is required")
    if status not in OrderStatus.values:
        raise InvalidOrderStatusError("Invalid status")


@transaction.atomic
def update_order_status(*, order_id, status: str, changed_by, notes: str = '') -> Order:
    """
    Move an order to a new status and assign it to the staff member doing it.

    Any valid status may follow any other, so staff can correct mistakes.

    Raises:
        InvalidOrderStatusError: If status is missing or unknown
        OrderNotFoundError: If order doesn't exist
    """
    _validate_status(status)

    try:
        order = Order.objects.select_for_update().get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError("Order not found")

    old_status = order.status
    order.status = status
    order.assigned_staff = changed_by
    order.save(update_fields=['status', 'assigned_staff', 'updated_at'])

    OrderStatusHistory.objects.create(
        order=order,
        status=status,
        changed_by=changed_by,
        notes=notes or '',
    )

    logger.info(
        "Order %s: %s -> %s by %s",
        order.order_number, old_status, status, changed_by.username
    )
    return order


@transaction.atomic
def bulk_update_order_status(
    *,
    order_ids: Optional[Iterable[int]] = None,
    status: str = '',
    changed_by,
    notes: str = '',
) -> List[Order]:
    """
    Set the same status on several orders. Unknown ids are ignored.

    Assignment is left unchanged; only the history records who did it.

    Returns:
        The orders that were updated

    Raises:
        InvalidOrderStatusError: If ids or status are missing, or status is unknown
    """
    order_ids = list(order_ids or [])
    if not order_ids or not status:
        raise InvalidOrderStatusError("Order IDs array and status are required")
    _validate_status(status)

    orders = list(
        Order.objects
        .select_for_update()
        .filter(id__in=order_ids)
        .order_by('id')
    )

    for order in orders:
        order.status = status
        order.save(update_fields=['status', 'updated_at'])

    OrderStatusHistory.objects.bulk_create([
        OrderStatusHistory(
            order=order,
            status=status,
            changed_by=changed_by,
            notes=notes or '',
        )
        for order in orders
    ])

    logger.info(
        "Bulk status %s on %d order(s) by %s",
        status, len(orders), changed_by.username
    )
    return orders
