"""
Order placement service.

Guests order without an account. Placing an order is a single transaction:
1. Check the room and every requested menu item
2. Snapshot prices and compute the total
3. Estimate delivery from the slowest dish
4. Insert the order, its items and the first history entry
Any failure rolls all of it back.
"""

import logging
import secrets
import time
from datetime import timedelta
from decimal import Decimal
from typing import Iterable, Mapping

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.menu.models import MenuItem
from apps.orders.models import Order, OrderItem, OrderStatus, OrderStatusHistory
from apps.rooms.models import Room

from .exceptions import (
    InvalidOrderError,
    RoomNotFoundError,
    MenuItemUnavailableError,
)

logger = logging.getLogger(__name__)


def generate_order_number() -> str:
    """ORDER + last 8 digits of the epoch in ms + 2 random digits."""
    timestamp = str(int(time.time() * 1000))[-8:]
    return f'ORDER{timestamp}{secrets.randbelow(100):02d}'


def _price_lines(lines):
    """
    Resolve requested lines against the available menu.

    Returns:
        (priced lines, total amount, longest preparation time)
    """
    menu_item_ids = {line['menu_item_id'] for line in lines}
    available = MenuItem.objects.filter(is_available=True).in_bulk(menu_item_ids)

    priced = []
    total = Decimal('0')
    max_prep_time = 0

    for line in lines:
        menu_item = available.get(line['menu_item_id'])
        if menu_item is None:
            raise MenuItemUnavailableError(
                f"Menu item {line['menu_item_id']} not found or unavailable"
            )

        quantity = line['quantity']
        if not isinstance(quantity, int) or quantity < 1:
            raise InvalidOrderError("Quantity must be a positive integer")

        subtotal = menu_item.price * quantity
        total += subtotal
        max_prep_time = max(max_prep_time, menu_item.preparation_time)

        priced.append(OrderItem(
            menu_item=menu_item,
            quantity=quantity,
            unit_price=menu_item.price,
            subtotal=subtotal,
            special_requests=line.get('special_requests') or '',
        ))

    return priced, total, max_prep_time


def create_order(
    *,
    room_id,
    items: Iterable[Mapping],
    customer_name: str = '',
    customer_phone: str = '',
    special_instructions: str = '',
    max_retries: int = 5,
) -> Order:
    """
    Place a room service order.

    Args:
        room_id: Room the order is delivered to
        items: Dicts with menu_item_id, quantity and optional special_requests
        customer_name: Optional guest name
        customer_phone: Optional guest phone
        special_instructions: Optional note for the whole order
        max_retries: Maximum attempts to get a unique order number

    Returns:
        Created Order instance

    Raises:
        InvalidOrderError: If room or items are missing, or a quantity is invalid
        RoomNotFoundError: If room doesn't exist
        MenuItemUnavailableError: If a menu item doesn't exist or is unavailable
        RuntimeError: If cannot generate unique order number after retries
    """
    items = list(items or [])
    if not room_id or not items:
        raise InvalidOrderError("Room ID and items are required")

    # Retry logic outside transaction to handle order number collisions
    for attempt in range(max_retries):
        order_number = generate_order_number()

        try:
            # Each attempt is a separate transaction
            with transaction.atomic():
                try:
                    room = Room.objects.get(id=room_id)
                except Room.DoesNotExist:
                    raise RoomNotFoundError("Room not found")

                order_items, total, max_prep_time = _price_lines(items)
                estimated_delivery_time = timezone.now() + timedelta(
                    minutes=max_prep_time + settings.ORDER_DELIVERY_BUFFER_MINUTES
                )

                order = Order.objects.create(
                    room=room,
                    order_number=order_number,
                    customer_name=customer_name or '',
                    customer_phone=customer_phone or '',
                    total_amount=total,
                    special_instructions=special_instructions or '',
                    estimated_delivery_time=estimated_delivery_time,
                )

                for order_item in order_items:
                    order_item.order = order
                OrderItem.objects.bulk_create(order_items)

                OrderStatusHistory.objects.create(
                    order=order,
                    status=OrderStatus.PENDING,
                    notes='Order created',
                )

        except IntegrityError:
            if not Order.objects.filter(order_number=order_number).exists():
                raise
            # Order number collision
            if attempt == max_retries - 1:
                raise RuntimeError(
                    f"Failed to generate unique order number after {max_retries} attempts"
                )
            continue

        logger.info(
            "Order %s placed for room %s: %d item(s), total %s %s",
            order.order_number,
            room.room_number,
            len(order_items),
            order.total_amount,
            settings.HOTEL_CURRENCY,
        )
        return order
