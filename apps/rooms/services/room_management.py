"""
Room management service.

Room inventory for the front desk: CRUD, bulk housekeeping status changes
and the list of orders still open for a room.
"""

import logging
from typing import Iterable, List, Optional

from django.db import transaction
from django.db.models import QuerySet

from apps.rooms.models import Room, RoomStatus
from apps.orders.models import Order

from .exceptions import (
    RoomNotFoundError,
    DuplicateRoomNumberError,
    RoomHasOrdersError,
    InvalidRoomStatusError,
)

logger = logging.getLogger(__name__)


def _ensure_unique_number(room_number: str, exclude_id=None) -> None:
    rooms = Room.objects.filter(room_number=room_number)
    if exclude_id is not None:
        rooms = rooms.exclude(id=exclude_id)
    if rooms.exists():
        raise DuplicateRoomNumberError("Room number already exists")


def _validate_status(status: str) -> None:
    if status not in RoomStatus.values:
        raise InvalidRoomStatusError(
            f"Invalid status. Must be one of: {', '.join(RoomStatus.values)}"
        )


def list_rooms() -> QuerySet:
    return Room.objects.order_by('room_number')


def get_room(*, room_id) -> Room:
    """
    Raises:
        RoomNotFoundError: If room doesn't exist
    """
    try:
        return Room.objects.get(id=room_id)
    except Room.DoesNotExist:
        raise RoomNotFoundError("Room not found")


def get_room_by_number(*, room_number: str) -> Room:
    """
    Look up a room from the number encoded in its QR code.

    Raises:
        RoomNotFoundError: If room doesn't exist
    """
    try:
        return Room.objects.get(room_number=room_number)
    except Room.DoesNotExist:
        raise RoomNotFoundError("Room not found")


def get_current_orders(*, room_id) -> QuerySet:
    """
    Orders of a room that are neither delivered nor cancelled, newest first.

    An unknown room simply has no orders.
    """
    return (
        Order.objects
        .active()
        .filter(room_id=room_id)
        .select_related('room', 'assigned_staff')
        .order_by('-created_at')
    )


@transaction.atomic
def create_room(
    *,
    room_number: str,
    floor_number: int,
    status: str = RoomStatus.AVAILABLE,
) -> Room:
    """
    Add a room to the inventory. The access code is generated on save.

    Raises:
        DuplicateRoomNumberError: If room number is taken
        InvalidRoomStatusError: If status is unknown
    """
    _validate_status(status)
    _ensure_unique_number(room_number)

    room = Room.objects.create(
        room_number=room_number,
        floor_number=floor_number,
        status=status,
    )

    logger.info("Created room %s on floor %s", room.room_number, room.floor_number)
    return room


@transaction.atomic
def update_room(
    *,
    room_id,
    room_number: Optional[str] = None,
    floor_number: Optional[int] = None,
    status: Optional[str] = None,
) -> Room:
    """
    Update room details. Fields left as None are not changed.

    The access code stays the same when the room is renumbered so printed
    QR stickers keep their identity.

    Raises:
        RoomNotFoundError: If room doesn't exist
        DuplicateRoomNumberError: If the new number belongs to another room
        InvalidRoomStatusError: If status is unknown
    """
    try:
        room = Room.objects.select_for_update().get(id=room_id)
    except Room.DoesNotExist:
        raise RoomNotFoundError("Room not found")

    update_fields = ['updated_at']

    if room_number is not None:
        _ensure_unique_number(room_number, exclude_id=room.id)
        room.room_number = room_number
        update_fields.append('room_number')

    if floor_number is not None:
        room.floor_number = floor_number
        update_fields.append('floor_number')

    if status is not None:
        _validate_status(status)
        room.status = status
        update_fields.append('status')

    room.save(update_fields=update_fields)

    logger.info("Updated room %s (%s)", room.room_number, ', '.join(update_fields[1:]) or 'no changes')
    return room


@transaction.atomic
def delete_room(*, room_id) -> None:
    """
    Remove a room that never had any orders.

    Raises:
        RoomNotFoundError: If room doesn't exist
        RoomHasOrdersError: If any order references the room
    """
    try:
        room = Room.objects.select_for_update().get(id=room_id)
    except Room.DoesNotExist:
        raise RoomNotFoundError("Room not found")

    if Order.objects.filter(room=room).exists():
        raise RoomHasOrdersError("Cannot delete room with existing orders")

    room_number = room.room_number
    room.delete()

    logger.info("Deleted room %s", room_number)


@transaction.atomic
def bulk_update_room_status(*, room_ids: Optional[Iterable[int]] = None, status: str = '') -> List[Room]:
    """
    Set the same status on several rooms. Unknown ids are ignored.

    Returns:
        The rooms that were updated, ordered by room number

    Raises:
        InvalidRoomStatusError: If ids or status are missing, or status is unknown
    """
    room_ids = list(room_ids or [])
    if not room_ids or not status:
        raise InvalidRoomStatusError("Room IDs array and status are required")
    _validate_status(status)

    rooms = list(
        Room.objects
        .select_for_update()
        .filter(id__in=room_ids)
        .order_by('room_number')
    )
    for room in rooms:
        room.status = status
        room.save(update_fields=['status', 'updated_at'])

    logger.info("Set status %s on %d room(s)", status, len(rooms))
    return rooms
