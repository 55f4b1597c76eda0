"""Services for rooms business logic."""

from .exceptions import (
    RoomsServiceError,
    RoomNotFoundError,
    DuplicateRoomNumberError,
    RoomHasOrdersError,
    InvalidRoomStatusError,
)
from .room_management import (
    list_rooms,
    get_room,
    get_room_by_number,
    get_current_orders,
    create_room,
    update_room,
    delete_room,
    bulk_update_room_status,
)
from .qr_codes import guest_order_url, generate_room_qr_png

__all__ = [
    # Exceptions
    'RoomsServiceError',
    'RoomNotFoundError',
    'DuplicateRoomNumberError',
    'RoomHasOrdersError',
    'InvalidRoomStatusError',
    # Services
    'list_rooms',
    'get_room',
    'get_room_by_number',
    'get_current_orders',
    'create_room',
    'update_room',
    'delete_room',
    'bulk_update_room_status',
    'guest_order_url',
    'generate_room_qr_png',
]
