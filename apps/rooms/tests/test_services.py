"""Service layer unit tests for rooms app."""

import pytest
from django.test import override_settings

from apps.rooms.models import Room, RoomStatus
from apps.rooms.services import (
    create_room,
    update_room,
    delete_room,
    bulk_update_room_status,
    get_current_orders,
    guest_order_url,
)
from apps.rooms.services.exceptions import (
    RoomNotFoundError,
    DuplicateRoomNumberError,
    RoomHasOrdersError,
    InvalidRoomStatusError,
)


@pytest.mark.django_db
class TestRoomManagement:

    def test_create_generates_unique_access_codes(self, db):
        first = create_room(room_number='401', floor_number=4)
        second = create_room(room_number='402', floor_number=4)

        assert first.qr_code.startswith('ROOM_401_')
        assert second.qr_code.startswith('ROOM_402_')
        assert first.qr_code != second.qr_code

    def test_create_duplicate(self, room):
        with pytest.raises(DuplicateRoomNumberError):
            create_room(room_number='101', floor_number=1)

    def test_renumbering_keeps_access_code(self, room):
        code = room.qr_code

        updated = update_room(room_id=room.id, room_number='111')

        assert updated.room_number == '111'
        assert updated.qr_code == code

    def test_update_invalid_status(self, room):
        with pytest.raises(InvalidRoomStatusError):
            update_room(room_id=room.id, status='flooded')

    def test_delete_missing(self, db):
        with pytest.raises(RoomNotFoundError):
            delete_room(room_id=12345)

    def test_delete_with_orders(self, room, place_order):
        place_order()

        with pytest.raises(RoomHasOrdersError):
            delete_room(room_id=room.id)

    def test_bulk_update_ignores_unknown_ids(self, room, other_room):
        rooms = bulk_update_room_status(room_ids=[room.id, 777], status=RoomStatus.OCCUPIED)

        assert rooms == [room]
        other_room.refresh_from_db()
        assert other_room.status == RoomStatus.AVAILABLE

    def test_bulk_update_requires_ids_and_status(self, room):
        with pytest.raises(InvalidRoomStatusError, match="Room IDs array and status are required"):
            bulk_update_room_status(room_ids=[], status=RoomStatus.CLEANING)

        with pytest.raises(InvalidRoomStatusError, match="Room IDs array and status are required"):
            bulk_update_room_status(room_ids=[room.id], status='')

    def test_current_orders_of_missing_room(self, db):
        assert list(get_current_orders(room_id=12345)) == []


class TestGuestOrderUrl:

    @override_settings(GUEST_ORDER_BASE_URL='https://order.hotel.example.com/')
    def test_url_points_to_room(self):
        room = Room(room_number='12A', floor_number=1)

        assert guest_order_url(room) == 'https://order.hotel.example.com/order?room=12A'
