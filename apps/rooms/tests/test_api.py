import pytest
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from apps.orders.models import OrderStatus
from apps.orders.services import update_order_status
from apps.rooms.models import Room, RoomStatus


# =============================================================================
# Public Room Tests
# =============================================================================

@pytest.mark.django_db
class TestRoomList:
    """Tests for GET /api/rooms/"""

    def test_list_rooms_ordered_by_number(self, api_client, other_room, room):
        response = api_client.get(reverse('rooms:room-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [r['room_number'] for r in response.data] == ['101', '205']
        assert response.data[0]['qr_code'].startswith('ROOM_101_')


@pytest.mark.django_db
class TestRoomDetail:
    """Tests for GET /api/rooms/{id}/ and /api/rooms/number/{room_number}/"""

    def test_get_room(self, api_client, room):
        response = api_client.get(reverse('rooms:room-detail', args=[room.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['floor_number'] == 1
        assert response.data['status'] == RoomStatus.AVAILABLE

    def test_get_missing_room(self, api_client, db):
        response = api_client.get(reverse('rooms:room-detail', args=[9999]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Room not found'

    def test_get_room_by_number(self, api_client, room):
        url = reverse('rooms:room-by-number', kwargs={'room_number': '101'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == room.id

    def test_get_room_by_unknown_number(self, api_client, room):
        url = reverse('rooms:room-by-number', kwargs={'room_number': '999'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestRoomOrders:
    """Tests for GET /api/rooms/{id}/orders/"""

    def test_only_open_orders_newest_first(self, api_client, room, place_order, staff_user):
        first = place_order()
        second = place_order()
        delivered = place_order()
        update_order_status(order_id=first.id, status=OrderStatus.PREPARING, changed_by=staff_user)
        update_order_status(order_id=delivered.id, status=OrderStatus.DELIVERED, changed_by=staff_user)

        response = api_client.get(reverse('rooms:room-orders', args=[room.id]))

        assert response.status_code == status.HTTP_200_OK
        assert [o['id'] for o in response.data] == [second.id, first.id]
        assert response.data[1]['assigned_staff_name'] == 'waiter'
        assert response.data[0]['assigned_staff_name'] is None

    def test_unknown_room_has_no_orders(self, api_client, db):
        response = api_client.get(reverse('rooms:room-orders', args=[9999]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_other_rooms_orders_excluded(self, api_client, room, other_room, place_order):
        place_order(target_room=other_room)

        response = api_client.get(reverse('rooms:room-orders', args=[room.id]))

        assert response.data == []


@pytest.mark.django_db
class TestRoomQrCode:
    """Tests for GET /api/rooms/{id}/qr_code/"""

    @override_settings(GUEST_ORDER_BASE_URL='https://order.hotel.example.com/')
    def test_returns_png(self, staff_client, room):
        response = staff_client.get(reverse('rooms:room-qr-code', args=[room.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'image/png'
        assert response.content.startswith(b'\x89PNG')

    def test_requires_staff(self, api_client, room):
        response = api_client.get(reverse('rooms:room-qr-code', args=[room.id]))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Room Management Tests
# =============================================================================

@pytest.mark.django_db
class TestRoomCreate:
    """Tests for POST /api/rooms/"""

    def test_create_room(self, staff_client):
        data = {'room_number': '301', 'floor_number': 3}
        response = staff_client.post(reverse('rooms:room-list'), data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == RoomStatus.AVAILABLE
        assert response.data['qr_code'].startswith('ROOM_301_')

    def test_create_with_status(self, admin_client):
        data = {'room_number': '302', 'floor_number': 3, 'status': 'cleaning'}
        response = admin_client.post(reverse('rooms:room-list'), data)

        assert response.status_code == status.HTTP_201_CREATED
        assert Room.objects.get(room_number='302').status == RoomStatus.CLEANING

    def test_duplicate_room_number(self, staff_client, room):
        data = {'room_number': '101', 'floor_number': 1}
        response = staff_client.post(reverse('rooms:room-list'), data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Room number already exists'

    def test_numbers_required(self, staff_client):
        response = staff_client.post(reverse('rooms:room-list'), {'room_number': '303'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'floor_number' in response.data

    def test_guest_cannot_create(self, api_client, db):
        data = {'room_number': '304', 'floor_number': 3}
        response = api_client.post(reverse('rooms:room-list'), data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestRoomUpdate:
    """Tests for PUT /api/rooms/{id}/"""

    def test_update_room(self, staff_client, room):
        url = reverse('rooms:room-detail', args=[room.id])
        response = staff_client.put(url, {'room_number': '102', 'status': 'occupied'})

        assert response.status_code == status.HTTP_200_OK
        room.refresh_from_db()
        assert room.room_number == '102'
        assert room.status == RoomStatus.OCCUPIED
        assert room.floor_number == 1

    def test_keep_own_number(self, staff_client, room):
        url = reverse('rooms:room-detail', args=[room.id])
        response = staff_client.put(url, {'room_number': '101', 'floor_number': 1})

        assert response.status_code == status.HTTP_200_OK

    def test_number_taken(self, staff_client, room, other_room):
        url = reverse('rooms:room-detail', args=[room.id])
        response = staff_client.put(url, {'room_number': '205'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Room number already exists'

    def test_missing_room(self, staff_client, db):
        url = reverse('rooms:room-detail', args=[9999])
        response = staff_client.put(url, {'floor_number': 4})

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestRoomDelete:
    """Tests for DELETE /api/rooms/{id}/"""

    def test_delete_room(self, staff_client, room):
        response = staff_client.delete(reverse('rooms:room-detail', args=[room.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Room deleted successfully'
        assert not Room.objects.filter(id=room.id).exists()

    def test_room_with_orders_kept(self, staff_client, room, place_order):
        place_order()

        response = staff_client.delete(reverse('rooms:room-detail', args=[room.id]))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Cannot delete room with existing orders'
        assert Room.objects.filter(id=room.id).exists()

    def test_missing_room(self, staff_client, db):
        response = staff_client.delete(reverse('rooms:room-detail', args=[9999]))

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestRoomBulkStatus:
    """Tests for PATCH /api/rooms/bulk-status/"""

    def test_bulk_update(self, staff_client, room, other_room):
        data = {'room_ids': [room.id, other_room.id, 9999], 'status': 'maintenance'}
        response = staff_client.patch(reverse('rooms:room-bulk-status'), data)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Updated 2 rooms'
        assert Room.objects.filter(status=RoomStatus.MAINTENANCE).count() == 2

    def test_unknown_status(self, staff_client, room):
        data = {'room_ids': [room.id], 'status': 'haunted'}
        response = staff_client.patch(reverse('rooms:room-bulk-status'), data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        room.refresh_from_db()
        assert room.status == RoomStatus.AVAILABLE

    @pytest.mark.parametrize('data', [
        {'status': 'cleaning'},
        {'room_ids': [], 'status': 'cleaning'},
        {'room_ids': [1]},
    ])
    def test_missing_fields(self, staff_client, db, data):
        response = staff_client.patch(reverse('rooms:room-bulk-status'), data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Room IDs array and status are required'
