from django.http import HttpResponse
from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsStaffOrAdmin
from apps.orders.serializers import OrderSerializer
from .serializers import (
    RoomCreateSerializer,
    RoomUpdateSerializer,
    RoomBulkStatusSerializer,
    RoomSerializer,
)
from .services import (
    list_rooms,
    get_room,
    get_room_by_number,
    get_current_orders,
    create_room,
    update_room,
    delete_room,
    bulk_update_room_status,
    generate_room_qr_png,
    # Exceptions
    RoomNotFoundError,
    DuplicateRoomNumberError,
    RoomHasOrdersError,
    InvalidRoomStatusError,
)


# Response serializers for API documentation
class MessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()


class RoomBulkStatusResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()
    data = RoomSerializer(many=True)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class RoomViewSet(viewsets.ViewSet):
    """
    Hotel rooms.

    list: All rooms by room number (public)
    retrieve: A room (public)
    by_number: A room looked up by its number, used after scanning the QR code (public)
    orders: Orders of the room that are still open (public)
    qr_code: PNG QR code leading to the guest ordering page
    create/update/destroy: Room inventory management
    bulk_status: Set the status of several rooms
    """

    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action in ['list', 'retrieve', 'by_number', 'orders']:
            return [AllowAny()]
        return [IsAuthenticated(), IsStaffOrAdmin()]

    @extend_schema(responses={200: RoomSerializer(many=True)}, tags=['rooms'])
    def list(self, request):
        return Response(RoomSerializer(list_rooms(), many=True).data)

    @extend_schema(responses={200: RoomSerializer, 404: ErrorResponseSerializer}, tags=['rooms'])
    def retrieve(self, request, pk=None):
        try:
            room = get_room(room_id=pk)
        except RoomNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(RoomSerializer(room).data)

    @extend_schema(responses={200: RoomSerializer, 404: ErrorResponseSerializer}, tags=['rooms'])
    @action(detail=False, methods=['get'], url_path=r'number/(?P<room_number>[^/]+)')
    def by_number(self, request, room_number=None):
        try:
            room = get_room_by_number(room_number=room_number)
        except RoomNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(RoomSerializer(room).data)

    @extend_schema(responses={200: OrderSerializer(many=True)}, tags=['rooms'])
    @action(detail=True, methods=['get'])
    def orders(self, request, pk=None):
        orders = get_current_orders(room_id=pk)
        return Response(OrderSerializer(orders, many=True).data)

    @extend_schema(responses={(200, 'image/png'): OpenApiTypes.BINARY}, tags=['rooms'])
    @action(detail=True, methods=['get'])
    def qr_code(self, request, pk=None):
        """
        Get the room's QR code as a PNG image.

        GET /api/rooms/{id}/qr_code/
        """
        try:
            room = get_room(room_id=pk)
        except RoomNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        response = HttpResponse(generate_room_qr_png(room), content_type='image/png')
        response['Content-Disposition'] = f'inline; filename="room-{room.room_number}-qr.png"'
        return response

    @extend_schema(request=RoomCreateSerializer, responses={201: RoomSerializer}, tags=['rooms'])
    def create(self, request):
        serializer = RoomCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            room = create_room(**serializer.validated_data)
        except (DuplicateRoomNumberError, InvalidRoomStatusError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(RoomSerializer(room).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=RoomUpdateSerializer, responses={200: RoomSerializer}, tags=['rooms'])
    def update(self, request, pk=None):
        serializer = RoomUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            room = update_room(room_id=pk, **serializer.validated_data)
        except RoomNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (DuplicateRoomNumberError, InvalidRoomStatusError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(RoomSerializer(room).data)

    @extend_schema(responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer}, tags=['rooms'])
    def destroy(self, request, pk=None):
        try:
            delete_room(room_id=pk)
        except RoomNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except RoomHasOrdersError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'message': 'Room deleted successfully'})

    @extend_schema(
        request=RoomBulkStatusSerializer,
        responses={200: RoomBulkStatusResponseSerializer, 400: ErrorResponseSerializer},
        tags=['rooms'],
    )
    @action(detail=False, methods=['patch'], url_path='bulk-status')
    def bulk_status(self, request):
        serializer = RoomBulkStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            rooms = bulk_update_room_status(**serializer.validated_data)
        except InvalidRoomStatusError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'message': f'Updated {len(rooms)} rooms',
            'data': RoomSerializer(rooms, many=True).data,
        })
