import math

from django.conf import settings
from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.accounts.permissions import IsStaffOrAdmin
from .serializers import (
    OrderCreateSerializer,
    OrderStatusUpdateSerializer,
    OrderBulkStatusSerializer,
    OrderListFilterSerializer,
    OrderManageFilterSerializer,
    OrderSerializer,
    OrderDetailSerializer,
    OrderCreatedSerializer,
    OrderStatusHistorySerializer,
)
from .services import (
    create_order,
    update_order_status,
    bulk_update_order_status,
    get_order,
    list_orders,
    filter_orders_for_management,
    get_order_history,
    # Exceptions
    InvalidOrderError,
    RoomNotFoundError,
    MenuItemUnavailableError,
    OrderNotFoundError,
    InvalidOrderStatusError,
)


# Response serializers for API documentation
class OrderCreatedResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()
    data = OrderCreatedSerializer()


class OrderStatusResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()
    data = OrderSerializer()


class OrderBulkStatusResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()
    data = OrderSerializer(many=True)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class OrderManagePagination(PageNumberPagination):
    """Page-numbered orders for the management screen, sized with ?limit=."""
    page_size = settings.ORDER_MANAGE_DEFAULT_PAGE_SIZE
    page_size_query_param = 'limit'
    max_page_size = settings.ORDER_MANAGE_MAX_PAGE_SIZE

    def get_page_number(self, request, paginator=None):
        try:
            page_number = int(request.query_params.get(self.page_query_param, 1))
        except (TypeError, ValueError):
            return 1
        return max(page_number, 1)

    def paginate_queryset(self, queryset, request, view=None):
        """Slice by offset; a page past the end is empty rather than a 404."""
        self.limit = self.get_page_size(request)
        self.page_number = self.get_page_number(request)
        self.total = queryset.count()

        offset = (self.page_number - 1) * self.limit
        return list(queryset[offset:offset + self.limit])

    def get_paginated_response(self, data):
        return Response({
            'orders': data,
            'pagination': {
                'page': self.page_number,
                'limit': self.limit,
                'total': self.total,
                'total_pages': math.ceil(self.total / self.limit),
            },
        })


class OrderViewSet(viewsets.ViewSet):
    """
    Room service orders.

    create: Place an order (guests, no account)
    retrieve: Track an order (guests, no account)
    list: Staff order board
    manage: Paginated order management with items
    update_status: Change an order's status
    bulk_status: Change the status of several orders
    history: Status history of an order
    """

    lookup_value_regex = r'\d+'

    def get_permissions(self):
        """Guests can place and track orders; everything else is for staff."""
        if self.action in ['create', 'retrieve']:
            return [AllowAny()]
        return [IsAuthenticated(), IsStaffOrAdmin()]

    @extend_schema(
        request=OrderCreateSerializer,
        responses={
            201: OrderCreatedResponseSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['orders'],
    )
    def create(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            order = create_order(
                room_id=data.get('room_id'),
                items=data.get('items', []),
                customer_name=data.get('customer_name') or '',
                customer_phone=data.get('customer_phone') or '',
                special_instructions=data.get('special_instructions') or '',
            )
        except RoomNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (InvalidOrderError, MenuItemUnavailableError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'message': 'Order created successfully',
            'data': OrderCreatedSerializer(order).data,
        }, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: OrderDetailSerializer, 404: ErrorResponseSerializer}, tags=['orders'])
    def retrieve(self, request, pk=None):
        try:
            order = get_order(order_id=pk)
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderDetailSerializer(order).data)

    @extend_schema(
        parameters=[
            OpenApiParameter('status', str, description='Comma separated statuses'),
            OpenApiParameter('roomId', int),
            OpenApiParameter('limit', int),
            OpenApiParameter('offset', int),
        ],
        responses={200: OrderSerializer(many=True)},
        tags=['orders'],
    )
    def list(self, request):
        filter_serializer = OrderListFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        orders = list_orders(
            statuses=params.get('status'),
            room_id=params.get('room_id'),
            limit=params.get('limit'),
            offset=params['offset'],
        )
        return Response(OrderSerializer(orders, many=True).data)

    @extend_schema(
        parameters=[
            OpenApiParameter('status', str),
            OpenApiParameter('date_from', str, description='YYYY-MM-DD, inclusive'),
            OpenApiParameter('date_to', str, description='YYYY-MM-DD, inclusive'),
            OpenApiParameter('room_number', str),
            OpenApiParameter('page', int),
            OpenApiParameter('limit', int),
        ],
        responses={200: OrderDetailSerializer(many=True)},
        tags=['orders'],
    )
    @action(detail=False, methods=['get'])
    def manage(self, request):
        """Filtered, paginated orders with their items."""
        filter_serializer = OrderManageFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        orders = filter_orders_for_management(**filter_serializer.validated_data)

        paginator = OrderManagePagination()
        page = paginator.paginate_queryset(orders, request, view=self)
        return paginator.get_paginated_response(OrderDetailSerializer(page, many=True).data)

    @extend_schema(
        request=OrderStatusUpdateSerializer,
        responses={
            200: OrderStatusResponseSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['orders'],
    )
    @action(detail=True, methods=['patch'], url_path='status')
    def update_status(self, request, pk=None):
        """Change status and take over the order."""
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = update_order_status(
                order_id=pk,
                status=serializer.validated_data.get('status', ''),
                changed_by=request.user,
                notes=serializer.validated_data.get('notes') or '',
            )
        except InvalidOrderStatusError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({
            'message': 'Order status updated successfully',
            'data': OrderSerializer(order).data,
        })

    @extend_schema(
        request=OrderBulkStatusSerializer,
        responses={200: OrderBulkStatusResponseSerializer, 400: ErrorResponseSerializer},
        tags=['orders'],
    )
    @action(detail=False, methods=['patch'], url_path='bulk-status')
    def bulk_status(self, request):
        serializer = OrderBulkStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            orders = bulk_update_order_status(
                order_ids=data.get('order_ids'),
                status=data.get('status', ''),
                changed_by=request.user,
                notes=data.get('notes') or '',
            )
        except InvalidOrderStatusError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'message': f"Updated {len(orders)} orders to {data['status']}",
            'data': OrderSerializer(orders, many=True).data,
        })

    @extend_schema(responses={200: OrderStatusHistorySerializer(many=True)}, tags=['orders'])
    @action(detail=True, methods=['get'])
    def history(self, request, pk=None):
        try:
            entries = get_order_history(order_id=pk)
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderStatusHistorySerializer(entries, many=True).data)
