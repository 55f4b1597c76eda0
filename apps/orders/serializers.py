from rest_framework import serializers
from .models import Order, OrderItem, OrderStatus, OrderStatusHistory


# =============================================================================
# Input Serializers
# =============================================================================

class OrderLineInputSerializer(serializers.Serializer):
    """One requested menu item, as sent by the guest ordering page."""

    menuItemId = serializers.IntegerField(source='menu_item_id')
    quantity = serializers.IntegerField(min_value=1)
    specialRequests = serializers.CharField(
        source='special_requests',
        required=False,
        allow_blank=True,
        allow_null=True
    )


class OrderCreateSerializer(serializers.Serializer):
    """
    Validate a guest order.

    Room and items are optional here so that a missing value produces the
    service's "Room ID and items are required" error.
    """

    roomId = serializers.IntegerField(source='room_id', required=False, allow_null=True)
    customerName = serializers.CharField(
        source='customer_name', max_length=100,
        required=False, allow_blank=True, allow_null=True
    )
    customerPhone = serializers.CharField(
        source='customer_phone', max_length=20,
        required=False, allow_blank=True, allow_null=True
    )
    items = OrderLineInputSerializer(many=True, required=False)
    specialInstructions = serializers.CharField(
        source='special_instructions',
        required=False, allow_blank=True, allow_null=True
    )


class OrderStatusUpdateSerializer(serializers.Serializer):
    """Status is checked by the service ("Status is required" / "Invalid status")."""

    status = serializers.CharField(required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class OrderBulkStatusSerializer(serializers.Serializer):
    """Presence is checked by the service."""

    order_ids = serializers.ListField(child=serializers.IntegerField(), required=False)
    status = serializers.CharField(required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class OrderListFilterSerializer(serializers.Serializer):
    """Query parameters of the staff order list."""

    status = serializers.CharField(required=False, allow_blank=True)
    roomId = serializers.IntegerField(source='room_id', required=False)
    limit = serializers.IntegerField(required=False, min_value=1)
    offset = serializers.IntegerField(required=False, min_value=0, default=0)

    def validate_status(self, value):
        statuses = [s.strip() for s in value.split(',') if s.strip()]
        unknown = [s for s in statuses if s not in OrderStatus.values]
        if unknown:
            raise serializers.ValidationError(f"Unknown status: {', '.join(unknown)}")
        return statuses


class OrderManageFilterSerializer(serializers.Serializer):
    """Query parameters of the order management screen. Paging is handled by the paginator."""

    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    room_number = serializers.CharField(required=False, allow_blank=True)

    def validate(self, data):
        date_from = data.get('date_from')
        date_to = data.get('date_to')
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({'date_from': 'Must not be after date_to'})
        return data


# =============================================================================
# Output Serializers
# =============================================================================

class OrderItemSerializer(serializers.ModelSerializer):
    menu_item_name = serializers.CharField(source='menu_item.name', read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            'id',
            'menu_item',
            'menu_item_name',
            'quantity',
            'unit_price',
            'subtotal',
            'special_requests',
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Order with room and assigned staff names, without items."""

    room_number = serializers.CharField(source='room.room_number', read_only=True)
    floor_number = serializers.IntegerField(source='room.floor_number', read_only=True)
    assigned_staff_name = serializers.CharField(
        source='assigned_staff.username',
        read_only=True,
        default=None
    )
    is_active = serializers.BooleanField(read_only=True)

    class Meta:
        model = Order
        fields = [
            'id',
            'order_number',
            'room',
            'room_number',
            'floor_number',
            'customer_name',
            'customer_phone',
            'total_amount',
            'status',
            'is_active',
            'special_instructions',
            'estimated_delivery_time',
            'assigned_staff',
            'assigned_staff_name',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class OrderDetailSerializer(OrderSerializer):
    """Order with its items."""

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta(OrderSerializer.Meta):
        fields = OrderSerializer.Meta.fields + ['items']
        read_only_fields = fields


class OrderCreatedSerializer(serializers.ModelSerializer):
    """Confirmation shown to the guest after ordering."""

    orderNumber = serializers.CharField(source='order_number')
    totalAmount = serializers.DecimalField(source='total_amount', max_digits=12, decimal_places=2)
    estimatedDeliveryTime = serializers.DateTimeField(source='estimated_delivery_time')
    createdAt = serializers.DateTimeField(source='created_at')

    class Meta:
        model = Order
        fields = ['id', 'orderNumber', 'totalAmount', 'estimatedDeliveryTime', 'createdAt']
        read_only_fields = fields


class OrderStatusHistorySerializer(serializers.ModelSerializer):
    changed_by_username = serializers.CharField(
        source='changed_by.username',
        read_only=True,
        default=None
    )

    class Meta:
        model = OrderStatusHistory
        fields = [
            'id',
            'status',
            'notes',
            'changed_by',
            'changed_by_username',
            'created_at',
        ]
        read_only_fields = fields
