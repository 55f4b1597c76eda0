# ==========================================
# apps/orders/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Order, OrderItem, OrderStatusHistory, OrderStatus


STATUS_COLORS = {
    OrderStatus.PENDING: ('#E5C49A', '#2C1810'),
    OrderStatus.PREPARING: ('#A47449', 'white'),
    OrderStatus.READY: ('#2F5D8A', 'white'),
    OrderStatus.DELIVERED: ('#6B8E5E', 'white'),
    OrderStatus.CANCELLED: ('#B85C5C', 'white'),
}


def _status_badge(status, label):
    bg, fg = STATUS_COLORS.get(status, ('#ccc', '#666'))
    return format_html(
        '<span style="background: {}; color: {}; padding: 3px 8px; '
        'border-radius: 10px; font-size: 11px;">{}</span>',
        bg, fg, label
    )


class OrderItemInline(admin.TabularInline):
    """Order lines are created with the order and never edited."""
    model = OrderItem
    extra = 0
    fields = ['menu_item', 'quantity', 'unit_price', 'subtotal', 'special_requests']
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


class OrderStatusHistoryInline(admin.TabularInline):
    model = OrderStatusHistory
    extra = 0
    fields = ['status', 'changed_by', 'notes', 'created_at']
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin interface for room service orders.

    Status changes made through the API are recorded in the history;
    this screen is for looking things up.
    """

    list_display = [
        'order_number',
        'room',
        'customer_name',
        'total_amount',
        'status_badge',
        'assigned_staff',
        'created_at',
    ]
    list_filter = ['status', 'created_at']
    search_fields = ['order_number', 'customer_name', 'customer_phone', 'room__room_number']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    list_select_related = ['room', 'assigned_staff']
    readonly_fields = [
        'order_number',
        'total_amount',
        'estimated_delivery_time',
        'created_at',
        'updated_at',
    ]
    inlines = [OrderItemInline, OrderStatusHistoryInline]

    def status_badge(self, obj):
        return _status_badge(obj.status, obj.get_status_display())
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'


@admin.register(OrderStatusHistory)
class OrderStatusHistoryAdmin(admin.ModelAdmin):
    list_display = ['order', 'status', 'changed_by', 'notes', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['order__order_number', 'changed_by__username']
    list_select_related = ['order', 'changed_by']
