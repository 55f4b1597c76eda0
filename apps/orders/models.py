# ==========================================
# apps/orders/models.py
# ==========================================

from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    PREPARING = 'preparing', 'Preparing'
    READY = 'ready', 'Ready'
    DELIVERED = 'delivered', 'Delivered'
    CANCELLED = 'cancelled', 'Cancelled'


# Orders in these states are finished and no longer shown as active
CLOSED_STATUSES = [OrderStatus.DELIVERED, OrderStatus.CANCELLED]


class OrderQuerySet(models.QuerySet):

    def active(self):
        return self.exclude(status__in=CLOSED_STATUSES)


class Order(models.Model):
    """Room service order placed by a guest."""

    room = models.ForeignKey('rooms.Room', on_delete=models.PROTECT, related_name='orders')
    order_number = models.CharField(max_length=20, unique=True)
    customer_name = models.CharField(max_length=100, blank=True)
    customer_phone = models.CharField(max_length=20, blank=True)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING
    )
    special_instructions = models.TextField(blank=True)
    estimated_delivery_time = models.DateTimeField(null=True, blank=True)
    assigned_staff = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_orders'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = OrderQuerySet.as_manager()

    class Meta:
        db_table = 'orders'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='orders_status_created_idx'),
            models.Index(fields=['room', 'status'], name='orders_room_status_idx'),
            models.Index(fields=['created_at'], name='orders_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.order_number

    @property
    def is_active(self):
        return self.status not in CLOSED_STATUSES


class OrderItem(models.Model):
    """Line of an order. Price is copied from the menu when the order is placed."""

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='items')
    menu_item = models.ForeignKey('menu.MenuItem', on_delete=models.PROTECT, related_name='order_items')
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    subtotal = models.DecimalField(max_digits=12, decimal_places=2)
    special_requests = models.TextField(blank=True)

    class Meta:
        db_table = 'order_items'
        ordering = ['id']

    def __str__(self):
        return f'{self.quantity} x {self.menu_item_id} ({self.order_id})'


class OrderStatusHistory(models.Model):
    """Audit trail entry, one per status change of an order."""

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='status_history')
    status = models.CharField(max_length=20, choices=OrderStatus.choices)
    changed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='order_status_changes'
    )
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'order_status_history'
        indexes = [
            models.Index(fields=['order', 'created_at'], name='order_history_order_idx'),
        ]
        ordering = ['-created_at']
        verbose_name_plural = 'order status history'

    def __str__(self):
        return f'{self.order_id} -> {self.status}'
