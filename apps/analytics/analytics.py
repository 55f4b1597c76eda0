"""
Analytics Module
=================

Read-only aggregate queries over orders that power the staff dashboard
and the admin revenue reports.

Classes:
    AnalyticsQueries: Static methods for dashboard and report queries.

Example:
    Getting the dashboard for today::

        from apps.analytics.analytics import AnalyticsQueries

        data = AnalyticsQueries.dashboard()
        print(f"{data['today']['totalOrders']} orders so far today")

Note:
    Days are calendar days in the hotel's time zone (TIME_ZONE setting).
"""

from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.db.models import Sum, Count, Q
from django.db.models.functions import TruncDate, Coalesce
from django.utils import timezone

from apps.orders.models import Order, OrderItem, OrderStatus
from .exceptions import InvalidDateRangeError


class AnalyticsQueries:
    """
    Aggregate queries for analytics endpoints.

    Methods:
        dashboard: Today's figures, open orders and best sellers.
        daily_report: Orders and revenue per day over a date range.

    Note:
        All methods return plain dictionaries or lists, not Django objects,
        making them suitable for JSON serialization in API responses.
    """

    @staticmethod
    def dashboard(today=None):
        """
        Snapshot for the staff dashboard.

        Args:
            today (date, optional): Day to report on. Defaults to the
                current local date.

        Returns:
            dict: Dashboard data containing:
                - today (dict): totalOrders and totalRevenue for the day,
                  pendingOrders across all days
                - statusBreakdown (list): {status, count} for the day
                - activeOrders (list): Orders not delivered or cancelled,
                  newest first, with room_number
                - popularItems (list): {name, total_quantity, order_count}
                  for the day, most ordered first
        """
        if today is None:
            today = timezone.localdate()

        todays_orders = Order.objects.filter(created_at__date=today)

        totals = todays_orders.aggregate(
            total_orders=Count('id'),
            total_revenue=Coalesce(Sum('total_amount'), Decimal('0.00')),
        )

        pending_count = Order.objects.filter(status=OrderStatus.PENDING).count()

        status_breakdown = list(
            todays_orders
            .values('status')
            .annotate(count=Count('id'))
            .order_by('status')
        )

        active_orders = [
            {
                'id': order.id,
                'order_number': order.order_number,
                'customer_name': order.customer_name,
                'total_amount': float(order.total_amount),
                'status': order.status,
                'estimated_delivery_time': order.estimated_delivery_time,
                'created_at': order.created_at,
                'room_number': order.room.room_number,
            }
            for order in (
                Order.objects
                .active()
                .select_related('room')
                .order_by('-created_at')[:settings.DASHBOARD_ACTIVE_ORDERS_LIMIT]
            )
        ]

        popular_items = [
            {
                'name': row['menu_item__name'],
                'total_quantity': row['total_quantity'],
                'order_count': row['order_count'],
            }
            for row in (
                OrderItem.objects
                .filter(order__created_at__date=today)
                .values('menu_item_id', 'menu_item__name')
                .annotate(
                    total_quantity=Sum('quantity'),
                    order_count=Count('order', distinct=True),
                )
                .order_by('-total_quantity', 'menu_item__name')[:settings.DASHBOARD_POPULAR_ITEMS_LIMIT]
            )
        ]

        return {
            'today': {
                'totalOrders': totals['total_orders'],
                'totalRevenue': float(totals['total_revenue']),
                'pendingOrders': pending_count,
            },
            'statusBreakdown': status_breakdown,
            'activeOrders': active_orders,
            'popularItems': popular_items,
        }

    @staticmethod
    def daily_report(start_date=None, end_date=None):
        """
        Orders and revenue grouped by day, newest day first.

        Args:
            start_date (date, optional): First day to include. Without it
                the last REPORT_DEFAULT_DAYS days are reported.
            end_date (date, optional): Last day to include. Only used
                together with start_date.

        Returns:
            list: One dict per day with orders:
                - date (date)
                - total_orders (int)
                - total_revenue (float)
                - delivered_orders (int)
                - cancelled_orders (int)

        Raises:
            InvalidDateRangeError: If start_date is after end_date.
        """
        orders = Order.objects.all()

        if start_date and end_date:
            if start_date > end_date:
                raise InvalidDateRangeError("startDate must not be after endDate")
            orders = orders.filter(created_at__date__range=(start_date, end_date))
        elif start_date:
            orders = orders.filter(created_at__date__gte=start_date)
        else:
            since = timezone.localdate() - timedelta(days=settings.REPORT_DEFAULT_DAYS)
            orders = orders.filter(created_at__date__gte=since)

        rows = (
            orders
            .annotate(date=TruncDate('created_at'))
            .values('date')
            .annotate(
                total_orders=Count('id'),
                total_revenue=Coalesce(Sum('total_amount'), Decimal('0.00')),
                delivered_orders=Count('id', filter=Q(status=OrderStatus.DELIVERED)),
                cancelled_orders=Count('id', filter=Q(status=OrderStatus.CANCELLED)),
            )
            .order_by('-date')
        )

        return [
            {
                'date': row['date'],
                'total_orders': row['total_orders'],
                'total_revenue': float(row['total_revenue']),
                'delivered_orders': row['delivered_orders'],
                'cancelled_orders': row['cancelled_orders'],
            }
            for row in rows
        ]
