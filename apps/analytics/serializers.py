"""
Serializers for analytics app.

Input Serializers:
    DailyReportQuerySerializer - Validates report date range parameters

Response Serializers:
    DashboardResponseSerializer - Dashboard summary
    DailyReportRowSerializer - One day of the revenue report
"""

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class DailyReportQuerySerializer(serializers.Serializer):
    """
    Validate report query parameters.

    Query Parameters:
        startDate (date): First day of the report
        endDate (date): Last day of the report, used only with startDate
    """

    startDate = serializers.DateField(source='start_date', required=False)
    endDate = serializers.DateField(source='end_date', required=False)


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class TodaySerializer(serializers.Serializer):
    totalOrders = serializers.IntegerField()
    totalRevenue = serializers.FloatField()
    pendingOrders = serializers.IntegerField()


class StatusCountSerializer(serializers.Serializer):
    status = serializers.CharField()
    count = serializers.IntegerField()


class ActiveOrderSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    order_number = serializers.CharField()
    customer_name = serializers.CharField()
    total_amount = serializers.FloatField()
    status = serializers.CharField()
    estimated_delivery_time = serializers.DateTimeField(allow_null=True)
    created_at = serializers.DateTimeField()
    room_number = serializers.CharField()


class PopularItemSerializer(serializers.Serializer):
    name = serializers.CharField()
    total_quantity = serializers.IntegerField()
    order_count = serializers.IntegerField()


class DashboardResponseSerializer(serializers.Serializer):
    today = TodaySerializer()
    statusBreakdown = StatusCountSerializer(many=True)
    activeOrders = ActiveOrderSerializer(many=True)
    popularItems = PopularItemSerializer(many=True)


class DailyReportRowSerializer(serializers.Serializer):
    date = serializers.DateField()
    total_orders = serializers.IntegerField()
    total_revenue = serializers.FloatField()
    delivered_orders = serializers.IntegerField()
    cancelled_orders = serializers.IntegerField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
