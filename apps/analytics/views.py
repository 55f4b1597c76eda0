from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.accounts.permissions import IsAdmin, IsStaffOrAdmin
from .analytics import AnalyticsQueries
from .serializers import (
    DailyReportQuerySerializer,
    DashboardResponseSerializer,
    DailyReportRowSerializer,
    ErrorSerializer,
)
from .exceptions import AnalyticsServiceError


@extend_schema(
    responses={200: DashboardResponseSerializer},
    description="Today's orders and revenue, open orders and best sellers.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffOrAdmin])
def dashboard(request):
    """Dashboard summary - thin HTTP handler."""
    return Response(AnalyticsQueries.dashboard())


@extend_schema(
    parameters=[
        OpenApiParameter('startDate', OpenApiTypes.DATE, description='First day (YYYY-MM-DD)'),
        OpenApiParameter('endDate', OpenApiTypes.DATE, description='Last day (YYYY-MM-DD)'),
    ],
    responses={
        200: DailyReportRowSerializer(many=True),
        400: ErrorSerializer,
    },
    description="Orders and revenue per day. Defaults to the last 30 days.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdmin])
def daily_report(request):
    """Daily revenue report - thin HTTP handler."""
    query_serializer = DailyReportQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    try:
        data = AnalyticsQueries.daily_report(
            start_date=params.get('start_date'),
            end_date=params.get('end_date'),
        )
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(data)
