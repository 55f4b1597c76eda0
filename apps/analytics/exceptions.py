"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidDateRangeError

Usage:
    from apps.analytics.exceptions import InvalidDateRangeError

    if start_date > end_date:
        raise InvalidDateRangeError("startDate must not be after endDate")
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

    Views catch it and answer 400 with the message:

        try:
            data = AnalyticsQueries.daily_report(start, end)
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidDateRangeError(AnalyticsServiceError):
    """Raised when the report's start date is after its end date."""

    pass
