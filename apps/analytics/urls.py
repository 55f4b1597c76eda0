from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Dashboard (staff/admin)
    path('dashboard/', views.dashboard, name='dashboard'),

    # Reports (admin)
    path('reports/daily/', views.daily_report, name='daily-report'),
]
