from django.urls import path

from content_metrics.views import ContentCountView

urlpatterns = [
    path('count/', ContentCountView.as_view(), name='content-metrics-count'),
]
