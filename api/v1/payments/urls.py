"""
URL configuration for payment API endpoints.
"""

from django.urls import path

from api.v1.payments import views

app_name = "payments"

urlpatterns = [
    path(
        "license-webhook",
        views.LicenseWebhookView.as_view(),
        name="license-webhook",
    ),
]
