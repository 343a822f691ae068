"""
Core views for health checks and system status.
"""

from django.db import connection
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from core.config import STORE_BACKEND_DJANGO, LicenseServiceConfig


@method_decorator(csrf_exempt, name="dispatch")
class HealthView(View):
    """Health check endpoint."""

    def get(self, _request):
        """Return service health status."""
        config = LicenseServiceConfig.from_settings()
        return JsonResponse(
            {
                "status": "healthy",
                "service": "school-license-service",
                "store": config.backend,
            }
        )


@method_decorator(csrf_exempt, name="dispatch")
class HealthDBView(View):
    """Database health check endpoint."""

    def get(self, _request):
        """Check database connectivity."""
        config = LicenseServiceConfig.from_settings()
        if config.backend != STORE_BACKEND_DJANGO:
            return JsonResponse({"status": "healthy", "database": "not_used"})
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                return JsonResponse({"status": "healthy", "database": "connected"})
        except Exception as e:  # pylint: disable=broad-exception-caught
            return JsonResponse(
                {"status": "unhealthy", "database": "disconnected", "error": str(e)},
                status=503,
            )
