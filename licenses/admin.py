"""
Django admin configuration for licenses app.
"""
from django.contrib import admin
from django.utils.html import format_html

from licenses.infrastructure.models import SchoolLicense


@admin.register(SchoolLicense)
class SchoolLicenseAdmin(admin.ModelAdmin):
    """Admin interface for SchoolLicense model."""

    list_display = [
        "school_code",
        "school_name",
        "status_display",
        "expiry_date",
        "updated_at",
    ]
    list_filter = ["is_active", "expiry_date"]
    search_fields = ["school_code", "school_name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "school_code", "school_name"),
            },
        ),
        (
            "License",
            {
                "fields": ("is_active", "expiry_date"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def status_display(self, obj):
        """Display status with color coding."""
        if obj.is_current:
            color, label = "green", "ACTIVE"
        elif obj.is_active:
            color, label = "orange", "EXPIRED"
        else:
            color, label = "gray", "INACTIVE"
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color,
            label,
        )

    status_display.short_description = "Status"
