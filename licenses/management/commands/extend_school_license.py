"""
Django management command to extend a school's license by hand.

Runs the same path as a manual trigger on the webhook endpoint.
"""

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError

from core.config import LicenseServiceConfig
from core.domain.exceptions import DomainException
from core.domain.timestamps import format_timestamp
from core.domain.value_objects import RequestOrigin
from licenses.application.handlers.extend_license_handler import ExtendLicenseHandler
from licenses.application.services.payload_normalizer import PaymentPayloadNormalizer
from licenses.infrastructure.repositories.factory import build_school_license_repository


class Command(BaseCommand):
    """Command to extend a school's license."""

    help = "Extend a school's license as if a manual renewal was requested"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("school_code", help="School code of the license record")
        parser.add_argument(
            "--plan",
            default=None,
            help='Plan label; "Sessional" buys a year, anything else a term',
        )
        parser.add_argument(
            "--amount",
            default=None,
            help="Amount paid; overrides --plan when given",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        payload = {"schoolCode": options["school_code"], "plan": options["plan"]}
        if options["amount"] is not None:
            payload["amount"] = options["amount"]

        config = LicenseServiceConfig.from_settings()
        handler = ExtendLicenseHandler(
            license_repository=build_school_license_repository(config),
        )

        try:
            command = PaymentPayloadNormalizer().normalize(payload, RequestOrigin.MANUAL)
            result = async_to_sync(handler.handle)(command)
        except DomainException as e:
            raise CommandError(f"{e.code}: {e.message}") from e

        if result.previous_expiry is None:
            previous = "no previous expiry"
        else:
            previous = format_timestamp(result.previous_expiry)
        self.stdout.write(
            # pylint: disable=no-member
            self.style.SUCCESS(
                f"Extended {result.school_code} ({result.tier.value}) "
                f"from {previous} to {format_timestamp(result.new_expiry)}"
            )
        )
