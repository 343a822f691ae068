"""
Model registry for the licenses app.

Django discovers models through this module; they live in the
infrastructure layer.
"""
from licenses.infrastructure.models import SchoolLicense  # noqa: F401
