"""
Licenses module - School license management.

This module handles:
- SchoolLicense entity and domain logic
- License extension from payments (tier classification, expiry calculation)
- Payment payload normalization
- License store adapters (Django ORM, Appwrite)
"""
