"""
API module - HTTP surface of the license service.

This module handles:
- Versioned REST endpoints (payments webhook)
- Mapping of domain errors onto JSON error responses
"""
