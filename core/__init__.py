"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions, value objects and timestamp helpers
- Service configuration
- Webhook signature verification
- Health check views and management commands
"""
