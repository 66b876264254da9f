"""
API v1 package.

Contains versioned API routes for the Follow-up Notifier.
"""

from followup_notifier.api.v1.routes import register_error_handlers, router

__all__ = ["register_error_handlers", "router"]
