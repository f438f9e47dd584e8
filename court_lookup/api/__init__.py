"""
HTTP facade for court_lookup.
"""

from court_lookup.api.handlers import register_error_handlers
from court_lookup.api.routes import router

__all__ = ["register_error_handlers", "router"]
