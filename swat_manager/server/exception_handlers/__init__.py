"""
Exception handlers for the SWAT Manager server.

This package contains the handlers that turn domain errors into HTTP
responses, the catch-all handler for unexpected errors, and a setup function
to register them with the FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
