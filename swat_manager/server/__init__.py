"""
SWAT Manager Server Package.

This package contains the web server implementation for the SWAT Manager platform.
It includes the API definition, configuration, service logic and cross-cutting concerns.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    services: Business rules shared by several endpoints (scoring, reports, messaging, calendar, auth).
    middleware: Request timing and monitoring.
    exception_handlers: Translation of domain and unhandled errors to HTTP responses.
"""
