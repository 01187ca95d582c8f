"""
EcoWaste Server Package.

This package contains the web server implementation for the EcoWaste application.
It includes the API definition, configuration, middleware and request dependencies.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and project constants.
    exception_handlers: Mapping of domain errors to HTTP responses.
    middleware: Request tracing and timing.
    services: FastAPI dependencies (current user, storage, quiz generator).
"""
