"""
Exception handlers for the EcoWaste server.

This package maps domain errors to HTTP responses, provides a global handler
for anything unexpected, and a setup function to register them with the
FastAPI application.
"""

from .domain_handler import domain_exception_handler, integrity_error_handler
from .global_handler import global_exception_handler, setup_exception_handlers

__all__ = [
    "domain_exception_handler",
    "global_exception_handler",
    "integrity_error_handler",
    "setup_exception_handlers",
]
