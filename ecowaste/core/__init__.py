"""
Core utilities and configuration for EcoWaste.

This package provides core functionality including logging configuration,
database setup, the storage facade and the domain error hierarchy.
"""

from ecowaste.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
