"""
Project-wide constants for the API server.
"""

PROJECT_NAME = "EcoWaste"
API_PREFIX = "/api"
USER_ID_HEADER = "X-User-Id"
