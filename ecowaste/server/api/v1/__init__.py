"""Version 1 REST endpoints, mounted under ``/api``."""
