"""
Maintenance Desk application package.

create_app() builds the FastAPI application with its request store.
"""

from .factory import create_app

__all__ = ["create_app"]
