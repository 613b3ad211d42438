"""
Startup and shutdown handling for the Maintenance Desk app.
"""

from .manager import lifespan

__all__ = ["lifespan"]
