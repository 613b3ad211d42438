"""
Service routes outside the versioned API: root info and health.
"""

from .health import router as health_router
from .root import router as root_router

__all__ = ["health_router", "root_router"]
