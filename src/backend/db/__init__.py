"""
Seed data for the in-memory maintenance request store.
"""
from .seed_data import demo_requests

__all__ = ["demo_requests"]
