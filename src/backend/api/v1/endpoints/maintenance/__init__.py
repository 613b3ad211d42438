"""Maintenance request endpoints."""
