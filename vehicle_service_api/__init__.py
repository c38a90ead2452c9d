"""
Top‑level package for the Vehicle Service API.

This file makes ``vehicle_service_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``vehicle_service_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
