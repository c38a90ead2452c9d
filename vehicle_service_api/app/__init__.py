"""
Application package initializer.

The vehicle service is organised into a handful of small layers:
``core`` (configuration, logging, database, exceptions), ``schemas``
(pydantic models exchanged over the wire), ``services`` (the vehicle
store and the enrichment logic), ``clients`` (HTTP access to the
customer service) and ``api`` (versioned FastAPI routers).
"""

from .main import app  # noqa: F401
