"""Entry point for the vehicle service.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8082``); the customer service location comes from
``CUSTOMER_SERVICE_URL``.  See ``vehicle_service_api/app/core/config.py``
for the full list of settings.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from vehicle_service_api.app.core.config import settings
from vehicle_service_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
