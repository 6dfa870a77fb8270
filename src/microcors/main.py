from fastapi import FastAPI

from microcors.adapters.asgi import CORSMiddleware
from microcors.core.config import Config, get_config
from microcors.core.utils.logging import configure_logging


def create_app(settings: Config | None = None) -> FastAPI:
    """Create a FastAPI application with CORS configured from ``settings``."""
    settings = settings or get_config()

    configure_logging(settings.logging)

    # --- Application Setup ---

    app = FastAPI(
        title="microcors",
        description="CORS headers for ASGI applications.",
        version="0.1.0",
        debug=settings.debug,
    )

    # --- CORS Configuration ---

    app.add_middleware(CORSMiddleware, config=settings.cors)

    # --- Root Endpoint ---

    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple health check endpoint to confirm the service is running."""
        return {"status": "ok", "environment": settings.environment}

    return app
