import logging

import uvicorn
from fastapi import FastAPI

from greeter.core.config import Settings, settings
from greeter.core.logging_setup import setup_logging
from greeter.routes import hello

logger = logging.getLogger(__name__)


def create_app(settings: Settings = settings) -> FastAPI:
    app = FastAPI(title=settings.app_name, debug=settings.debug)
    app.include_router(hello.router)
    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured address."""
    setup_logging(settings.log_level)
    logger.info("Starting %s on %s:%d", settings.app_name, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
