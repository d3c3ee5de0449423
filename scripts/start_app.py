#!/usr/bin/env python3
"""Serve the Meme Replicator API under uvicorn."""

import sys

import logfire
import uvicorn

from replicator.config import Settings
from replicator.util.logging import get_logger, setup_logging
from replicator.util.observability import configure_logfire

logger = get_logger("replicator.start_app")


def main() -> int:
    """Configure telemetry, then hand over to uvicorn.

    The app is built by ``create_app`` inside the server process, so the DI
    container (and its database engine) belongs to the serving event loop.
    """
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    bind_host = "127.0.0.1" if settings.environment == "development" else "0.0.0.0"
    logger.info(
        f"Serving {settings.api.base_url} on {bind_host}:{settings.port} "
        f"(environment={settings.environment}, git_sha={settings.git_sha})"
    )

    try:
        uvicorn.run(
            "replicator.interface.api.app:create_app",
            factory=True,
            host=bind_host,
            port=settings.port,
            reload=settings.debug,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API server failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
