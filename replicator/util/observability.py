"""Logfire setup and instrumentation.

Services log and trace through ``logfire`` directly:

    with logfire.span("interaction_service.record", meme_id=meme_id):
        logfire.info("Interaction recorded", score=score)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from replicator.config import Settings

SERVICE_NAME = "meme-replicator"

# On top of Logfire's defaults (session, cookie, jwt, secret, ...)
SCRUBBED_ATTRIBUTES = ["otp"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Telemetry is sent to Logfire when OBSERVABILITY__SEND_TO_LOGFIRE says so,
    or, if that is unset, whenever a token is configured. Otherwise spans are
    only printed to the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_ATTRIBUTES),
        console=logfire.ConsoleOptions(
            span_style="indented" if settings.debug else "show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request.

    Headers are left out because the session cookie is a bearer credential.
    """
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound identity provider calls."""
    logfire.instrument_httpx()
