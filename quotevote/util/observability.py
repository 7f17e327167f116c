"""Logfire setup for the API, scripts and tests.

Domain code talks to logfire directly:

    with logfire.span("vote_service.apply_vote", quote_id=str(quote_id)):
        logfire.info("Vote recorded", quote_id=str(quote_id))

This module only decides where that telemetry goes and which libraries
get auto-instrumented.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from quotevote.config import Settings

SERVICE_NAME = "quotevote-backend"
SERVICE_VERSION = "0.1.0"

# Liveness probes would drown out real traffic
UNTRACED_PATHS = ["/health"]


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Telemetry leaves the process only when OBSERVABILITY__SEND_TO_LOGFIRE
    is true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present.
    Otherwise spans and logs go to the console only.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    # Validation errors arrive in attributes["errors"]; keep them on the span
    return {
        **attributes,
        "method": request.method,
        "path": request.url.path,
        "client_host": request.client.host if request.client else None,
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except liveness probes.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_PATHS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through an engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
