"""Logfire setup for the API, the migration runner and the database engine.

Application code logs through ``logfire`` directly:

    logfire.info("Comment created", comment_id=comment.id)

    with logfire.span("comment_service.create_comment", snippet_id=snippet_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from discuss.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Telemetry is sent to Logfire cloud when OBSERVABILITY__SEND_TO_LOGFIRE
    is true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is given.
    Otherwise everything goes to the console only.
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = observability.logfire_token is not None

    logfire.configure(
        service_name=observability.service_name,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
            min_log_level="debug" if settings.debug else "info",
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    result = {**attributes, "path": request.url.path}
    if hasattr(request, "method"):
        result["method"] = request.method
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app.

    Auth headers and cookies are not captured.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run on the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
