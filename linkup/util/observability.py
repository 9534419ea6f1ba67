"""Logfire setup for the API process and the migration runner.

Services open their own spans (``post_service.create_post``,
``graph_service.follow``, ...) and emit structured events; this module only
configures the exporter and instruments FastAPI, SQLAlchemy and httpx.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from linkup.config import Settings

SERVICE_NAME = "linkup-api"

# Liveness probes hit this every few seconds
UNTRACED_URLS = "/health"


def resolve_send_to_logfire(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, else send iff a token is set."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created.

    Args:
        settings: Application settings
    """
    send_to_logfire = resolve_send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
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


def request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag request spans with the caller once the access gate has run."""
    result = {**attributes}
    user = getattr(request.state, "user", None)
    if user is not None:
        result["user_id"] = str(user.id)
    return result


def instrument_fastapi(app: FastAPI) -> None:
    # Headers stay off: Authorization carries bearer credentials
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the async engine's sync core."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound calls to ImgBB and the identity provider."""
    logfire.instrument_httpx()
