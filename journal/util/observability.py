"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Comment approved", comment_id=str(comment_id))

    # Manual spans for critical operations
    with logfire.span("comment_service.delete_thread", comment_id=str(comment_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from journal.config import Settings
from journal.util.error import ConfigurationError

DEFAULT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Sends to Logfire cloud when explicitly enabled, or when a token is
    present and sending was not explicitly disabled. Otherwise console only.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "journal-api",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def check_production_secrets(settings: Settings) -> None:
    """Refuse to run production with the placeholder secrets.

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If a placeholder secret is still in place
    """
    if settings.environment != "production":
        return

    missing = [
        name
        for name, value in (
            ("AUTH__JWT_SECRET", settings.auth.jwt_secret),
            ("AUTH__ADMIN_PASSWORD", settings.auth.admin_password),
        )
        if not value or value == DEFAULT_SECRET
    ]
    if missing:
        logfire.error("Placeholder secrets in production", missing=missing)
        raise ConfigurationError(f"Set {', '.join(missing)} before starting")

    if not settings.content.is_configured:
        logfire.warn("GitHub content repository not configured, search disabled")


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        """Map request attributes, handling both HTTP and WebSocket requests."""
        result = {**attributes}

        if hasattr(request, "method"):
            result["method"] = request.method

        if hasattr(request, "url"):
            result["path"] = request.url.path

        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host

        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Instrument httpx client with Logfire (GitHub content requests)."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
