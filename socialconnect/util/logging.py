"""Standard-library logging configuration.

Route handlers log through ``logging.getLogger(__name__)``; those records
are forwarded to Logfire alongside its own spans and logs.
"""

import logging

import logfire

from socialconnect.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure the ``socialconnect`` logger hierarchy.

    Call after :func:`socialconnect.util.observability.configure_logfire`.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    # Token endpoints are traced by the httpx instrumentation already
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("authlib").setLevel(logging.WARNING)

    logging.getLogger("socialconnect").setLevel(level)
