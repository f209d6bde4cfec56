# ABOUTME: Structured logging with correlation IDs for the Contentful Management client
# ABOUTME: Configures structlog and groups the requests of one operation under one id

"""
Logging for the Contentful Management client.

HttpClient logs every request at debug level, API errors and retries at
warning level. Multi-request operations (asset processing, uploading the
files of an asset) run inside correlation_scope(), so their log lines share
one correlation_id:

    {"correlation_id": "a1b2c3d4", "event": "Contentful API request", "path": "assets/x/files/en-US/process"}
    {"correlation_id": "a1b2c3d4", "event": "Contentful API request", "path": "assets/x"}

Nothing is configured on import. Call configure_logging() yourself, or pass
configure_logs=True to create_client().
"""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

import structlog

from contentful_management.utils.errors import mask_text

if TYPE_CHECKING:
    from collections.abc import Iterator, MutableMapping

correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def _new_id() -> str:
    return uuid.uuid4().hex[:8]


def get_correlation_id() -> str:
    """Current correlation id; one is generated on first use."""
    cid = correlation_id.get()
    if not cid:
        cid = _new_id()
        correlation_id.set(cid)
    return cid


def set_correlation_id(cid: str) -> None:
    """Pin the correlation id of the current context ("" resets it)."""
    correlation_id.set(cid)


@contextmanager
def correlation_scope(cid: str | None = None) -> Iterator[str]:
    """
    Run a block under its own correlation id.

    The previous id is restored on exit. asyncio tasks started inside the
    block (e.g. by asyncio.gather) inherit the id.

    Example:
        with correlation_scope() as cid:
            await asset.process_for_locale("en-US")
    """
    token = correlation_id.set(cid or _new_id())
    try:
        yield correlation_id.get()
    finally:
        correlation_id.reset(token)


def add_correlation_id(
    logger: structlog.types.WrappedLogger,  # noqa: ARG001 - Required by structlog Processor API
    method_name: str,  # noqa: ARG001 - Required by structlog Processor API
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    event_dict["correlation_id"] = get_correlation_id()
    return event_dict


def mask_event_secrets(
    logger: structlog.types.WrappedLogger,  # noqa: ARG001 - Required by structlog Processor API
    method_name: str,  # noqa: ARG001 - Required by structlog Processor API
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Mask access tokens that ended up in string values of an event."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = mask_text(value)
    return event_dict


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Install the structlog pipeline used by the client.

    Processors, in order: merge_contextvars, add_log_level, ISO TimeStamper,
    add_correlation_id, mask_event_secrets, then JSONRenderer or
    ConsoleRenderer.

    Args:
        level: Level name; unknown names fall back to INFO
        json_output: Emit JSON lines instead of console text
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        mask_event_secrets,
    ]
    renderer = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
