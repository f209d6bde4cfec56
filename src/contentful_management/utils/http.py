# ABOUTME: Async HTTP client for the Contentful Management API
# ABOUTME: Handles auth headers, path scoping, retries and error translation

"""
Contentful Management HTTP client with retry logic and structured errors.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

Every entity and API method in this package talks to Contentful through an
HttpClient. It handles:

1. HTTP COMMUNICATION: Making requests with httpx.AsyncClient
2. AUTHENTICATION: Attaching the Bearer token and vendor content type
3. SCOPING: Organization and environment APIs see paths relative to
   "organizations/{id}/" or "spaces/{id}/environments/{id}/"
4. RETRY LOGIC: Retrying 429, 5xx and timeouts with exponential backoff
5. ERROR HANDLING: Raising ContentfulError subclasses for 4xx/5xx responses

=============================================================================
SCOPED CLIENTS
=============================================================================

Only the root client owns a connection pool:

    async with HttpClient(settings) as http:
        org_http = http.scoped("organizations/abc")
        await org_http.get("teams")            # GET organizations/abc/teams
        env_http = http.scoped("spaces/s1").scoped("environments/master")
        await env_http.get("assets")           # GET spaces/s1/environments/master/assets

A scoped view shares the root's httpx.AsyncClient, so closing the root closes
every view. Entities keep the view they were wrapped with and use it for their
own update/delete/publish calls.
"""

from __future__ import annotations

import platform
from typing import TYPE_CHECKING, Any

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from contentful_management.utils.errors import ContentfulError, error_from_response, mask_text

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tenacity import RetryCallState

    from contentful_management.config import ClientSettings

logger = structlog.get_logger(__name__)

CONTENT_TYPE = "application/vnd.contentful.management.v1+json"
SDK_NAME = "contentful-management.py"
# Longest wait honoured from X-Contentful-RateLimit-Reset
MAX_RATE_LIMIT_WAIT = 60.0


# =============================================================================
# REQUEST HELPERS
# =============================================================================


def normalize_select(query: dict[str, Any]) -> dict[str, Any]:
    """
    Make sure a select query always asks for sys.

    Entities cannot be wrapped without sys, so "fields.title" becomes
    "sys,fields.title". Selections that already include sys (or a sys.*
    path) are left alone.
    """
    select = query.get("select")
    if not select:
        return query

    if isinstance(select, str):
        fields = [part.strip() for part in select.split(",") if part.strip()]
    else:
        fields = list(select)

    if not any(field == "sys" or field.startswith("sys.") for field in fields):
        fields.insert(0, "sys")

    return {**query, "select": fields}


def create_request_config(query: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """
    Turn a query dict into httpx query params.

    - None values are dropped
    - select always includes sys
    - list values (select, order, ...) are comma-joined

    The caller's dict is never modified.

    Example:
        >>> create_request_config({"limit": 100, "select": ["fields.name"]})
        {'limit': 100, 'select': 'sys,fields.name'}
    """
    params = {key: value for key, value in (query or {}).items() if value is not None}
    params = normalize_select(params)
    return {
        key: ",".join(str(v) for v in value) if isinstance(value, (list, tuple)) else value
        for key, value in params.items()
    }


def user_agent(
    version: str,
    application: str | None = None,
    integration: str | None = None,
) -> str:
    """
    Build the X-Contentful-User-Agent header value.

    Example:
        "app my-app/1.0; sdk contentful-management.py/0.1.0; platform python/3.12.1; os Linux;"
    """
    parts = []
    if application:
        parts.append(f"app {application}")
    if integration:
        parts.append(f"integration {integration}")
    parts.append(f"sdk {SDK_NAME}/{version}")
    parts.append(f"platform python/{platform.python_version()}")
    os_name = platform.system()
    if os_name:
        parts.append(f"os {os_name}")
    return "; ".join(parts) + ";"


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TimeoutException):
        return True
    if not isinstance(exc, ContentfulError) or exc.status is None:
        return False
    return exc.status == 429 or 500 <= exc.status < 600


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Retrying Contentful API request",
        attempt=retry_state.attempt_number,
        wait=retry_state.next_action.sleep if retry_state.next_action else None,
        error=str(exc) if exc else None,
    )


class wait_rate_limit_reset(wait_base):
    """
    Wait for the interval Contentful asks for on 429 responses.

    When the failed attempt carries X-Contentful-RateLimit-Reset, that many
    seconds are waited (capped at max_wait); otherwise `fallback` decides.
    """

    def __init__(self, fallback: wait_base, max_wait: float = MAX_RATE_LIMIT_WAIT) -> None:
        self.fallback = fallback
        self.max_wait = max_wait

    def __call__(self, retry_state: RetryCallState) -> float:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        reset = getattr(exc, "rate_limit_reset", None)
        if reset is not None:
            return max(0.0, min(reset, self.max_wait))
        return self.fallback(retry_state)


# =============================================================================
# HTTP CLIENT
# =============================================================================


class HttpClient:
    """
    Async Contentful Management HTTP client.

    LIFECYCLE:
    ----------
    1. Create client: http = HttpClient(settings)
    2. Enter context: async with http: ...
    3. Use client: await http.get("spaces")
    4. Exit context: connection pool closed

    Scoped views (http.scoped(...)) never need their own context.
    """

    def __init__(
        self,
        settings: ClientSettings,
        base_url: str | None = None,
        prefix: str = "",
        *,
        version: str = "0.0.0",
        root: HttpClient | None = None,
    ) -> None:
        """
        Initialize the HTTP client.

        Args:
            settings: Client settings (token, timeout, retry behaviour)
            base_url: Root URL; defaults to settings.base_url
            prefix: Path prefix prepended to every request path
            version: Library version reported in the user agent
            root: Owning client when this is a scoped view
        """
        self._settings = settings
        self._base_url = base_url or settings.base_url
        self._prefix = prefix
        self._version = version
        self._root = root
        # Created in __aenter__, only on the root client
        self._client: httpx.AsyncClient | None = None

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def root(self) -> HttpClient:
        """Unscoped client that owns the connection."""
        return self._root or self

    def scoped(self, prefix: str) -> HttpClient:
        """Return a view whose paths are relative to `prefix`."""
        prefix = prefix.strip("/")
        return HttpClient(
            self._settings,
            self._base_url,
            f"{self._prefix}{prefix}/" if prefix else self._prefix,
            version=self._version,
            root=self.root,
        )

    async def __aenter__(self) -> HttpClient:
        if self._root is not None:
            raise RuntimeError("Scoped clients share their root connection and cannot be opened")
        headers = {
            "Authorization": f"Bearer {self._settings.access_token.get_secret_value()}",
            "Content-Type": CONTENT_TYPE,
            "X-Contentful-User-Agent": user_agent(
                self._version,
                self._settings.application,
                self._settings.integration,
            ),
        }
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=self._settings.timeout,
        )
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _transport(self) -> httpx.AsyncClient:
        client = self.root._client
        if client is None:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")
        return client

    # =========================================================================
    # VERBS
    # =========================================================================

    async def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        return await self._request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json_data: Any = None,
        *,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            "POST", path, json_data=json_data, content=content, headers=headers
        )

    async def put(
        self,
        path: str,
        json_data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        return await self._request("PUT", path, json_data=json_data, headers=headers)

    async def delete(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        return await self._request("DELETE", path, headers=headers)

    # =========================================================================
    # CORE REQUEST
    # =========================================================================

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_data: Any = None,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """
        Make an HTTP request, retrying transient failures.

        Returns:
            Parsed JSON body, or {} for empty responses (204 No Content).

        Raises:
            ContentfulError: On API error (4xx, 5xx) after retries
            httpx.TimeoutException: On request timeout (after retries)
            RuntimeError: If the root client is not initialized
        """
        url = f"{self._prefix}{path.lstrip('/')}"

        if not self._settings.retry_on_error:
            return await self._send(method, url, params, json_data, content, headers)

        retrying = AsyncRetrying(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(self._settings.max_retries),
            wait=wait_rate_limit_reset(
                wait_exponential(multiplier=self._settings.retry_backoff, max=10)
            ),
            before_sleep=_log_retry,
            reraise=True,
        )
        result: dict[str, Any] = {}
        async for attempt in retrying:
            with attempt:
                result = await self._send(method, url, params, json_data, content, headers)
        return result

    async def _send(
        self,
        method: str,
        url: str,
        params: Mapping[str, Any] | None,
        json_data: Any,
        content: bytes | None,
        headers: Mapping[str, str] | None,
    ) -> dict[str, Any]:
        client = self._transport()

        log = logger.bind(method=method, path=url)
        log.debug("Contentful API request")

        response = await client.request(
            method,
            url,
            params=dict(params) if params else None,
            json=json_data,
            content=content,
            headers=dict(headers) if headers else None,
        )

        if response.status_code >= 400:
            log.warning(
                "Contentful API error",
                status=response.status_code,
                request_id=response.headers.get("x-contentful-request-id"),
                body=mask_text(response.text[:200]),
            )
            raise error_from_response(response)

        if not response.content:
            return {}
        result = response.json()
        return result if isinstance(result, dict) else {"items": result}
