"""HTTP transport for the Capsule API (httpx).

Standardizes timeouts and headers in one builder and converts every transport
or payload failure into a `CliError`.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

import httpx
from pydantic import ValidationError

from core.config import AppSettings
from core.domain.models import ApplicationCreateResponse, CreateApplicationRequest
from core.errors import CliError
from core.interfaces.capsule_api import CapsuleApi

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "request or operation took longer than the configured timeout time"


def error_from_http(exc: httpx.HTTPError | httpx.InvalidURL | ValueError) -> CliError:
    """Map an httpx failure onto a `CliError`.

    Timeouts get a fixed message so they can be told apart from status errors.
    """

    if isinstance(exc, httpx.TimeoutException):
        return CliError(TIMEOUT_MESSAGE)
    if isinstance(exc, (httpx.InvalidURL, ValueError)):
        return CliError(f"Invalid API URI: {exc}")
    return CliError(str(exc) or exc.__class__.__name__)


def error_from_payload(exc: ValueError) -> CliError:
    return CliError(str(exc))


def error_from_status(status_code: int) -> CliError:
    return CliError(f"The server response status {status_code}.")


def build_client(
    settings: AppSettings | None = None,
    *,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the CLI defaults.

    `transport` lets tests plug an `httpx.MockTransport` in place of the network.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.Client(
        timeout=httpx.Timeout(timeout if timeout is not None else settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


class HttpCapsuleApi(CapsuleApi):
    """`CapsuleApi` over HTTP: a single POST, no retries."""

    def __init__(
        self,
        uri: str,
        timeout: float,
        *,
        settings: AppSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.uri = uri.rstrip("/")
        self.timeout = timeout
        self._settings = settings or AppSettings()
        self._transport = transport

    def _post(self, url: httpx.URL, body: str) -> httpx.Response:
        with build_client(self._settings, timeout=self.timeout, transport=self._transport) as client:
            return client.post(
                url,
                content=body,
                headers={"content-type": "application/json"},
            )

    def _post_within_deadline(self, url: httpx.URL, body: str) -> httpx.Response:
        """Send the POST on a daemon worker and wait at most `timeout` seconds for it.

        httpx limits each connect, write and read on its own; the join bounds the
        whole exchange, including a response that trickles in.
        """

        outcome: dict[str, Any] = {}

        def send() -> None:
            try:
                outcome["response"] = self._post(url, body)
            except Exception as exc:
                outcome["error"] = exc

        worker = threading.Thread(target=send, name="capsule-http", daemon=True)
        worker.start()
        worker.join(self.timeout)
        if worker.is_alive():
            logger.debug("Request to %s still running after %ss", url, self.timeout)
            raise CliError(TIMEOUT_MESSAGE)
        if "error" in outcome:
            raise outcome["error"]
        return outcome["response"]

    def create_application(self, name: str | None) -> ApplicationCreateResponse:
        try:
            url = httpx.URL(f"{self.uri}/applications")
        except (httpx.InvalidURL, ValueError) as exc:
            raise error_from_http(exc) from exc
        body = CreateApplicationRequest(name=name).model_dump_json()
        logger.debug("POST %s %s", url, body)

        try:
            response = self._post_within_deadline(url, body)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("Request to %s failed: %r", url, exc)
            raise error_from_http(exc) from exc

        logger.debug("Server answered %s", response.status_code)
        if response.status_code != httpx.codes.CREATED:
            raise error_from_status(response.status_code)

        try:
            created = ApplicationCreateResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise error_from_payload(exc) from exc

        return created


def build_capsule_api(settings: AppSettings | None = None) -> HttpCapsuleApi:
    settings = settings or AppSettings()
    return HttpCapsuleApi(
        settings.api_uri,
        settings.http_timeout_seconds,
        settings=settings,
    )
