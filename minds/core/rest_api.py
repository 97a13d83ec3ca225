from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from minds.core.config import get_settings
from minds.core.exceptions import Forbidden, ObjectNotFound, Unauthorized, UnknownError


logger = logging.getLogger(__name__)


def normalize_base_url(base_url: str) -> str:
    if not base_url.endswith("/"):
        base_url = base_url + "/"
    if not base_url.endswith("/api/"):
        base_url = base_url + "api/"
    return base_url


def quote_name(name: str) -> str:
    return quote(name, safe="")


def raise_for_status(response: httpx.Response) -> None:
    """Translate an error status into the client's exception taxonomy.

    404, 403 and 401 map to their own types; every other 4xx/5xx becomes
    UnknownError carrying the status line and body verbatim.
    """
    status_code = response.status_code
    if status_code < 400 or status_code >= 600:
        return

    body = response.text
    where = f"{response.request.method} {response.request.url.path}"
    if status_code == 404:
        raise ObjectNotFound(f"{where}: {body}", status_code, body)
    if status_code == 403:
        raise Forbidden(f"{where}: {body}", status_code, body)
    if status_code == 401:
        raise Unauthorized(f"{where}: {body}", status_code, body)

    status_line = f"{status_code} {response.reason_phrase}".strip()
    raise UnknownError(f"{where}: {status_line}: {body}", status_code, body)


def expect_status(response: httpx.Response, expected: int, action: str) -> None:
    if response.status_code != expected:
        raise UnknownError(
            f"{action}: unexpected status code: {response.status_code}, body: {response.text}",
            response.status_code,
            response.text,
        )


class RestAPI:
    """Bearer-authenticated JSON transport for the Minds REST API.

    Every request goes through raise_for_status, so callers only ever see a
    response that is not an HTTP error.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        *,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.api_key = api_key
        self.base_url = normalize_base_url(base_url or settings.base_url)
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=timeout_s if timeout_s is not None else settings.request_timeout_s,
            transport=transport,
        )

    def get(self, path: str) -> httpx.Response:
        return self._request("GET", path)

    def delete(self, path: str) -> httpx.Response:
        return self._request("DELETE", path)

    def post(self, path: str, data: Any = None) -> httpx.Response:
        return self._request("POST", path, data)

    def patch(self, path: str, data: Any = None) -> httpx.Response:
        return self._request("PATCH", path, data)

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, data: Any = None) -> httpx.Response:
        path = path.lstrip("/")
        logger.debug("%s %s%s", method, self.base_url, path)
        if data is None:
            response = self._client.request(method, path)
        else:
            response = self._client.request(method, path, json=data)
        logger.debug("%s %s -> %s", method, path, response.status_code)
        raise_for_status(response)
        return response
