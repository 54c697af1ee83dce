"""Thin httpx transport executing :class:`WebRequestData`.

No retries, no pooling policy: one ``httpx.Client`` per ``WebClient``,
either supplied by the caller or owned and closed by this object.
Transport exceptions (``httpx.HTTPError``) propagate unchanged.
"""
from __future__ import annotations

from typing import Optional

import httpx

from ..adapter.web_request_data import WebRequestData
from .pending_request import PendingRequest
from .web_response import WebResponse

DEFAULT_HTTP_TIMEOUT = 60.0


class WebClient:
    def __init__(self, http_client: Optional[httpx.Client] = None, *, timeout: Optional[float] = DEFAULT_HTTP_TIMEOUT) -> None:
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=timeout)

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    def build_request(self, data: WebRequestData) -> httpx.Request:
        return self._client.build_request("POST", data.url, headers=list(data.headers), json=data.payload)

    def do_post(self, data: WebRequestData) -> WebResponse:
        """Execute ``data`` and return the complete response."""
        response = self._client.send(self.build_request(data))
        return WebResponse.from_httpx(response)

    def pending_post(self, data: WebRequestData) -> PendingRequest:
        """Build (without sending) a streaming POST for ``data``."""
        return PendingRequest(client=self._client, request=self.build_request(data))

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "WebClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["WebClient", "DEFAULT_HTTP_TIMEOUT"]
