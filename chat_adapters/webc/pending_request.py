"""PendingRequest: an unsent, fully configured streaming call.

Adapters attach their stream decoder to this handle. The request goes out
only when :meth:`PendingRequest.send` is called, which happens when the
resulting stream is iterated.
"""
from __future__ import annotations

from dataclasses import dataclass

import httpx


@dataclass
class PendingRequest:
    client: httpx.Client
    request: httpx.Request

    def send(self) -> httpx.Response:
        """Send the request and return the unread streaming response.

        The caller must close the response.
        """
        return self.client.send(self.request, stream=True)


__all__ = ["PendingRequest"]
