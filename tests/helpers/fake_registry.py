"""Fake registry server for `httpx.MockTransport`."""

from __future__ import annotations

from collections.abc import Callable

import httpx

APP_ID = "app-id-123"
APP_SECRET = "s3cr3t"


class FakeRegistry:
    """Records every request and answers with a canned response."""

    def __init__(self, status_code: int = 200, content: bytes = b'{"status": "success"}') -> None:
        self.status_code = status_code
        self.content = content
        self.requests: list[httpx.Request] = []
        self.raise_error: Callable[[httpx.Request], Exception] | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error(request)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request reached the registry"
        return self.requests[-1]
