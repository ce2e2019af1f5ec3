"""In-memory stand-ins for the requests and aiohttp sessions used by formstack_api."""

import json
from typing import Any, List, Optional, Union

TOKEN = "0123456789abcdef"
BASE_URL = "https://www.formstack.com/api/v2/"


def to_body(payload: Any) -> bytes:
    if isinstance(payload, bytes):
        return payload
    return json.dumps(payload).encode("utf-8")


def chunked(body: bytes, size: int):
    for i in range(0, len(body), size):
        yield body[i : i + size]


class FakeResponse:
    """requests.Response look-alike that streams its body in small chunks"""

    def __init__(self, status_code: int = 200, payload: Any = None, chunk_size: int = 3):
        self.status_code = status_code
        self.body = to_body(payload if payload is not None else {})
        self.chunk_size = chunk_size

    def iter_content(self, chunk_size: int = 1):
        return chunked(self.body, self.chunk_size)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        return None


class FakeSession:
    """requests.Session look-alike. Hands out queued responses and records every call."""

    def __init__(self, responses: Optional[List[Union[FakeResponse, Exception]]] = None):
        self.responses = list(responses or [])
        self.calls: List[dict] = []
        self.opened = 0

    def queue(self, status_code: int = 200, payload: Any = None) -> None:
        self.responses.append(FakeResponse(status_code, payload))

    def request(self, method: str, url: str, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def __call__(self):
        self.opened += 1
        return self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        return None

    @property
    def last_call(self) -> dict:
        return self.calls[-1]


class FakeStreamReader:
    def __init__(self, body: bytes, chunk_size: int):
        self.body = body
        self.chunk_size = chunk_size

    async def iter_chunked(self, n: int):
        for chunk in chunked(self.body, self.chunk_size):
            yield chunk


class FakeClientResponse:
    """aiohttp.ClientResponse look-alike"""

    def __init__(self, status: int = 200, payload: Any = None, chunk_size: int = 3):
        self.status = status
        self.content = FakeStreamReader(to_body(payload if payload is not None else {}), chunk_size)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_value, exc_traceback):
        return None


class FakeClientSession:
    """aiohttp.ClientSession look-alike. Hands out queued responses and records every call."""

    def __init__(self, responses: Optional[List[Union[FakeClientResponse, Exception]]] = None):
        self.responses = list(responses or [])
        self.calls: List[dict] = []
        self.timeouts: list = []

    def queue(self, status: int = 200, payload: Any = None) -> None:
        self.responses.append(FakeClientResponse(status, payload))

    def request(self, method: str, url: str, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def __call__(self, timeout=None, **kwargs):
        self.timeouts.append(timeout)
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_value, exc_traceback):
        return None

    @property
    def last_call(self) -> dict:
        return self.calls[-1]
