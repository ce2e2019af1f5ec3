"""This module contains the asyncio counterpart of FormstackSession, built on aiohttp."""

from __future__ import annotations
import asyncio
from aiohttp import ClientError, ClientSession, ClientTimeout

# ----
from formstack_api.config import FormstackConfig
from formstack_api.consts import RESPONSE_CHUNK_SIZE
from formstack_api.error import exception_for_status
from formstack_api.logger import FormstackLogger
from formstack_api.request import (
    FormstackRequest,
    decode_json_payload,
    is_success_status,
)
from formstack_api.result import FormstackResult


class AsyncFormstackSession:
    """Performs HTTP requests to the Formstack API with aiohttp, one connection per request"""

    def __init__(self, config: FormstackConfig) -> None:
        self.config = config
        self.logger: FormstackLogger = FormstackLogger()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.config.url_base}>"

    async def execute(self, request: FormstackRequest) -> FormstackResult:
        """Sends `request` and reads the response body chunk by chunk until it is complete"""
        url = self.config.url_for(request.endpoint)
        self.logger.debug(f"Formstack API {request.method} {url}")
        chunks = []
        try:
            async with ClientSession(
                timeout=ClientTimeout(total=self.config.timeout)
            ) as session:
                async with session.request(
                    request.method,
                    url,
                    data=request.body,
                    headers=request.headers(self.config.auth_header),
                ) as response:
                    if not is_success_status(response.status):
                        self.logger.warning(
                            f"Formstack API {request.method} {url} | HTTP {response.status}"
                        )
                        return FormstackResult.failure(
                            exception_for_status(response.status)
                        )
                    async for chunk in response.content.iter_chunked(
                        RESPONSE_CHUNK_SIZE
                    ):
                        chunks.append(chunk)
        except (ClientError, asyncio.TimeoutError) as ex:
            self.logger.error(f"Formstack API {request.method} {url} | {ex!r}")
            return FormstackResult.failure(ex)

        result = decode_json_payload(b"".join(chunks))
        if not result.ok:
            self.logger.error(f"Formstack API {request.method} {url} | {result.error}")
        return result
