"""Defines AsyncFormstackAPI, the asyncio flavour of FormstackAPI."""

from __future__ import annotations
from typing import Any, Awaitable, Callable, Mapping, Optional

# ----
from formstack_api.client import BaseFormstackAPI
from formstack_api.request import FormstackRequest
from formstack_api.result import FormstackResult, check_api_error
from formstack_api.session_async import AsyncFormstackSession


class AsyncFormstackAPI(BaseFormstackAPI):
    """Asyncio Formstack API v2 client. Every method returns an awaitable FormstackResult.

    Arguments are validated when the method is called, before the coroutine is awaited:

        api = AsyncFormstackAPI(token)
        forms, err = await api.get_forms()
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.session = AsyncFormstackSession(self.config)

    def _call(
        self,
        endpoint: str,
        verb: str,
        params: Optional[Mapping[str, Any]],
        transform: Optional[Callable[[Any], Any]] = None,
    ) -> Awaitable[FormstackResult]:
        request = FormstackRequest.build(endpoint, verb, params)
        return self._execute(request, transform)

    async def _execute(
        self,
        request: FormstackRequest,
        transform: Optional[Callable[[Any], Any]],
    ) -> FormstackResult:
        result = check_api_error(await self.session.execute(request))
        if not result.ok:
            self.logger.debug(f"{request!r} failed | {result.error!r}")
        if transform is not None:
            result = result.map(transform)
        return result
