"""Request descriptor and response decoding shared by the blocking and asyncio sessions."""

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional

# ----
from formstack_api.consts import VALID_VERBS
from formstack_api.encoding import data_to_query_string
from formstack_api.error import (
    FormstackConfigurationError,
    FormstackResponseParseException,
)
from formstack_api.result import FormstackResult


@dataclass(frozen=True)
class FormstackRequest:
    """One call to a Formstack API endpoint"""

    method: str
    endpoint: str
    params: Optional[Mapping[str, Any]] = None

    @classmethod
    def build(
        cls,
        endpoint: str,
        verb: str = "GET",
        params: Optional[Mapping[str, Any]] = None,
    ) -> "FormstackRequest":
        """Validates the endpoint and verb, raises FormstackConfigurationError on bad input

        Args:
            endpoint (str): Path relative to the API base path, eg. `form.json`
            verb (str, optional): GET, PUT, POST or DELETE (any case). Defaults to "GET".
            params (Mapping[str, Any], optional): Request parameters. Defaults to None.
        """
        if not endpoint or not isinstance(endpoint, str):
            raise FormstackConfigurationError("You must include an endpoint to request")
        verb = (verb or "GET").upper()
        if verb not in VALID_VERBS:
            raise FormstackConfigurationError(
                f"Your requests must be performed with one of the following verbs: {','.join(VALID_VERBS)}"
            )
        return cls(verb, endpoint, params or None)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.method} {self.endpoint}>"

    @property
    def body(self) -> Optional[bytes]:
        """URI encoded parameters, None if there is nothing to send"""
        if not self.params:
            return None
        query = data_to_query_string(self.params)
        return query.encode("ascii") if query else None

    def headers(self, auth_header: dict) -> dict:
        headers = dict(auth_header)
        body = self.body
        if body is not None:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            headers["Content-Length"] = str(len(body))
        return headers


def decode_json_payload(content: bytes) -> FormstackResult:
    """Parses a complete response body into a FormstackResult"""
    try:
        payload = json.loads(content.decode("utf-8"))
    except ValueError as ex:
        return FormstackResult.failure(
            FormstackResponseParseException(f"Invalid JSON in response body: {ex}")
        )
    if payload is None:
        return FormstackResult.failure(
            FormstackResponseParseException("Empty JSON payload in response body")
        )
    return FormstackResult.success(payload)


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300
