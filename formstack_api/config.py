"""

config.py

"""

from dataclasses import dataclass
from typing import Optional

from formstack_api.consts import DEFAULT_HOST, DEFAULT_PATH, DEFAULT_PORT
from formstack_api.error import FormstackConfigurationError


@dataclass(frozen=True)
class FormstackConfig:

    """FormstackConfig class
    Connection settings shared by every request of a client.\n
    `access_token` Formstack API access token. Required.\n
    `host` Formstack API host. Defaults to `www.formstack.com`.\n
    `port` Formstack API port number. Defaults to `443`.\n
    `path` Formstack API path relative to host. Defaults to `/api/v2/`.\n
    `timeout` Request timeout in seconds. Defaults to `None` (wait forever).
    FormstackAPI (requests) applies it to connecting and to each socket read, so a
    slow but steady response may take longer in total. AsyncFormstackAPI (aiohttp)
    applies it to the whole request, body included.
    """

    access_token: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    path: str = DEFAULT_PATH
    timeout: Optional[float] = None

    def __post_init__(self):
        if not self.access_token or not isinstance(self.access_token, str):
            raise FormstackConfigurationError("An access token is required")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.host}:{self.port}{self.path}>"

    @property
    def url_base(self) -> str:
        if self.port == DEFAULT_PORT:
            return f"https://{self.host}{self.path}"
        return f"https://{self.host}:{self.port}{self.path}"

    def url_for(self, endpoint: str) -> str:
        return f"{self.url_base}{endpoint}"

    @property
    def auth_header(self) -> dict:
        return {"Authorization": f"Bearer {self.access_token}"}
