"""

session.py

"""


from requests import Session, RequestException

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


class FormstackSession:
    """Performs blocking HTTP requests to the Formstack API, one connection per request"""

    def __init__(self, config: FormstackConfig):
        """FormstackSession constructor

        Args:
            config (FormstackConfig): Access token, host, port and path to use
        """
        self.config = config
        self.logger: FormstackLogger = FormstackLogger()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.config.url_base}>"

    def execute(self, request: FormstackRequest) -> FormstackResult:
        """Sends `request` and reads the whole response

        Returns:
            FormstackResult: parsed JSON on success, otherwise the status, transport or parse error
        """
        url = self.config.url_for(request.endpoint)
        self.logger.debug(f"Formstack API {request.method} {url}")
        try:
            with Session() as session:
                with session.request(
                    request.method,
                    url,
                    data=request.body,
                    headers=request.headers(self.config.auth_header),
                    stream=True,
                    timeout=self.config.timeout,
                ) as resp:
                    if not is_success_status(resp.status_code):
                        self.logger.warning(
                            f"Formstack API {request.method} {url} | HTTP {resp.status_code}"
                        )
                        return FormstackResult.failure(
                            exception_for_status(resp.status_code, response=resp)
                        )
                    content = b"".join(
                        resp.iter_content(chunk_size=RESPONSE_CHUNK_SIZE)
                    )
        except RequestException as ex:
            self.logger.error(f"Formstack API {request.method} {url} | {ex}")
            return FormstackResult.failure(ex)

        result = decode_json_payload(content)
        if not result.ok:
            self.logger.error(f"Formstack API {request.method} {url} | {result.error}")
        return result
