"""Defines FormstackAPI object and its logic."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Callable, Mapping, Optional

# ----
from formstack_api.config import FormstackConfig
from formstack_api.consts import DEFAULT_HOST, DEFAULT_PATH, DEFAULT_PORT
from formstack_api.logger import FormstackLogger
from formstack_api.parameters import (
    FieldParameters,
    SubmissionParameters,
    SubmissionsParameters,
)
from formstack_api.request import FormstackRequest
from formstack_api.result import FormstackResult, check_api_error
from formstack_api.session import FormstackSession
from formstack_api.validation import require_id


def _forms_of(data: Any) -> Any:
    if isinstance(data, dict) and data.get("forms") is not None:
        return data["forms"]
    return data


def _with_kwargs(params, params_cls, kwargs: dict):
    if params is None:
        return params_cls(**kwargs)
    if kwargs:
        return replace(params, **kwargs)
    return params


class BaseFormstackAPI(ABC):
    """Resource methods of the Formstack API v2.

    Every method validates its arguments before anything is sent and raises
    FormstackConfigurationError when they are invalid. Subclasses decide how the
    request is executed by implementing `_call`.
    """

    def __init__(
        self,
        access_token: str,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        path: str = DEFAULT_PATH,
        timeout: Optional[float] = None,
    ) -> None:
        """Formstack API client constructor

        Args:
            access_token (str): Formstack API access token
            host (str, optional): Formstack API host. Defaults to www.formstack.com
            port (int, optional): Formstack API port number. Defaults to 443
            path (str, optional): API path relative to host. Defaults to /api/v2/
            timeout (float, optional): Request timeout in seconds. Defaults to None (no timeout)
        """
        self.config = FormstackConfig(
            access_token,
            host=host or DEFAULT_HOST,
            port=port or DEFAULT_PORT,
            path=path or DEFAULT_PATH,
            timeout=timeout,
        )
        self.logger: FormstackLogger = FormstackLogger()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.config.url_base}>"

    @abstractmethod
    def _call(
        self,
        endpoint: str,
        verb: str,
        params: Optional[Mapping[str, Any]],
        transform: Optional[Callable[[Any], Any]] = None,
    ):
        """Builds the request for `endpoint` and hands it to the session"""

    def request(
        self,
        endpoint: str,
        verb: str = "GET",
        params: Optional[Mapping[str, Any]] = None,
    ):
        """Makes a request to any Formstack API endpoint

        Args:
            endpoint (str): Path relative to the API path, eg. `form.json`
            verb (str, optional): HTTP verb (GET, PUT, POST, DELETE). Defaults to "GET".
            params (Mapping[str, Any], optional): Request parameters. Defaults to None.

        Raises:
            FormstackConfigurationError: empty endpoint or unsupported verb
        """
        return self._call(endpoint, verb, params)

    # ---- forms ----

    def get_forms(self, folder_organized: bool = False):
        """Get a list of forms in your account

        Args:
            folder_organized (bool, optional): Group forms by folder. Defaults to False.

        Result data is the list of forms, or a dict keyed by folder if folder_organized.
        """
        params = {"folders": 1 if folder_organized else 0}
        return self._call("form.json", "GET", params, transform=_forms_of)

    def get_form_details(self, form_id):
        """Get the detailed information of a specific form"""
        require_id(form_id, "Form")
        return self._call(f"form/{form_id}", "GET", None)

    def copy_form(self, form_id):
        """Create a copy of a form in your account"""
        require_id(form_id, "Form")
        return self._call(f"form/{form_id}/copy", "POST", None)

    # ---- fields ----

    def get_fields(self, form_id):
        """Get the fields of a specific form"""
        require_id(form_id, "Form")
        return self._call(f"form/{form_id}/field", "GET", None)

    def create_field(self, form_id, params: Optional[FieldParameters] = None, **kwargs):
        """Create a new field on the specified form

        Args:
            form_id: The ID of the form to create the field on
            params (FieldParameters, optional): Field definition, fields can also be passed as kwargs.
        """
        require_id(form_id, "Form")
        params = _with_kwargs(params, FieldParameters, kwargs)
        return self._call(f"form/{form_id}/field", "POST", params.as_dict())

    # ---- submissions ----

    def get_submissions(
        self, form_id, params: Optional[SubmissionsParameters] = None, **kwargs
    ):
        """Get submissions for a specific form

        Args:
            form_id: The ID of the form to retrieve submissions for
            params (SubmissionsParameters, optional): Filters and paging, can also be passed as kwargs.

        Result data contains `submissions`, `total` and `pages`.
        """
        require_id(form_id, "Form")
        params = _with_kwargs(params, SubmissionsParameters, kwargs)
        return self._call(
            f"form/{form_id}/submission.json", "GET", params.as_dict()
        )

    def submit_form(
        self, form_id, params: Optional[SubmissionParameters] = None, **kwargs
    ):
        """Create a new submission for the specified form"""
        require_id(form_id, "Form")
        params = _with_kwargs(params, SubmissionParameters, kwargs)
        return self._call(
            f"form/{form_id}/submission.json", "POST", params.as_dict()
        )

    def get_submission_details(
        self, submission_id, encryption_password: Optional[str] = None
    ):
        """Get the details of a specific submission"""
        require_id(submission_id, "Submission")
        params = {}
        if encryption_password:
            params["encryption_password"] = encryption_password
        return self._call(f"submission/{submission_id}.json", "GET", params)

    def edit_submission_data(
        self, submission_id, params: Optional[SubmissionParameters] = None, **kwargs
    ):
        """Update the specified submission"""
        require_id(submission_id, "Submission")
        params = _with_kwargs(params, SubmissionParameters, kwargs)
        return self._call(
            f"submission/{submission_id}.json", "PUT", params.as_dict()
        )

    def delete_submission(self, submission_id):
        """Delete the specified submission"""
        require_id(submission_id, "Submission")
        return self._call(f"submission/{submission_id}.json", "DELETE", None)


class FormstackAPI(BaseFormstackAPI):
    """Blocking Formstack API v2 client. Every method returns a FormstackResult.

        api = FormstackAPI(token)
        forms, err = api.get_forms()
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.session = FormstackSession(self.config)

    def _call(
        self,
        endpoint: str,
        verb: str,
        params: Optional[Mapping[str, Any]],
        transform: Optional[Callable[[Any], Any]] = None,
    ) -> FormstackResult:
        request = FormstackRequest.build(endpoint, verb, params)
        result = check_api_error(self.session.execute(request))
        if not result.ok:
            self.logger.debug(f"{request!r} failed | {result.error!r}")
        if transform is not None:
            result = result.map(transform)
        return result
