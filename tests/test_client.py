import pytest

from formstack_api import FormstackResult, SubmissionParameters, SubmissionsParameters
from formstack_api.client import BaseFormstackAPI
from formstack_api.error import (
    FormstackAPIErrorException,
    FormstackConfigurationError,
    FormstackInternalException,
    InvalidDateFormatException,
)
from tests.util import BASE_URL, TOKEN


def test_get_forms_returns_forms_list(api, transport):
    transport.queue(200, {"forms": [{"id": "1", "name": "Contact"}], "total": 1})
    result = api.get_forms()
    assert isinstance(result, FormstackResult)
    assert result.data == [{"id": "1", "name": "Contact"}]
    call = transport.last_call
    assert call["method"] == "GET"
    assert call["url"] == f"{BASE_URL}form.json"
    assert call["data"] == b"folders=0"


def test_get_forms_folder_organized(api, transport):
    folders = {"Marketing": [{"id": "1"}], "Sales": [{"id": "2"}]}
    transport.queue(200, {"forms": folders})
    forms, err = api.get_forms(folder_organized=True)
    assert err is None
    assert forms == folders
    assert transport.last_call["data"] == b"folders=1"


def test_get_forms_http_error(api, transport):
    transport.queue(500, {})
    forms, err = api.get_forms()
    assert forms is None
    assert isinstance(err, FormstackInternalException)


def test_api_level_error_is_a_failure(api, transport):
    payload = {"status": "error", "message": "x"}
    transport.queue(200, payload)
    data, err = api.get_form_details(1)
    assert data is None
    assert isinstance(err, FormstackAPIErrorException)
    assert err.payload == payload
    assert str(err) == "x"


def test_api_level_error_on_get_forms(api, transport):
    transport.queue(200, {"status": "error", "error": "Invalid token"})
    forms, err = api.get_forms()
    assert forms is None
    assert err.payload["error"] == "Invalid token"


def test_get_form_details(api, transport):
    transport.queue(200, {"id": "123", "name": "Contact"})
    assert api.get_form_details("123").data["name"] == "Contact"
    call = transport.last_call
    assert call["url"] == f"{BASE_URL}form/123"
    assert call["data"] is None


@pytest.mark.parametrize("form_id", ["abc", None, True, "", "inf", "1_000", float("inf")])
def test_form_id_must_be_numeric(api, transport, form_id):
    with pytest.raises(FormstackConfigurationError, match="Form ID"):
        api.get_form_details(form_id)
    with pytest.raises(FormstackConfigurationError, match="Form ID"):
        api.copy_form(form_id)
    with pytest.raises(FormstackConfigurationError, match="Form ID"):
        api.get_fields(form_id)
    with pytest.raises(FormstackConfigurationError, match="Form ID"):
        api.get_submissions(form_id)
    assert transport.calls == []


def test_copy_form(api, transport):
    transport.queue(201, {"id": "124"})
    assert api.copy_form(123).data == {"id": "124"}
    call = transport.last_call
    assert call["method"] == "POST"
    assert call["url"] == f"{BASE_URL}form/123/copy"
    assert call["data"] is None


def test_get_fields(api, transport):
    transport.queue(200, [{"id": "11", "field_type": "text"}])
    fields, err = api.get_fields(5)
    assert err is None
    assert fields == [{"id": "11", "field_type": "text"}]
    assert transport.last_call["url"] == f"{BASE_URL}form/5/field"


def test_create_field(api, transport):
    transport.queue(201, {"id": "99", "field_type": "select"})
    result = api.create_field(
        5, field_type="select", label="Color", options=["Red", "Blue"], required=True
    )
    assert result.data["id"] == "99"
    call = transport.last_call
    assert call["method"] == "POST"
    assert call["url"] == f"{BASE_URL}form/5/field"
    assert call["data"] == (
        b"field_type=select&label=Color&options%5B0%5D=Red&options%5B1%5D=Blue&required=1"
    )


def test_create_field_unknown_type(api, transport):
    with pytest.raises(FormstackConfigurationError):
        api.create_field(5, field_type="slider")
    assert transport.calls == []


def test_get_submissions_defaults(api, transport):
    transport.queue(200, {"submissions": [], "total": 0, "pages": 0})
    result = api.get_submissions(7)
    assert result.data["total"] == 0
    call = transport.last_call
    assert call["method"] == "GET"
    assert call["url"] == f"{BASE_URL}form/7/submission.json"
    assert call["data"] == b"page=1&per_page=25&sort=DESC"


def test_get_submissions_search(api, transport):
    transport.queue(200, {"submissions": []})
    api.get_submissions(
        7, search_field_ids=[11], search_field_values=["foo bar"], sort="asc"
    )
    assert transport.last_call["data"] == (
        b"page=1&per_page=25&sort=ASC&search_field_0=11&search_value_0=foo%20bar"
    )


def test_get_submissions_params_object_with_override(api, transport):
    transport.queue(200, {"submissions": []})
    params = SubmissionsParameters(per_page=10, page_number=3)
    api.get_submissions(7, params, per_page=50)
    assert transport.last_call["data"] == b"page=3&per_page=50&sort=DESC"


@pytest.mark.parametrize("per_page", [0, 101])
def test_get_submissions_per_page_out_of_range(api, transport, per_page):
    with pytest.raises(FormstackConfigurationError):
        api.get_submissions(7, per_page=per_page)
    assert transport.calls == []


@pytest.mark.parametrize("per_page", [1, 100])
def test_get_submissions_per_page_bounds(api, transport, per_page):
    transport.queue(200, {"submissions": []})
    assert api.get_submissions(7, per_page=per_page).ok


def test_get_submissions_mismatched_search(api, transport):
    with pytest.raises(FormstackConfigurationError, match="one to one"):
        api.get_submissions(7, search_field_ids=[1, 2], search_field_values=["a"])
    assert transport.calls == []


def test_get_submissions_invalid_min_time(api, transport):
    with pytest.raises(InvalidDateFormatException):
        api.get_submissions(7, min_time="not a time")
    assert transport.calls == []


def test_get_submissions_unknown_argument(api, transport):
    with pytest.raises(TypeError):
        api.get_submissions(7, limit=5)


def test_submit_form(api, transport):
    transport.queue(201, {"id": "555"})
    result = api.submit_form(
        7,
        field_ids=[1, 2],
        field_values=["John Smith", "john@example.com"],
        ip_address="10.0.0.1",
        read=True,
    )
    assert result.data == {"id": "555"}
    call = transport.last_call
    assert call["method"] == "POST"
    assert call["url"] == f"{BASE_URL}form/7/submission.json"
    assert call["data"] == (
        b"remote_addr=10.0.0.1&read=1&field_1=John%20Smith&field_2=john@example.com"
    )


def test_submit_form_mismatched_fields(api, transport):
    with pytest.raises(FormstackConfigurationError, match="one to one"):
        api.submit_form(7, field_ids=[1, 2], field_values=["a"])
    assert transport.calls == []


def test_submit_form_bad_timestamp(api, transport):
    with pytest.raises(InvalidDateFormatException):
        api.submit_form(7, timestamp="2024/03/05 09:00:00")
    assert transport.calls == []


def test_get_submission_details(api, transport):
    transport.queue(200, {"id": "555", "data": []})
    api.get_submission_details(555, encryption_password="pw")
    call = transport.last_call
    assert call["method"] == "GET"
    assert call["url"] == f"{BASE_URL}submission/555.json"
    assert call["data"] == b"encryption_password=pw"


def test_get_submission_details_without_password(api, transport):
    transport.queue(200, {"id": "555"})
    api.get_submission_details("555")
    assert transport.last_call["data"] is None


@pytest.mark.parametrize("submission_id", ["x1", None])
def test_submission_id_must_be_numeric(api, transport, submission_id):
    with pytest.raises(FormstackConfigurationError, match="Submission ID"):
        api.get_submission_details(submission_id)
    with pytest.raises(FormstackConfigurationError, match="Submission ID"):
        api.edit_submission_data(submission_id)
    with pytest.raises(FormstackConfigurationError, match="Submission ID"):
        api.delete_submission(submission_id)
    assert transport.calls == []


def test_edit_submission_data(api, transport):
    transport.queue(200, {"success": "1", "id": "555"})
    params = SubmissionParameters(field_ids=[3], field_values=["new"])
    result = api.edit_submission_data(555, params, timestamp="2024-03-05 09:00:00")
    assert result.ok
    call = transport.last_call
    assert call["method"] == "PUT"
    assert call["url"] == f"{BASE_URL}submission/555.json"
    assert call["data"] == b"timestamp=2024-03-05%2009:00:00&field_3=new"


def test_delete_submission(api, transport):
    transport.queue(200, {"success": "1", "id": "555"})
    data, err = api.delete_submission(555)
    assert data == {"success": "1", "id": "555"}
    call = transport.last_call
    assert call["method"] == "DELETE"
    assert call["url"] == f"{BASE_URL}submission/555.json"
    assert call["data"] is None


def test_get_submissions_none_paging_uses_defaults(api, transport):
    transport.queue(200, {"submissions": []})
    api.get_submissions(7, page_number=None, per_page=None)
    assert transport.last_call["data"] == b"page=1&per_page=25&sort=DESC"


def test_base_client_is_abstract():
    with pytest.raises(TypeError):
        BaseFormstackAPI(TOKEN)
