"""

parameters.py

"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Union

# ----
from formstack_api.consts import (
    DEFAULT_PER_PAGE,
    SORT_DIRECTIONS,
    VALID_FIELD_TYPES,
)
from formstack_api.dates import validate_date, validate_timestamp
from formstack_api.error import FormstackConfigurationError
from formstack_api.validation import (
    require_choice,
    require_field_ids,
    require_numeric,
    require_pairs,
    require_per_page,
)

Number = Union[int, float, str]


@dataclass(frozen=True)
class SubmissionsParameters:

    """SubmissionsParameters class
    This class stores parameters for listing the submissions of a form.\n
    `encryption_password` the form's encryption password (if applicable).\n
    `min_time` only submissions after this Date/Time string (EST).\n
    `max_time` only submissions before this Date/Time string (EST).\n
    `search_field_ids` field ids to search on, paired with `search_field_values`.\n
    `search_field_values` values to search for, one per id in `search_field_ids`.\n
    `page_number` page of submissions to retrieve. None or 0 means 1. Defaults to 1.\n
    `per_page` submissions per page, 1 <= per_page <= 100. None means 25. Defaults to 25.\n
    `sort` ( "ASC" | "DESC" ) sort direction. Defaults to "DESC".\n
    `data` include submission data. Defaults to False.\n
    `expand_data` include extra formatting for included data. Defaults to False.
    """

    encryption_password: Optional[str] = None
    min_time: Optional[str] = None
    max_time: Optional[str] = None
    search_field_ids: Sequence[Number] = field(default_factory=tuple)
    search_field_values: Sequence[Any] = field(default_factory=tuple)
    page_number: Number = 1
    per_page: Number = DEFAULT_PER_PAGE
    sort: str = "DESC"
    data: bool = False
    expand_data: bool = False

    def as_dict(self) -> Dict[str, Any]:
        """Validates the parameters and returns the request parameters dict

        Raises:
            FormstackConfigurationError: on any invalid value
        """
        if self.min_time is not None:
            validate_date(self.min_time, "min_time")
        if self.max_time is not None:
            validate_date(self.max_time, "max_time")
        search_field_ids = self.search_field_ids or ()
        search_field_values = self.search_field_values or ()
        require_pairs(search_field_ids, search_field_values)
        require_field_ids(search_field_ids)
        page = self.page_number or 1
        per_page = DEFAULT_PER_PAGE if self.per_page is None else self.per_page
        require_numeric(page, "The page_number value must be numeric")
        require_per_page(per_page)
        sort = str(self.sort or "DESC").upper()
        require_choice(sort, SORT_DIRECTIONS, "The sort parameter must be ASC or DESC")

        params: Dict[str, Any] = dict()
        if self.encryption_password:
            params["encryption_password"] = self.encryption_password
        if self.min_time:
            params["min_time"] = self.min_time
        if self.max_time:
            params["max_time"] = self.max_time
        params["page"] = page
        params["per_page"] = per_page
        params["sort"] = sort
        if self.data:
            params["data"] = self.data
        if self.expand_data:
            params["expand_data"] = self.expand_data
        for index, (field_id, value) in enumerate(
            zip(search_field_ids, search_field_values)
        ):
            params[f"search_field_{index}"] = field_id
            params[f"search_value_{index}"] = value
        return params


@dataclass(frozen=True)
class SubmissionParameters:

    """SubmissionParameters class
    This class stores the data of a new or edited submission.\n
    `field_ids` ids of the fields to submit data for, paired with `field_values`.\n
    `field_values` values to submit, one per id in `field_ids`.\n
    `timestamp` time to record, `YYYY-MM-DD HH:MM:SS`.\n
    `user_agent` browser user agent to record.\n
    `ip_address` IP address to record.\n
    `payment_status` status of payment integration(s) (if applicable).\n
    `read` whether the submission was read. Defaults to False.
    """

    field_ids: Sequence[Number] = field(default_factory=tuple)
    field_values: Sequence[Any] = field(default_factory=tuple)
    timestamp: Optional[str] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    payment_status: Optional[str] = None
    read: bool = False

    def as_dict(self) -> Dict[str, Any]:
        """Validates the parameters and returns the request parameters dict"""
        field_ids = self.field_ids or ()
        field_values = self.field_values or ()
        require_pairs(field_ids, field_values)
        if self.timestamp is not None:
            validate_timestamp(self.timestamp)
        require_field_ids(field_ids)

        params: Dict[str, Any] = dict()
        if self.timestamp:
            params["timestamp"] = self.timestamp
        if self.user_agent:
            params["user_agent"] = self.user_agent
        if self.ip_address:
            params["remote_addr"] = self.ip_address
        if self.payment_status:
            params["payment_status"] = self.payment_status
        if self.read:
            params["read"] = 1
        for field_id, value in zip(field_ids, field_values):
            params[f"field_{field_id}"] = value
        return params


@dataclass(frozen=True)
class FieldParameters:

    """FieldParameters class
    This class describes a field to create on a form.\n
    `field_type` one of `VALID_FIELD_TYPES`. Required.\n
    `label`, `hide_label` the field's label and whether to hide it.\n
    `description`, `use_callout` text shown below the field, optionally in a callout box.\n
    `field_specific_attributes` mapping of type specific attributes.\n
    `default_value` predefined field value.\n
    `options`, `options_values` option labels and values (select, radio, checkbox only).\n
    `required`, `read_only`, `hidden`, `unique` field flags.\n
    `column_span` how many columns the field spans.\n
    `sort` position in the form (0 is first).
    """

    field_type: Optional[str] = None
    label: Optional[str] = None
    hide_label: bool = False
    description: Optional[str] = None
    use_callout: bool = False
    field_specific_attributes: Optional[Mapping[str, Any]] = None
    default_value: Optional[Any] = None
    options: Optional[Sequence[Any]] = None
    options_values: Optional[Sequence[Any]] = None
    required: bool = False
    read_only: bool = False
    hidden: bool = False
    unique: bool = False
    column_span: Optional[int] = None
    sort: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        """Validates the parameters and returns the request parameters dict"""
        require_choice(
            self.field_type,
            VALID_FIELD_TYPES,
            "Provided Field Type is not in the list of known Field types",
        )
        if self.field_specific_attributes is not None and not isinstance(
            self.field_specific_attributes, Mapping
        ):
            raise FormstackConfigurationError(
                "field_specific_attributes must be a mapping of attribute name to value"
            )
        if self.options is not None and self.options_values is not None:
            if len(self.options) != len(self.options_values):
                raise FormstackConfigurationError(
                    "You must have a one to one relationship between options and options_values"
                )

        params: Dict[str, Any] = {"field_type": self.field_type}
        if self.label:
            params["label"] = self.label
        if self.hide_label:
            params["hide_label"] = 1
        if self.description:
            params["description"] = self.description
        if self.use_callout:
            params["description_callout"] = 1
        if self.field_specific_attributes:
            params["attributes"] = dict(self.field_specific_attributes)
        if self.default_value is not None:
            params["default_value"] = self.default_value
        if self.options:
            params["options"] = list(self.options)
        if self.options_values:
            params["options_values"] = list(self.options_values)
        if self.required:
            params["required"] = 1
        if self.read_only:
            params["readonly"] = 1
        if self.hidden:
            params["hidden"] = 1
        if self.unique:
            params["unique"] = 1
        if self.column_span:
            params["colspan"] = self.column_span
        if self.sort is not None:
            params["sort"] = self.sort
        return params
