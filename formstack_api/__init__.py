"""

## High level interfaces

FormstackAPI: Blocking Formstack API v2 client

AsyncFormstackAPI: Asyncio Formstack API v2 client

FormstackResult: Outcome of an API call, unpacks into (data, error)

SubmissionsParameters: Filters and paging for listing submissions

SubmissionParameters: Data of a new or edited submission

FieldParameters: Definition of a new field

FormstackLogger: Custom logger you can connect to your own logging

## Helpers

.encoding.data_to_query_string: Request parameters encoding

.dates.strtotime: Date string to seconds since the epoch

.dates.matches_date_format: YYYY-MM-DD HH:MM:SS check

"""
__version__ = "1.0.0"

from formstack_api.client import FormstackAPI
from formstack_api.client_async import AsyncFormstackAPI
from formstack_api.config import FormstackConfig
from formstack_api.result import FormstackResult
from formstack_api.parameters import (
    FieldParameters,
    SubmissionParameters,
    SubmissionsParameters,
)
from formstack_api.logger import FormstackLogger
