"""

encoding.py

Builds the URI-encoded parameter string sent with every Formstack request.
"""

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

from formstack_api.consts import URI_SAFE_CHARS


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _sub_items(value: Any):
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def _is_nested(value: Any) -> bool:
    return isinstance(value, Mapping) or (
        isinstance(value, Sequence) and not isinstance(value, (str, bytes))
    )


def data_to_query_string(data: Mapping[str, Any]) -> str:
    """Stringify method for request parameters

    Nested mappings (and lists, keyed by index) are expanded into `key[subkey]=value`
    segments, `None` values are left out. Segments are joined with `&` and the whole
    string is then encoded once, like encodeURI does, so `&` and `=` inside values
    are not escaped.

    Args:
        data (Mapping[str, Any]): parameter name -> scalar or flat mapping/list of scalars

    Returns:
        str: uri encoded string
    """
    query_parts = []
    for key, value in data.items():
        if value is None:
            continue
        if _is_nested(value):
            for sub_key, sub_value in _sub_items(value):
                if sub_value is None:
                    continue
                query_parts.append(f"{key}[{sub_key}]={_stringify(sub_value)}")
        else:
            query_parts.append(f"{key}={_stringify(value)}")

    return quote("&".join(query_parts), safe=URI_SAFE_CHARS)
