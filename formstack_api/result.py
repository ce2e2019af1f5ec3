"""

result.py

"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from formstack_api.error import FormstackAPIErrorException


@dataclass(frozen=True)
class FormstackResult:
    """Outcome of one Formstack API call.

    Exactly one of `data` and `error` is set. Unpacks like the (data, err) pair
    of a callback:

        data, err = api.get_forms()
    """

    data: Any = None
    error: Optional[BaseException] = None

    def __post_init__(self):
        if (self.data is None) == (self.error is None):
            raise ValueError("FormstackResult requires exactly one of data or error")

    @classmethod
    def success(cls, data: Any) -> "FormstackResult":
        return cls(data=data)

    @classmethod
    def failure(cls, error: BaseException) -> "FormstackResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self):
        yield self.data
        yield self.error

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Any:
        """Returns the data or raises the error"""
        if self.error is not None:
            raise self.error
        return self.data

    def map(self, func: Callable[[Any], Any]) -> "FormstackResult":
        """Applies `func` to the data of a successful result"""
        if self.error is not None:
            return self
        return FormstackResult.success(func(self.data))


def check_api_error(result: FormstackResult) -> FormstackResult:
    """Turns a successful result whose payload has status == "error" into a failure"""
    if result.ok and isinstance(result.data, dict) and result.data.get("status") == "error":
        return FormstackResult.failure(FormstackAPIErrorException(result.data))
    return result
