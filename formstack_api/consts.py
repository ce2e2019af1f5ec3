"""Stores useful constants."""
import re

DEFAULT_HOST = "www.formstack.com"
DEFAULT_PORT = 443
DEFAULT_PATH = "/api/v2/"

VALID_VERBS = ("GET", "PUT", "POST", "DELETE")

VALID_FIELD_TYPES = (
    "text",
    "textarea",
    "name",
    "address",
    "email",
    "phone",
    "creditcard",
    "datetime",
    "file",
    "number",
    "select",
    "radio",
    "checkbox",
    "matrix",
    "richtext",
    "embed",
    "product",
    "section",
)

SORT_DIRECTIONS = ("ASC", "DESC")

DEFAULT_PER_PAGE = 25
PER_PAGE_MIN = 1
PER_PAGE_MAX = 100

# YYYY-MM-DD HH:MM:SS, month/day/time components may have 1 or 2 digits
DATE_FORMAT_RE = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}\s\d{1,2}:\d{1,2}:\d{1,2}$")

# Characters left untouched by encodeURI, on top of quote()'s always-safe set
URI_SAFE_CHARS = ";,/?:@&=+$!*'()#"

RESPONSE_CHUNK_SIZE = 4096  # bytes
