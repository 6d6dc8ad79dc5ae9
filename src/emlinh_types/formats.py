"""
String formats shared by every contract: UUID, URL and email.

Each format stays a plain ``str`` after validation, exactly as received, so
a value that passed once passes again unchanged. Checks are syntactic only.
"""

import re
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, AnyUrl, TypeAdapter, WithJsonSchema
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _invalid(kind: str) -> PydanticCustomError:
    return PydanticCustomError(
        "invalid_format", "Invalid {kind}", {"kind": kind}
    )


def check_uuid(value: str) -> str:
    if not _UUID_RE.fullmatch(value):
        raise _invalid("uuid")
    return value


def check_url(value: str) -> str:
    """Accepts absolute URLs with a scheme (``https://...``, ``mailto:...``)."""
    # The URL parser trims surrounding whitespace; the stored value would not be.
    if value != value.strip():
        raise _invalid("url")
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        raise _invalid("url") from None
    return value


def check_email(value: str) -> str:
    """A bare address only; display-name forms (``Name <addr>``) are rejected."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise _invalid("email") from None
    return value


Uuid = Annotated[
    str,
    AfterValidator(check_uuid),
    WithJsonSchema({"type": "string", "format": "uuid"}),
]
Url = Annotated[
    str,
    AfterValidator(check_url),
    WithJsonSchema({"type": "string", "format": "uri"}),
]
Email = Annotated[
    str,
    AfterValidator(check_email),
    WithJsonSchema({"type": "string", "format": "email"}),
]
