"""
The single error type raised when input does not satisfy a contract.

Pydantic reports failures with its own error vocabulary (``literal_error``,
``string_too_short``, ``union_tag_invalid`` ...). Hosts on both sides of the
wire need one stable vocabulary, so every pydantic error is translated into a
``Violation`` carrying a dotted path and one of the codes below.
"""

from typing import Any, Dict, List, Sequence, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_snake

# --- Violation codes ---
INVALID_TYPE = "invalid_type"
INVALID_ENUM_VALUE = "invalid_enum_value"
INVALID_FORMAT = "invalid_format"
TOO_SMALL = "too_small"
TOO_BIG = "too_big"
UNRECOGNIZED_VARIANT = "unrecognized_variant"
MISSING_DISCRIMINATOR = "missing_discriminator"
REQUIRED = "required"
CUSTOM = "custom"

_CODE_BY_PYDANTIC_TYPE: Dict[str, str] = {
    "missing": REQUIRED,
    "literal_error": INVALID_ENUM_VALUE,
    "enum": INVALID_ENUM_VALUE,
    "union_tag_invalid": UNRECOGNIZED_VARIANT,
    "union_tag_not_found": MISSING_DISCRIMINATOR,
    "invalid_format": INVALID_FORMAT,
    "string_pattern_mismatch": INVALID_FORMAT,
    "string_too_short": TOO_SMALL,
    "too_short": TOO_SMALL,
    "greater_than": TOO_SMALL,
    "greater_than_equal": TOO_SMALL,
    "string_too_long": TOO_BIG,
    "too_long": TOO_BIG,
    "less_than": TOO_BIG,
    "less_than_equal": TOO_BIG,
    "value_error": CUSTOM,
    "assertion_error": CUSTOM,
}

_RECEIVED_MAX_LENGTH = 60

# Keys whose value selects the variant of a tagged union.
TAG_KEYS = ("type", "source")

_UNKNOWN = object()


def _child(node: Any, part: Union[str, int]) -> Any:
    if isinstance(part, int):
        if isinstance(node, (list, tuple)) and -len(node) <= part < len(node):
            return node[part]
        return _UNKNOWN
    if isinstance(node, dict):
        if part in node:
            return node[part]
        # Input may use Python names where pydantic reports the wire alias.
        return node.get(to_snake(part), _UNKNOWN)
    return _UNKNOWN


def _is_variant_tag(node: Any, part: Union[str, int]) -> bool:
    return (
        isinstance(node, dict)
        and isinstance(part, str)
        and any(node.get(key) == part for key in TAG_KEYS)
    )


def format_path(loc: Sequence[Union[str, int]], data: Any = _UNKNOWN) -> str:
    """Render a pydantic location tuple as ``metadata.mentions[0]``.

    Pydantic inserts the chosen variant into locations inside a tagged union
    (``content, image, imageUrl``). When the validated input ``data`` is
    given, those segments are dropped so the path names keys of the input
    (``content.imageUrl``).
    """
    path = ""
    node = data
    tag_seen = False
    for part in loc:
        if not tag_seen and _is_variant_tag(node, part):
            tag_seen = True
            continue
        node = _child(node, part)
        tag_seen = False
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def describe_received(value: Any) -> str:
    """Short, log-safe description of an offending input value."""
    text = repr(value)
    if len(text) > _RECEIVED_MAX_LENGTH:
        text = text[: _RECEIVED_MAX_LENGTH - 3] + "..."
    return f"{type(value).__name__} {text}"


class Violation(BaseModel):
    """One violated constraint."""

    model_config = ConfigDict(frozen=True)

    path: str
    code: str
    message: str
    received: str

    @classmethod
    def from_error_details(cls, details: Dict[str, Any], data: Any = _UNKNOWN) -> "Violation":
        """Builds a violation from one entry of ``pydantic.ValidationError.errors()``.

        ``data`` is the whole validated input, used to resolve the path.
        """
        code = _CODE_BY_PYDANTIC_TYPE.get(details["type"], INVALID_TYPE)
        if code == REQUIRED:
            received = "nothing"
        else:
            received = describe_received(details.get("input"))
        return cls(
            path=format_path(details["loc"], data),
            code=code,
            message=details["msg"],
            received=received,
        )


class ValidationError(ValueError):
    """Raised when input fails a contract.

    Carries every violation found in one pass, in the order pydantic
    reported them, so a host UI can surface all problems at once.

    Parameters
    ----------
    schema_name : str
        Name of the schema that rejected the input.
    violations : Sequence[Violation]
        The violated constraints. Must not be empty.
    """

    def __init__(self, schema_name: str, violations: Sequence[Violation]) -> None:
        if not violations:
            raise ValueError("ValidationError needs at least one violation")
        self.schema_name = schema_name
        self.violations: List[Violation] = list(violations)
        super().__init__(self._render())

    @classmethod
    def from_pydantic(
        cls, exc: PydanticValidationError, schema_name: str, data: Any = _UNKNOWN
    ) -> "ValidationError":
        violations = [
            Violation.from_error_details(details, data)
            for details in exc.errors(include_url=False)
        ]
        return cls(schema_name, violations)

    @property
    def codes(self) -> List[str]:
        return [violation.code for violation in self.violations]

    @property
    def paths(self) -> List[str]:
        return [violation.path for violation in self.violations]

    def to_list(self) -> List[Dict[str, str]]:
        """Plain-dict form, ready to be sent back to a client."""
        return [violation.model_dump() for violation in self.violations]

    def _render(self) -> str:
        count = len(self.violations)
        noun = "violation" if count == 1 else "violations"
        lines = [f"{count} {noun} for {self.schema_name}"]
        for violation in self.violations:
            where = violation.path or "<root>"
            lines.append(
                f"  {where}: {violation.message} [{violation.code}, got {violation.received}]"
            )
        return "\n".join(lines)
