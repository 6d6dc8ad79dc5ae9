"""
The uniform ``parse`` / ``safe_parse`` surface every contract is exposed through.

A ``Schema`` wraps any type pydantic can validate: a ``ContractModel``
subclass, a ``Literal`` enumeration or a discriminated-union alias. Hosts call
the same four operations whichever kind of contract they hold.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import from_json

from .errors import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _decoded(raw: Union[str, bytes]) -> Any:
    # Only used to resolve violation paths; malformed JSON has no paths to resolve.
    try:
        return from_json(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of ``Schema.safe_parse``: either ``data`` or ``error`` is set."""

    success: bool
    data: Optional[T] = None
    error: Optional[ValidationError] = None


class Schema(Generic[T]):
    """Validator for one contract.

    Parameters
    ----------
    type_ : Any
        The contract type: a model class or a typing alias.
    name : str, optional
        Name used in error messages. Defaults to the type's ``__name__``;
        typing aliases have none worth showing, so pass one for them.
    """

    def __init__(self, type_: Any, name: Optional[str] = None) -> None:
        self.type = type_
        self.name = name or type_.__name__
        self._adapter: TypeAdapter = TypeAdapter(type_)

    def __repr__(self) -> str:
        return f"Schema({self.name})"

    def parse(self, data: Any) -> T:
        """Validates ``data`` and returns the normalized value.

        Raises
        ------
        ValidationError
            With every violated constraint, if ``data`` does not conform.
        """
        try:
            return self._adapter.validate_python(data)
        except PydanticValidationError as exc:
            raise self._reject(exc, data) from exc

    def parse_json(self, raw: Union[str, bytes]) -> T:
        """Like ``parse``, for a JSON document received off the wire."""
        try:
            return self._adapter.validate_json(raw)
        except PydanticValidationError as exc:
            raise self._reject(exc, _decoded(raw)) from exc

    def safe_parse(self, data: Any) -> ParseResult[T]:
        try:
            return ParseResult(success=True, data=self.parse(data))
        except ValidationError as error:
            return ParseResult(success=False, error=error)

    def is_valid(self, data: Any) -> bool:
        return self.safe_parse(data).success

    def json_schema(self) -> Dict[str, Any]:
        """JSON Schema of the wire shape (camelCase keys), for non-Python hosts."""
        return self._adapter.json_schema(by_alias=True)

    def _reject(self, exc: PydanticValidationError, data: Any) -> ValidationError:
        error = ValidationError.from_pydantic(exc, self.name, data)
        logger.debug("%s rejected input: %s", self.name, ", ".join(error.codes))
        return error
