"""
The base model every contract builds on, and the payload derivation utility.

``ContractModel`` fixes the wire conventions once: camelCase keys on the wire,
snake_case attributes in Python, unknown keys ignored, validated values frozen.

``derive`` produces create / update / list payload models from the canonical
entity model by reading its field table (``model_fields``), so that payload
shapes never drift from the entity they come from.
"""

import logging
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, Iterable, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, create_model, model_validator
from pydantic.alias_generators import to_camel
from pydantic.fields import FieldInfo

logger = logging.getLogger(__name__)

# Passed as ``make_optional`` to relax every retained field.
ALL_FIELDS = "__all__"

FieldDefinition = Tuple[Any, Any]


class ContractModel(BaseModel):
    """Base class for all contract models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    # Set on models produced by ``derive``; canonical models leave it unset.
    __derived_from__: ClassVar[Optional[type]] = None

    @model_validator(mode="before")
    @classmethod
    def _none_means_absent(cls, data: Any) -> Any:
        # A None for a defaulted or optional key is handled like a missing key,
        # so the declared default applies. Required keys keep their None and fail.
        if not isinstance(data, dict):
            return data
        optional_keys = cls._optional_keys()
        return {
            key: value
            for key, value in data.items()
            if value is not None or key not in optional_keys
        }

    @classmethod
    def _optional_keys(cls) -> FrozenSet[str]:
        keys = set()
        for name, field in cls.model_fields.items():
            if field.is_required():
                continue
            keys.add(name)
            if field.alias:
                keys.add(field.alias)
        return frozenset(keys)

    def to_wire(self) -> Dict[str, Any]:
        """camelCase dict of JSON values, absent optional fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


def _field_definition(field: FieldInfo, optional: bool) -> FieldDefinition:
    # Constraints (min_length, ge, format validators...) live in field.metadata
    # once pydantic has unpacked the annotation; putting them back in an
    # Annotated keeps every check of the base field.
    annotation = field.annotation
    if field.metadata:
        annotation = Annotated[(annotation, *field.metadata)]

    kwargs: Dict[str, Any] = {"description": field.description}
    if field.discriminator is not None:
        kwargs["discriminator"] = field.discriminator
    if optional:
        kwargs["default"] = None
    elif field.default_factory is not None:
        kwargs["default_factory"] = field.default_factory
    else:
        kwargs["default"] = field.default
    return annotation, Field(**kwargs)


def _check_names(base: Type[ContractModel], option: str, names: Iterable[str]) -> None:
    unknown = sorted(set(names) - set(base.model_fields))
    if unknown:
        raise ValueError(
            f"{option} names unknown fields of {base.__name__}: {', '.join(unknown)}"
        )


def derive(
    base: Type[ContractModel],
    name: str,
    *,
    omit: Iterable[str] = (),
    make_optional: Union[Iterable[str], str] = (),
    pick: Optional[Iterable[str]] = None,
    extend: Optional[Dict[str, FieldDefinition]] = None,
    doc: Optional[str] = None,
) -> Type[ContractModel]:
    """Builds a payload model from a canonical contract model.

    Every retained field keeps its type, format and range constraints. A field
    listed in ``make_optional`` may be absent and then stays unset; it does not
    fall back to the base default, since an update that leaves a field out
    must not reset it.

    Parameters
    ----------
    base : Type[ContractModel]
        The canonical entity model. Derived models are rejected.
    name : str
        Class name of the new model.
    omit : Iterable[str]
        Python field names to drop. Matching input keys are ignored.
    make_optional : Iterable[str] or ALL_FIELDS
        Field names whose presence requirement is dropped.
    pick : Iterable[str], optional
        If given, only these fields are retained (before ``omit`` applies).
    extend : Dict[str, FieldDefinition], optional
        Additional ``name -> (annotation, Field(...))`` definitions.
    doc : str, optional
        Docstring of the new model.

    Returns
    -------
    Type[ContractModel]
        The derived model class.

    Raises
    ------
    TypeError
        If ``base`` is itself a derived model.
    ValueError
        If any option names a field the base does not declare, or ``extend``
        redefines a retained field.
    """
    if base.__derived_from__ is not None:
        raise TypeError(
            f"{base.__name__} is derived from {base.__derived_from__.__name__}; "
            "derive from the canonical model instead"
        )

    omit = set(omit)
    _check_names(base, "omit", omit)
    if pick is not None:
        pick = list(pick)
        _check_names(base, "pick", pick)
        retained = [field for field in pick if field not in omit]
    else:
        retained = [field for field in base.model_fields if field not in omit]

    if make_optional == ALL_FIELDS:
        optional = set(retained)
    else:
        optional = set(make_optional)
        _check_names(base, "make_optional", optional)

    definitions: Dict[str, FieldDefinition] = {
        field: _field_definition(base.model_fields[field], optional=field in optional)
        for field in retained
    }
    for field, definition in (extend or {}).items():
        if field in definitions:
            raise ValueError(f"extend redefines {base.__name__}.{field}")
        definitions[field] = definition

    model = create_model(
        name,
        __base__=ContractModel,
        __doc__=doc,
        __module__=base.__module__,
        **definitions,
    )
    model.__derived_from__ = base
    logger.debug(
        "Derived %s from %s with fields %s", name, base.__name__, ", ".join(definitions)
    )
    return model
