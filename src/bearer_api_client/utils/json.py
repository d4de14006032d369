"""JSON encode/decode helpers for request payloads and response bodies.

Payloads are written with camelCase property names and ``None`` values
omitted. Property names of pydantic models and dataclasses are camelCased
(explicit aliases win); keys of plain mappings are written as given.

Response bodies are decoded into an arbitrary target type through a
pydantic ``TypeAdapter``, so models, builtin containers and scalars are
all supported. Model and dataclass targets must be able to read camelCase
names, which :class:`~bearer_api_client.models.ApiModel` subclasses do.
"""

import dataclasses
import json
import typing
from typing import Any, Dict, Optional, Set, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

from ..exceptions import SerializationError

T = TypeVar("T")


def _to_wire(value: Any) -> Any:
    if isinstance(value, BaseModel):
        data = {}
        for name, field in type(value).model_fields.items():
            if field.exclude:
                continue
            item = getattr(value, name)
            if item is None:
                continue
            key = field.serialization_alias or field.alias or to_camel(name)
            data[key] = _to_wire(item)
        return data
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            to_camel(f.name): _to_wire(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, dict):
        return {k: _to_wire(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_wire(v) for v in value]
    return to_jsonable_python(value)


def to_json(obj: Any, indented: bool = True) -> Optional[str]:
    """Serialize a payload object to a JSON string.

    :param obj: Pydantic model, dataclass, mapping, sequence or scalar
    :type obj: Any
    :param indented: Whether to pretty-print with two-space indentation
    :type indented: bool
    :return: JSON text, or None when ``obj`` is None
    :rtype: Optional[str]
    """
    if obj is None:
        return None
    return json.dumps(_to_wire(obj), indent=2 if indented else None, ensure_ascii=False)


def _field_aliases(type_: Any) -> Optional[Dict[str, Any]]:
    if isinstance(type_, type) and issubclass(type_, BaseModel):
        return {
            name: field.validation_alias or field.alias
            for name, field in type_.model_fields.items()
        }
    if isinstance(type_, type) and dataclasses.is_dataclass(type_):
        # pydantic dataclasses carry FieldInfo, stdlib ones never alias
        pydantic_fields = getattr(type_, "__pydantic_fields__", None)
        if pydantic_fields:
            return {
                name: field.validation_alias or field.alias
                for name, field in pydantic_fields.items()
            }
        return {f.name: None for f in dataclasses.fields(type_)}
    return None


def _field_types(type_: Any) -> list:
    if issubclass(type_, BaseModel):
        return [field.annotation for field in type_.model_fields.values()]
    return list(typing.get_type_hints(type_).values())


def _require_camel_case_names(type_: Any, seen: Optional[Set[int]] = None) -> None:
    """Reject target types with fields camelCase JSON can never populate.

    A multi-word field without an alias would silently keep its default
    when decoding ``{"numeroPedido": ...}``.
    """
    seen = set() if seen is None else seen
    if id(type_) in seen:
        return
    seen.add(id(type_))

    for arg in typing.get_args(type_):
        _require_camel_case_names(arg, seen)

    aliases = _field_aliases(type_)
    if aliases is None:
        return
    for name, alias in aliases.items():
        if alias is None and to_camel(name) != name:
            raise SerializationError(
                f"Field {type_.__name__}.{name} cannot be read from camelCase JSON; "
                f"derive {type_.__name__} from ApiModel",
                type_name=type_.__name__,
            )
    for field_type in _field_types(type_):
        _require_camel_case_names(field_type, seen)


def from_json(text: Optional[str], type_: Type[T]) -> Optional[T]:
    """Deserialize JSON text into ``type_``.

    :param text: JSON text; blank or None yields None
    :type text: Optional[str]
    :param type_: Target type
    :type type_: Type[T]
    :return: Decoded value, or None for a blank input
    :rtype: Optional[T]
    :raises SerializationError: If the text is not valid JSON for ``type_``,
                                or ``type_`` has a multi-word field that
                                cannot be read from its camelCase name
    """
    if text is None or not text.strip():
        return None
    _require_camel_case_names(type_)
    type_name = getattr(type_, "__name__", str(type_))
    try:
        return TypeAdapter(type_).validate_json(text)
    except ValidationError as e:
        raise SerializationError(
            f"Could not decode response as {type_name}: {e.error_count()} error(s)",
            type_name=type_name,
        ) from e


def default_for(type_: Type[T]) -> T:
    """Return the default (empty) value of ``type_``.

    The type must be constructible without arguments, e.g. a model whose
    fields all have defaults, ``list``, ``dict``, ``str`` or ``int``.
    """
    return type_()


__all__ = ["to_json", "from_json", "default_for"]
