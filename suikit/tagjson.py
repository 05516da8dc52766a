"""Decoding of JSON that encodes a tagged union into a dataclass of optional variants.

The target class is a dataclass whose fields all default to ``None``; each
field is one variant.  Field metadata may give ``json`` (the variant's JSON
name, default the field name), ``decode`` (a callable applied to the variant's
JSON value) and ``unit`` (a factory for the value of a variant written as a
bare string, default :class:`EmptyEnum`).  The class attributes ``JSON_TAG``
and ``JSON_CONTENT`` name the tag and content keys of an internally or
adjacently tagged union; when ``JSON_TAG`` is empty the union is externally
tagged.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

from suikit.encoding import EmptyEnum

T = TypeVar("T")


class TagJsonError(ValueError):
    """Raised when JSON does not match the tagged union it is decoded into."""


def _json_name(field: dataclasses.Field) -> str:
    return field.metadata.get("json", field.name)


def _decode(field: dataclasses.Field, value: Any) -> Any:
    decoder = field.metadata.get("decode")
    return decoder(value) if decoder is not None else value


def _unit(field: dataclasses.Field) -> Any:
    return field.metadata.get("unit", EmptyEnum)()


def _parse(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise TagJsonError(str(exc)) from exc


def _decode_untagged(cls: type[T], fields, text: str) -> T:
    if text[0] == "{":
        obj = _parse(text)
        values = {}
        for field in fields:
            name = _json_name(field)
            if name in obj:
                values[field.name] = _decode(field, obj[name])
                continue
            match = next((k for k in obj if k.lower() == name.lower()), None)
            if match is not None:
                values[field.name] = _decode(field, obj[match])
        return cls(**values)
    if text[0] == '"':
        variant = _parse(text)
        values = {
            field.name: _unit(field) for field in fields if variant in _json_name(field)
        }
        return cls(**values)
    raise TagJsonError("value not a tag json")


def decode_tagged(cls: type[T], data: str | bytes) -> T:
    """Decode ``data`` into an instance of the tagged-union dataclass ``cls``."""
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls!r} is not a dataclass")
    text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
    text = text.strip()
    if not text:
        raise TagJsonError("empty json data")
    fields = dataclasses.fields(cls)
    tag = getattr(cls, "JSON_TAG", "")
    content = getattr(cls, "JSON_CONTENT", "")

    if not tag:
        return _decode_untagged(cls, fields, text)

    obj = _parse(text)
    if not isinstance(obj, dict):
        raise TagJsonError("tagged json value is not an object")
    if tag not in obj:
        raise TagJsonError(f"no such tag: {tag} in json data {obj}")
    variant = obj[tag]
    if not isinstance(variant, str):
        raise TagJsonError(f"the tag [{tag}] value is not string")
    for field in fields:
        if variant not in _json_name(field):
            continue
        payload = obj
        if content:
            if content not in obj:
                raise TagJsonError(
                    f"json data [{obj}] get content key [{content}] failed"
                )
            payload = obj[content]
        return cls(**{field.name: _decode(field, payload)})
    raise TagJsonError(f"no tag[{tag}] value <{json.dumps(variant)}> in struct fields")