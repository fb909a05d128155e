#!/usr/bin/env python3
"""
Lesson: records
Created: 2026-10-17T11:02:51+01:00
Project: stackexchange_api
Template: script

Every Stack Exchange response wraps its items in a named array:

    {"users": [{...}, {...}]}

A record type declares that array name with @wrapper_object and `unwrap`
turns the raw JSON text back into a list of typed records.
"""
import json
from datetime import datetime, timezone
from typing import Callable, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from stackexchange_api.clients.exceptions import ConfigurationError, ParseError

T = TypeVar('T', bound=BaseModel)

# record class -> name of the top-level JSON array holding its instances
_WRAPPER_OBJECTS: Dict[type, str] = {}


# ----------------------------
# Decorator: wrapper_object
# ----------------------------
def wrapper_object(field_name: str) -> Callable[[Type[T]], Type[T]]:
    """
    Registers the decorated model as living under `field_name` in responses.
    Registration is per class; subclasses have to be decorated on their own.
    """
    if not isinstance(field_name, str) or not field_name.strip():
        raise ConfigurationError(f"Wrapper field name must be a non-empty string, got {field_name!r}")

    def decorator(record_type: Type[T]) -> Type[T]:
        if not (isinstance(record_type, type) and issubclass(record_type, BaseModel)):
            raise ConfigurationError(f"{record_type!r} must be a pydantic model to be used as a record")
        _WRAPPER_OBJECTS[record_type] = field_name
        return record_type

    return decorator


def wrapper_field_for(record_type: type) -> str:
    """Look up the wrapper array name, failing loudly for unregistered types"""
    try:
        return _WRAPPER_OBJECTS[record_type]
    except (KeyError, TypeError):
        name = getattr(record_type, '__name__', repr(record_type))
        raise ConfigurationError(
            f"{name} type must be decorated with @wrapper_object(...)"
        ) from None


def unwrap(record_type: Type[T], json_text: str) -> List[T]:
    """
    Parse `json_text` and validate every element of the record type's
    wrapper array into `record_type`, keeping response order.
    """
    # Registration is checked before the payload is even looked at
    field_name = wrapper_field_for(record_type)

    try:
        payload = json.loads(json_text)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ParseError(f"Expected a JSON object, got {type(payload).__name__}")
    if field_name not in payload:
        raise ParseError(f"Response has no '{field_name}' field")

    items = payload[field_name]
    if not isinstance(items, list):
        raise ParseError(f"'{field_name}' must be an array, got {type(items).__name__}")

    records = []
    for index, item in enumerate(items):
        try:
            records.append(record_type.model_validate(item))
        except ValidationError as e:
            raise ParseError(
                f"'{field_name}'[{index}] is not a valid {record_type.__name__}: {e}"
            ) from e
    return records


def to_unix_time(moment: datetime) -> int:
    """Whole seconds since the epoch; naive datetimes are read as UTC"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp())
