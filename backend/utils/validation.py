"""
Turn pydantic validation failures into field-scoped error maps

Field titles double as the human-readable labels in messages, e.g.
Field(title="Password", max_length=100) ->
"Password must not be more than 100 characters."
"""
from typing import Any, Dict, List, Type

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError


def require_value(value: Any) -> Any:
    """Before-validator treating None and blank strings as a missing field"""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("missing", "Field required")
    return value


def error_message(error: Dict[str, Any], label: str) -> str:
    """Message for one pydantic error dict"""
    kind = error["type"]
    if kind == "missing":
        return f"{label} is required."
    if kind == "literal_error":
        return f"Invalid {label.lower()}."
    if kind == "string_too_long":
        return f"{label} must not be more than {error['ctx']['max_length']} characters."
    return error["msg"]


def error_map(exc: ValidationError, schema: Type[BaseModel]) -> Dict[str, List[str]]:
    """
    Collect every error of a ValidationError into {field: [messages]}

    Args:
        exc: Raised by schema.model_validate()
        schema: The model that was validated; its field titles are the labels
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "request"
        info = schema.model_fields.get(field)
        label = info.title if info is not None and info.title else field.capitalize()
        errors.setdefault(field, []).append(error_message(error, label))
    return errors


def merge_errors(*maps: Dict[str, List[str]]) -> Dict[str, List[str]]:
    """Combine several error maps, keeping every message"""
    merged: Dict[str, List[str]] = {}
    for errors in maps:
        for field, messages in errors.items():
            merged.setdefault(field, []).extend(messages)
    return merged
