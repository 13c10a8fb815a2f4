"""Typed field readers used by the ``from_dict`` decoders."""

from typing import Any


def require_object(data: Any, path: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{path}: expected object, got {type(data).__name__}")
    return data


def optional_field(data: dict[str, Any], key: str, expected: type | tuple, path: str) -> Any:
    """Read an optional field, rejecting values of the wrong JSON type."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) and bool not in _as_tuple(expected):
        raise TypeError(f"{path}.{key}: unexpected boolean")
    if not isinstance(value, expected):
        raise TypeError(
            f"{path}.{key}: expected {_type_name(expected)}, got {type(value).__name__}"
        )
    return value


def required_field(data: dict[str, Any], key: str, expected: type | tuple, path: str) -> Any:
    value = optional_field(data, key, expected, path)
    if value is None:
        raise ValueError(f"{path}.{key}: required")
    return value


def string_list(data: dict[str, Any], key: str, path: str) -> tuple[str, ...]:
    values = optional_field(data, key, list, path) or []
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"{path}.{key}: expected array of strings")
    return tuple(values)


def _as_tuple(expected: type | tuple) -> tuple:
    return expected if isinstance(expected, tuple) else (expected,)


def _type_name(expected: type | tuple) -> str:
    names = {dict: "object", list: "array", str: "string", int: "integer", float: "number"}
    return " or ".join(names.get(t, t.__name__) for t in _as_tuple(expected))


def compact(values: dict[str, Any], extra: dict[str, Any]) -> dict[str, Any]:
    """Merge known fields over the passthrough fields, dropping unset ones."""
    result = dict(extra)
    for key, value in values.items():
        if value is None:
            continue
        result[key] = list(value) if isinstance(value, tuple) else value
    return result
