"""Typed access to a parameter store with optional and required lookups."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

T = TypeVar("T")

_log = logging.getLogger(__name__)


class ParameterError(RuntimeError):
    """Base class for parameter lookup errors."""


class ParamMissingOnServer(ParameterError):
    """Raised if a required parameter does not exist."""


class WrongParameterType(ParameterError):
    """Raised if a parameter exists but holds a value of the wrong type."""


def _convert(value: Any, param_type: Type[T]) -> Optional[T]:
    if param_type is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)  # type: ignore[return-value]
        return None
    if param_type is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value  # type: ignore[return-value]
        return None
    if isinstance(value, param_type):
        return value
    return None


def get_param(params: Mapping[str, Any], key: str, param_type: Type[T]) -> Optional[T]:
    """Return the parameter as ``param_type``, or None if it does not exist.

    Raises WrongParameterType if the stored value has another type.
    """
    if key not in params:
        _log.warning("Parameter %s doesn't exist on parameter server.", key)
        return None
    value = _convert(params[key], param_type)
    if value is None:
        raise WrongParameterType(f"Parameter {key} has wrong datatype on parameter server.")
    return value


def get_optional_param(params: Mapping[str, Any], key: str, default: T) -> T:
    """Return the parameter, typed like ``default``, or ``default`` if missing."""
    value = get_param(params, key, type(default))
    return default if value is None else value


def get_required_param(params: Mapping[str, Any], key: str, param_type: Type[T]) -> T:
    """Return the parameter; raise ParamMissingOnServer if it does not exist."""
    value = get_param(params, key, param_type)
    if value is None:
        raise ParamMissingOnServer(f"Parameter {key} doesn't exist on parameter server.")
    return value