"""Key lookups that accept both the snake_case and the legacy camelCase spelling.

Records written by older releases used camelCase keys. Every read goes through
these helpers so a field is found under either spelling, with the canonical
(snake_case) key always consulted first. A present value of the wrong type is
treated as missing, so the lookup moves on to the legacy key and finally to
the default.
"""

from typing import Any, Callable, Mapping, Optional


def _lookup(record: Any, canonical_key: str, legacy_key: str, accept: Callable[[Any], bool]) -> Optional[Any]:
    if not isinstance(record, Mapping):
        return None
    for key in (canonical_key, legacy_key):
        if key in record and accept(record[key]):
            return record[key]
    return None


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_present(value: Any) -> bool:
    return value is not None


def get_str_compat(record: Any, canonical_key: str, legacy_key: str, default: str) -> str:
    """Get a string value, falling back to the legacy key and then to ``default``."""
    value = _lookup(record, canonical_key, legacy_key, _is_str)
    return default if value is None else value


def get_optional_str_compat(record: Any, canonical_key: str, legacy_key: str) -> Optional[str]:
    """Get a string value or None when neither key holds a string."""
    return _lookup(record, canonical_key, legacy_key, _is_str)


def get_bool_compat(record: Any, canonical_key: str, legacy_key: str, default: bool) -> bool:
    """Get a boolean value, falling back to the legacy key and then to ``default``."""
    value = _lookup(record, canonical_key, legacy_key, _is_bool)
    return default if value is None else value


def get_value_compat(record: Any, canonical_key: str, legacy_key: str) -> Optional[Any]:
    """Get the raw value under either key. JSON null counts as missing."""
    return _lookup(record, canonical_key, legacy_key, _is_present)
