"""Deep merge helpers for JSON-shaped configuration records."""

import copy
from typing import Any, Dict, Mapping, MutableMapping, Optional

from cli_agent_config.constants import SISYPHUS_FIELD_KEYS
from cli_agent_config.utils.compat import get_value_compat


def deep_merge_json(base: MutableMapping[str, Any], overlay: Mapping[str, Any]) -> None:
    """Merge ``overlay`` into ``base`` in place.

    Nested mappings are merged recursively; any other overlay value replaces
    the base value. Keys present only in ``base`` are left alone. Values taken
    from ``overlay`` are deep-copied so the result never aliases it.
    """
    if not isinstance(base, MutableMapping) or not isinstance(overlay, Mapping):
        return

    for key, value in overlay.items():
        base_value = base.get(key)
        if key in base and isinstance(base_value, MutableMapping) and isinstance(value, Mapping):
            deep_merge_json(base_value, value)
        else:
            base[key] = copy.deepcopy(value)


def deep_merged(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new dict with ``overlay`` deep-merged onto a copy of ``base``."""
    result = copy.deepcopy(dict(base)) if isinstance(base, Mapping) else {}
    deep_merge_json(result, overlay)
    return result


def merge_sisyphus_config(canonical: Any, legacy: Any) -> Optional[Dict[str, Any]]:
    """Reconcile the snake_case and camelCase sisyphus agent blocks.

    For each known field the canonical block wins and the legacy block fills
    the gaps. The result always uses snake_case keys. A side that is not an
    object contributes nothing; the other side is still used rather than
    dropping the whole block. Returns None when no field was found.
    """
    merged: Dict[str, Any] = {}
    for snake_key, camel_key in SISYPHUS_FIELD_KEYS:
        value = get_value_compat(canonical, snake_key, camel_key)
        if value is None:
            value = get_value_compat(legacy, camel_key, snake_key)
        if value is not None:
            merged[snake_key] = copy.deepcopy(value)

    return merged or None
