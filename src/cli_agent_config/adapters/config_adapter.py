"""Conversion between stored config records and typed config models.

Records come from the store as plain JSON-shaped dicts and may use either the
current snake_case keys or the camelCase keys written by older releases. The
read functions below never raise: a malformed field falls back to its
default (or None), and the rest of the record is still used. The write
functions always emit snake_case keys and return an empty record, after
logging, when the content cannot be represented as JSON.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from cli_agent_config.constants import (
    CONFIG_ID_KEYS,
    CREATED_AT_KEYS,
    DEFAULT_CONFIG_NAME,
    DISABLED_AGENTS_KEYS,
    DISABLED_HOOKS_KEYS,
    DISABLED_MCPS_KEYS,
    EXPERIMENTAL_KEYS,
    GLOBAL_CONFIG_ID,
    IS_APPLIED_KEYS,
    LSP_KEYS,
    NAME_KEYS,
    OTHER_FIELDS_KEYS,
    SCHEMA_KEYS,
    SISYPHUS_AGENT_KEYS,
    UPDATED_AT_KEYS,
)
from cli_agent_config.models.global_config import GlobalConfig, GlobalConfigContent, SisyphusAgentConfig
from cli_agent_config.models.profile_config import AgentDefinition, ProfileConfig, ProfileConfigContent
from cli_agent_config.utils.compat import (
    get_bool_compat,
    get_optional_str_compat,
    get_str_compat,
    get_value_compat,
)
from cli_agent_config.utils.merge import merge_sisyphus_config

logger = logging.getLogger(__name__)

_STRING_LIST = TypeAdapter(List[str], config=ConfigDict(strict=True))
_OBJECT = TypeAdapter(Dict[str, Any], config=ConfigDict(strict=True))
_SISYPHUS = TypeAdapter(SisyphusAgentConfig)


class SerializationResult(BaseModel):
    """Outcome of serializing a content model to a record."""

    success: bool
    record: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


def _parse_optional(adapter: TypeAdapter, raw: Any) -> Optional[Any]:
    """Validate ``raw`` against ``adapter``; missing or malformed yields None."""
    if raw is None:
        return None
    try:
        return adapter.validate_python(raw)
    except ValidationError:
        return None


def _parse_agent(raw: Any) -> AgentDefinition:
    try:
        return AgentDefinition.model_validate(raw)
    except ValidationError:
        return AgentDefinition()


def _parse_agents(raw: Any) -> Dict[str, AgentDefinition]:
    if not isinstance(raw, Mapping):
        return {}
    return {str(name): _parse_agent(definition) for name, definition in raw.items()}


def _resolve_sisyphus_agent(value: Any) -> Optional[Any]:
    """Pick the sisyphus block, reconciling both spellings when both exist."""
    canonical_key, legacy_key = SISYPHUS_AGENT_KEYS
    canonical = get_value_compat(value, canonical_key, canonical_key)
    legacy = get_value_compat(value, legacy_key, legacy_key)

    if canonical is not None and legacy is not None:
        return merge_sisyphus_config(canonical, legacy)
    if canonical is not None:
        return canonical
    return legacy


def _drop_none(record: Dict[str, Any], keys: Optional[Any] = None) -> Dict[str, Any]:
    return {
        key: item
        for key, item in record.items()
        if item is not None or (keys is not None and key not in keys)
    }


def _serialize(content: BaseModel, kind: str) -> SerializationResult:
    """Dump ``content`` with canonical keys, checking that the result is valid JSON.

    The check runs on the python-mode dump: the JSON-mode dump turns inf/nan
    inside untyped mappings into None, which would hide them.
    """
    try:
        json.dumps(content.model_dump(mode="python"), allow_nan=False)
        record = _drop_none(content.model_dump(mode="json", by_alias=True))
        if isinstance(record.get("sisyphus_agent"), dict):
            record["sisyphus_agent"] = _drop_none(record["sisyphus_agent"])
        if isinstance(record.get("agents"), dict):
            record["agents"] = {
                name: _drop_none(definition, AgentDefinition.model_fields)
                for name, definition in record["agents"].items()
            }
    except (PydanticSerializationError, TypeError, ValueError) as e:
        return SerializationResult(success=False, error=f"Failed to serialize {kind}: {e}")
    return SerializationResult(success=True, record=record)


def _record_or_empty(result: SerializationResult, log: Optional[logging.Logger]) -> Dict[str, Any]:
    if result.success and result.record is not None:
        return result.record
    (log or logger).error(result.error)
    return {}


def from_db_value(value: Any) -> ProfileConfig:
    """Convert a stored record to a ProfileConfig, tolerating bad or missing fields."""
    return ProfileConfig(
        id=get_str_compat(value, *CONFIG_ID_KEYS, ""),
        name=get_str_compat(value, *NAME_KEYS, DEFAULT_CONFIG_NAME),
        is_applied=get_bool_compat(value, *IS_APPLIED_KEYS, False),
        agents=_parse_agents(get_value_compat(value, "agents", "agents")),
        other_fields=_parse_optional(_OBJECT, get_value_compat(value, *OTHER_FIELDS_KEYS)),
        created_at=get_optional_str_compat(value, *CREATED_AT_KEYS),
        updated_at=get_optional_str_compat(value, *UPDATED_AT_KEYS),
    )


def to_db_value(content: ProfileConfigContent, log: Optional[logging.Logger] = None) -> Dict[str, Any]:
    """Convert profile content to a record with snake_case keys.

    Returns an empty record (after logging) if the content cannot be serialized.
    """
    return _record_or_empty(_serialize(content, "oh-my-opencode config content"), log)


def global_config_from_db_value(value: Any) -> GlobalConfig:
    """Convert a stored record to a GlobalConfig, tolerating bad or missing fields."""
    return GlobalConfig(
        id=get_str_compat(value, *CONFIG_ID_KEYS, GLOBAL_CONFIG_ID),
        schema_url=get_optional_str_compat(value, *SCHEMA_KEYS),
        sisyphus_agent=_parse_optional(_SISYPHUS, _resolve_sisyphus_agent(value)),
        disabled_agents=_parse_optional(_STRING_LIST, get_value_compat(value, *DISABLED_AGENTS_KEYS)),
        disabled_mcps=_parse_optional(_STRING_LIST, get_value_compat(value, *DISABLED_MCPS_KEYS)),
        disabled_hooks=_parse_optional(_STRING_LIST, get_value_compat(value, *DISABLED_HOOKS_KEYS)),
        lsp=_parse_optional(_OBJECT, get_value_compat(value, *LSP_KEYS)),
        experimental=_parse_optional(_OBJECT, get_value_compat(value, *EXPERIMENTAL_KEYS)),
        other_fields=_parse_optional(_OBJECT, get_value_compat(value, *OTHER_FIELDS_KEYS)),
        updated_at=get_optional_str_compat(value, *UPDATED_AT_KEYS),
    )


def global_config_to_db_value(content: GlobalConfigContent, log: Optional[logging.Logger] = None) -> Dict[str, Any]:
    """Convert global content to a record with snake_case keys.

    Returns an empty record (after logging) if the content cannot be serialized.
    """
    return _record_or_empty(_serialize(content, "oh-my-opencode global config content"), log)
