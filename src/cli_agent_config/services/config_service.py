"""Config service with workflow functions.

This module ties the record store, the config adapter and the on-disk
``oh-my-opencode.json`` file together.

Key Responsibilities:
- Profile lifecycle management (create, get, list, update, delete)
- Global config read/save
- Applying a profile: rendering the oh-my-opencode document and merging it
  into the existing file without dropping keys this tool does not manage
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from cli_agent_config.adapters.config_adapter import (
    from_db_value,
    global_config_from_db_value,
    global_config_to_db_value,
    to_db_value,
)
from cli_agent_config.clients.database import (
    delete_profile_record,
    get_global_record,
    get_profile_record,
    insert_profile_record,
    list_profile_records,
    set_applied_profile,
    update_profile_record,
    upsert_global_record,
)
from cli_agent_config.constants import DEFAULT_SCHEMA_URL, OH_MY_OPENCODE_CONFIG_FILE
from cli_agent_config.models.global_config import GlobalConfig, GlobalConfigContent
from cli_agent_config.models.profile_config import ProfileConfig, ProfileConfigContent
from cli_agent_config.utils.merge import deep_merge_json, deep_merged

logger = logging.getLogger(__name__)


def create_profile(content: ProfileConfigContent) -> ProfileConfig:
    """Store a new profile and return it as read back from storage."""
    record = insert_profile_record(to_db_value(content))
    profile = from_db_value(record)
    logger.info(f"Created profile {profile.id} ({profile.name})")
    return profile


def get_profile(config_id: str) -> ProfileConfig:
    """Get a profile by ID.

    Raises:
        ValueError: If the profile does not exist
    """
    record = get_profile_record(config_id)
    if record is None:
        raise ValueError(f"Profile '{config_id}' not found")
    return from_db_value(record)


def list_profiles() -> List[ProfileConfig]:
    """List all stored profiles."""
    return [from_db_value(record) for record in list_profile_records()]


def update_profile(config_id: str, content: ProfileConfigContent) -> ProfileConfig:
    """Replace the content of an existing profile.

    Raises:
        ValueError: If the profile does not exist
    """
    record = update_profile_record(config_id, to_db_value(content))
    if record is None:
        raise ValueError(f"Profile '{config_id}' not found")
    logger.info(f"Updated profile {config_id}")
    return from_db_value(record)


def delete_profile(config_id: str) -> bool:
    """Delete a profile. Returns False if it did not exist."""
    deleted = delete_profile_record(config_id)
    if deleted:
        logger.info(f"Deleted profile {config_id}")
    return deleted


def get_global_config() -> GlobalConfig:
    """Get the global config; an empty record is used when none was saved."""
    return global_config_from_db_value(get_global_record() or {})


def save_global_config(content: GlobalConfigContent) -> GlobalConfig:
    """Create or replace the global config."""
    record = upsert_global_record(global_config_to_db_value(content))
    logger.info("Saved global config")
    return global_config_from_db_value(record)


def build_oh_my_opencode_document(
    global_config: GlobalConfig, profile: Optional[ProfileConfig] = None
) -> Dict[str, Any]:
    """Render the oh-my-opencode.json document for a global config and profile.

    Unmodelled global keys form the base, modelled global fields go on top,
    then the profile's unmodelled keys and its agents.
    """
    managed: Dict[str, Any] = {"$schema": global_config.schema_url or DEFAULT_SCHEMA_URL}
    if global_config.sisyphus_agent is not None:
        managed["sisyphus_agent"] = global_config.sisyphus_agent.model_dump(mode="json", exclude_none=True)
    for field in ("disabled_agents", "disabled_mcps", "disabled_hooks", "lsp", "experimental"):
        value = getattr(global_config, field)
        if value is not None:
            managed[field] = value

    document = deep_merged(global_config.other_fields or {}, managed)

    if profile is not None:
        deep_merge_json(document, profile.other_fields or {})
        agents = {
            name: definition.model_dump(mode="json", exclude_none=True)
            for name, definition in profile.agents.items()
        }
        deep_merge_json(document, {"agents": agents})

    return document


def _read_json_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        existing = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return {}
    if not isinstance(existing, dict):
        logger.warning(f"Ignoring config file {path}: root is not an object")
        return {}
    return existing


def apply_profile(config_id: str, path: Optional[Union[str, Path]] = None) -> Path:
    """Mark a profile as applied and write it into oh-my-opencode.json.

    The rendered document is deep-merged into the existing file, so keys that
    are not managed here survive.

    Raises:
        ValueError: If the profile does not exist
    """
    if not set_applied_profile(config_id):
        raise ValueError(f"Profile '{config_id}' not found")

    profile = get_profile(config_id)
    target = Path(path) if path is not None else OH_MY_OPENCODE_CONFIG_FILE

    document = _read_json_file(target)
    deep_merge_json(document, build_oh_my_opencode_document(get_global_config(), profile))

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.info(f"Applied profile {config_id} to {target}")
    return target
