"""Constants for CLI Agent Config."""

import os
from pathlib import Path

# Runtime locations
CAC_HOME_DIR = Path(os.environ.get("CAC_HOME", str(Path.home() / ".cli-agent-config"))).expanduser()
DB_DIR = CAC_HOME_DIR / "db"
DATABASE_FILE = DB_DIR / "cli-agent-config.db"
DATABASE_URL = f"sqlite:///{DATABASE_FILE}"
LOG_DIR = CAC_HOME_DIR / "logs"

OPENCODE_CONFIG_DIR = Path(
    os.environ.get("OPENCODE_CONFIG_DIR", str(Path.home() / ".config" / "opencode"))
).expanduser()
OH_MY_OPENCODE_CONFIG_FILE = OPENCODE_CONFIG_DIR / "oh-my-opencode.json"

# Defaults applied by the read path
DEFAULT_CONFIG_NAME = "Unnamed Config"
GLOBAL_CONFIG_ID = "global"
DEFAULT_SCHEMA_URL = (
    "https://raw.githubusercontent.com/code-yeongyu/oh-my-opencode/master/assets/oh-my-opencode.schema.json"
)

# (canonical snake_case, legacy camelCase) record keys
CONFIG_ID_KEYS = ("config_id", "configId")
NAME_KEYS = ("name", "name")
IS_APPLIED_KEYS = ("is_applied", "isApplied")
CREATED_AT_KEYS = ("created_at", "createdAt")
UPDATED_AT_KEYS = ("updated_at", "updatedAt")
OTHER_FIELDS_KEYS = ("other_fields", "otherFields")
SCHEMA_KEYS = ("schema", "$schema")
SISYPHUS_AGENT_KEYS = ("sisyphus_agent", "sisyphusAgent")
DISABLED_AGENTS_KEYS = ("disabled_agents", "disabledAgents")
DISABLED_MCPS_KEYS = ("disabled_mcps", "disabledMcps")
DISABLED_HOOKS_KEYS = ("disabled_hooks", "disabledHooks")
LSP_KEYS = ("lsp", "lsp")
EXPERIMENTAL_KEYS = ("experimental", "experimental")

# Fields reconciled between the two spellings of the sisyphus agent block
SISYPHUS_FIELD_KEYS = (
    ("disabled", "disabled"),
    ("default_builder_enabled", "defaultBuilderEnabled"),
    ("planner_enabled", "plannerEnabled"),
    ("replace_plan", "replacePlan"),
)
