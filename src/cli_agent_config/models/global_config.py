"""Global (singleton) oh-my-opencode config models."""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from cli_agent_config.constants import GLOBAL_CONFIG_ID


class SisyphusAgentConfig(BaseModel):
    """Sisyphus orchestrator agent switches.

    Accepts both snake_case and camelCase keys, always serializes snake_case.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    disabled: Optional[bool] = None
    default_builder_enabled: Optional[bool] = Field(
        None, validation_alias=AliasChoices("default_builder_enabled", "defaultBuilderEnabled")
    )
    planner_enabled: Optional[bool] = Field(
        None, validation_alias=AliasChoices("planner_enabled", "plannerEnabled")
    )
    replace_plan: Optional[bool] = Field(
        None, validation_alias=AliasChoices("replace_plan", "replacePlan")
    )


class GlobalConfigContent(BaseModel):
    """Global config as written by callers."""
    model_config = ConfigDict(frozen=True)

    schema_url: Optional[str] = Field(None, serialization_alias="schema", description="JSON schema URL")
    sisyphus_agent: Optional[SisyphusAgentConfig] = None
    disabled_agents: Optional[List[str]] = None
    disabled_mcps: Optional[List[str]] = None
    disabled_hooks: Optional[List[str]] = None
    lsp: Optional[Dict[str, Any]] = None
    experimental: Optional[Dict[str, Any]] = None
    other_fields: Optional[Dict[str, Any]] = None


class GlobalConfig(GlobalConfigContent):
    """Global config as read back from storage."""

    id: str = Field(GLOBAL_CONFIG_ID, description="Singleton identifier")
    updated_at: Optional[str] = Field(None, description="ISO timestamp of last update")

    def to_content(self) -> GlobalConfigContent:
        """Drop the storage-assigned fields."""
        return GlobalConfigContent(
            schema_url=self.schema_url,
            sisyphus_agent=self.sisyphus_agent,
            disabled_agents=self.disabled_agents,
            disabled_mcps=self.disabled_mcps,
            disabled_hooks=self.disabled_hooks,
            lsp=self.lsp,
            experimental=self.experimental,
            other_fields=self.other_fields,
        )
