"""Agent profile config models."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from cli_agent_config.constants import DEFAULT_CONFIG_NAME


class AgentDefinition(BaseModel):
    """Settings for a single oh-my-opencode agent."""
    model_config = ConfigDict(extra="allow", strict=True)

    model: Optional[str] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    prompt: Optional[str] = None
    prompt_append: Optional[str] = None
    description: Optional[str] = None
    mode: Optional[str] = None
    color: Optional[str] = None
    disable: Optional[bool] = None
    tools: Optional[Dict[str, bool]] = None
    permission: Optional[Dict[str, Any]] = None


class ProfileConfigContent(BaseModel):
    """Profile config as written by callers (storage assigns id and timestamps)."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(DEFAULT_CONFIG_NAME, description="Display name of the profile")
    is_applied: bool = Field(False, description="Whether this profile is the one written to disk")
    agents: Dict[str, AgentDefinition] = Field(default_factory=dict, description="Agent name to definition")
    other_fields: Optional[Dict[str, Any]] = Field(None, description="Keys not modelled explicitly")


class ProfileConfig(ProfileConfigContent):
    """Profile config as read back from storage."""

    id: str = Field("", description="Storage-assigned config identifier")
    created_at: Optional[str] = Field(None, description="ISO timestamp of creation")
    updated_at: Optional[str] = Field(None, description="ISO timestamp of last update")

    def to_content(self) -> ProfileConfigContent:
        """Drop the storage-assigned fields."""
        return ProfileConfigContent(
            name=self.name,
            is_applied=self.is_applied,
            agents=self.agents,
            other_fields=self.other_fields,
        )
