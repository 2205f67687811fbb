"""Tests for profile config models."""

import pytest
from pydantic import ValidationError

from cli_agent_config.models.profile_config import AgentDefinition, ProfileConfig, ProfileConfigContent


class TestAgentDefinition:
    """Tests for AgentDefinition model."""

    def test_keeps_unknown_keys(self):
        agent = AgentDefinition.model_validate({"model": "m", "reasoningEffort": "high"})

        assert agent.model == "m"
        assert agent.model_dump(exclude_none=True) == {"model": "m", "reasoningEffort": "high"}

    def test_all_fields_optional(self):
        assert AgentDefinition().model_dump(exclude_none=True) == {}

    def test_rejects_string_numbers_and_flags(self):
        with pytest.raises(ValidationError):
            AgentDefinition.model_validate({"temperature": "0.5"})
        with pytest.raises(ValidationError):
            AgentDefinition.model_validate({"disable": "yes"})

    def test_accepts_int_temperature(self):
        assert AgentDefinition.model_validate({"temperature": 1}).temperature == 1.0


class TestProfileConfig:
    """Tests for ProfileConfig model."""

    def test_defaults(self):
        config = ProfileConfig()

        assert config.id == ""
        assert config.name == "Unnamed Config"
        assert config.is_applied is False
        assert config.agents == {}

    def test_to_content(self):
        config = ProfileConfig(
            id="a1",
            name="Dev",
            is_applied=True,
            agents={"oracle": AgentDefinition(model="m")},
            created_at="2024-01-01T00:00:00",
        )

        content = config.to_content()

        assert content == ProfileConfigContent(
            name="Dev", is_applied=True, agents={"oracle": AgentDefinition(model="m")}
        )
