"""Tests for global config models."""

import pytest
from pydantic import ValidationError

from cli_agent_config.models.global_config import GlobalConfig, GlobalConfigContent, SisyphusAgentConfig


class TestSisyphusAgentConfig:
    """Tests for SisyphusAgentConfig model."""

    def test_accepts_camel_case_keys(self):
        config = SisyphusAgentConfig.model_validate(
            {"disabled": True, "defaultBuilderEnabled": True, "plannerEnabled": False, "replacePlan": True}
        )

        assert config.disabled is True
        assert config.default_builder_enabled is True
        assert config.planner_enabled is False
        assert config.replace_plan is True

    def test_dumps_snake_case_keys(self):
        config = SisyphusAgentConfig.model_validate({"plannerEnabled": True})

        assert config.model_dump(exclude_none=True) == {"planner_enabled": True}

    def test_is_frozen(self):
        config = SisyphusAgentConfig(disabled=True)

        with pytest.raises(ValidationError):
            config.disabled = False

    @pytest.mark.parametrize("value", ["true", 1, 0])
    def test_rejects_non_bool_flags(self, value):
        with pytest.raises(ValidationError):
            SisyphusAgentConfig.model_validate({"disabled": value})


class TestGlobalConfig:
    """Tests for GlobalConfig model."""

    def test_defaults(self):
        config = GlobalConfig()

        assert config.id == "global"
        assert config.schema_url is None

    def test_schema_serialized_as_schema(self):
        content = GlobalConfigContent(schema_url="https://example.com")

        assert content.model_dump(by_alias=True, exclude_none=True) == {"schema": "https://example.com"}

    def test_to_content_drops_storage_fields(self):
        config = GlobalConfig(id="global", updated_at="2024-01-01T00:00:00", disabled_hooks=["x"])

        content = config.to_content()

        assert isinstance(content, GlobalConfigContent)
        assert not isinstance(content, GlobalConfig)
        assert content.disabled_hooks == ["x"]
