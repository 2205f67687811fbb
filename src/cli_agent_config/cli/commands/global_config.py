"""Global config command for CLI Agent Config CLI."""

import json

import click

from cli_agent_config.adapters.config_adapter import global_config_to_db_value
from cli_agent_config.services.config_service import get_global_config


@click.command("global")
def global_config():
    """Show the global oh-my-opencode config as JSON."""
    try:
        config = get_global_config()
        click.echo(json.dumps(global_config_to_db_value(config.to_content()), indent=2, ensure_ascii=False))
    except Exception as e:
        raise click.ClickException(str(e))
