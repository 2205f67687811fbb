"""Profile listing commands for CLI Agent Config CLI."""

import json

import click

from cli_agent_config.adapters.config_adapter import to_db_value
from cli_agent_config.services import config_service


@click.command("list")
def list_profiles():
    """List stored agent profiles."""
    try:
        profiles = config_service.list_profiles()
        if not profiles:
            click.echo("No profiles found.")
            return
        for profile in profiles:
            marker = "*" if profile.is_applied else " "
            click.echo(f"{marker} {profile.id}  {profile.name}  ({len(profile.agents)} agents)")
    except Exception as e:
        raise click.ClickException(str(e))


@click.command()
@click.argument("config_id")
def show(config_id):
    """Show a stored agent profile as JSON."""
    try:
        profile = config_service.get_profile(config_id)
        record = to_db_value(profile.to_content())
        record["config_id"] = profile.id
        click.echo(json.dumps(record, indent=2, ensure_ascii=False))
    except Exception as e:
        raise click.ClickException(str(e))
