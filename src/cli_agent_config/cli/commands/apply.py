"""Apply command for CLI Agent Config CLI."""

import click

from cli_agent_config.services.config_service import apply_profile


@click.command()
@click.argument("config_id")
@click.option("--path", type=click.Path(dir_okay=False), help="Target oh-my-opencode.json file")
def apply(config_id, path):
    """Apply a profile to oh-my-opencode.json."""
    try:
        target = apply_profile(config_id, path)
        click.echo(f"Applied profile {config_id} to {target}")
    except Exception as e:
        raise click.ClickException(str(e))
