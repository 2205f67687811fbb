"""Init command for CLI Agent Config CLI."""

import click

from cli_agent_config.utils.database import init_database


@click.command()
def init():
    """Initialize CLI Agent Config database."""
    try:
        init_database()
        click.echo("CLI Agent Config initialized successfully")
    except Exception as e:
        raise click.ClickException(str(e))
