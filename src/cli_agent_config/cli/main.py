"""Main CLI entry point for CLI Agent Config."""

import click

from cli_agent_config.cli.commands.apply import apply
from cli_agent_config.cli.commands.global_config import global_config
from cli_agent_config.cli.commands.init import init
from cli_agent_config.cli.commands.profiles import list_profiles, show
from cli_agent_config.utils.logging import setup_logging


@click.group()
@click.option("--log-file", is_flag=True, help="Write logs to a file under the data directory.")
def cli(log_file):
    """CLI Agent Config."""
    if log_file:
        setup_logging()


# Register commands
cli.add_command(init)
cli.add_command(list_profiles)
cli.add_command(show)
cli.add_command(apply)
cli.add_command(global_config)


if __name__ == "__main__":
    cli()
