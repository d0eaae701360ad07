import click

from sales.infrastructure.cli.sale_commands import sales_demo, sales_run
from sales.infrastructure.logging_config import configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Verbosity of the diagnostic log written to stderr.",
)
def cli(log_level: str) -> None:
    """Sales: in-memory sales management"""
    configure_logging(log_level.upper())


# Register subcommands
cli.add_command(sales_demo)
cli.add_command(sales_run)
